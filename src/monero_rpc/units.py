from decimal import Decimal, InvalidOperation
from typing import Union

from .errors import ValidationError

ATOMIC_UNITS_PER_XMR = Decimal(10) ** 12

Amount = Union[Decimal, int, str]


def xmr_to_atomic(amount: Amount) -> int:
    """Convert XMR to piconero. Floats are rejected; pass a Decimal or string."""
    if isinstance(amount, float):
        raise ValidationError("pass XMR amounts as Decimal, int or str, not float")
    try:
        atomic = Decimal(amount) * ATOMIC_UNITS_PER_XMR
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(f"amount is not a number: {amount!r}") from None
    if atomic != atomic.to_integral_value():
        raise ValidationError(f"amount {amount} has more than 12 decimal places")
    return int(atomic)


def atomic_to_xmr(atomic: int) -> Decimal:
    return Decimal(int(atomic)) / ATOMIC_UNITS_PER_XMR
