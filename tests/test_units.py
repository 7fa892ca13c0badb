import unittest
from decimal import Decimal

from monero_rpc.errors import RPCResponseError, ValidationError, raise_for_error
from monero_rpc.units import atomic_to_xmr, xmr_to_atomic


class UnitsTests(unittest.TestCase):
    def test_round_values(self) -> None:
        self.assertEqual(xmr_to_atomic(1), 10**12)
        self.assertEqual(xmr_to_atomic("0.000000000001"), 1)
        self.assertEqual(atomic_to_xmr(140000000000), Decimal("0.14"))

    def test_rejects_sub_piconero_and_floats(self) -> None:
        with self.assertRaises(ValidationError):
            xmr_to_atomic("0.0000000000001")
        with self.assertRaises(ValidationError):
            xmr_to_atomic(0.1)
        with self.assertRaises(ValidationError):
            xmr_to_atomic("lots")


class RaiseForErrorTests(unittest.TestCase):
    def test_raises_on_error_payload(self) -> None:
        with self.assertRaises(RPCResponseError) as ctx:
            raise_for_error({"error": {"code": -21, "message": "Wallet already exists."}})
        self.assertEqual(ctx.exception.code, -21)

    def test_returns_other_payloads(self) -> None:
        self.assertEqual(raise_for_error({"count": 3}), {"count": 3})
        self.assertEqual(raise_for_error("OK"), "OK")


if __name__ == "__main__":
    unittest.main()
