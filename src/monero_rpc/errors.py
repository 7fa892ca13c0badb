"""Exception hierarchy shared by the transport, dispatcher and facades."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .config import Endpoint


class MoneroRPCError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(MoneroRPCError, ValueError):
    """A required argument is missing or a local option is invalid."""


class NotConnectedError(MoneroRPCError):
    """The facade has no active endpoint yet."""


@dataclass
class TransportError(MoneroRPCError):
    """The HTTP exchange itself failed."""

    message: str
    url: Optional[str] = None
    http_status: Optional[int] = None
    body: Optional[str] = None
    cause: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - representational only
        suffix = []
        if self.url:
            suffix.append(f"url={self.url}")
        if self.http_status is not None:
            suffix.append(f"status={self.http_status}")
        if self.body:
            suffix.append(f"body={self.body[:200]}")
        if self.cause:
            suffix.append(f"cause={self.cause}")
        detail = ", ".join(suffix)
        return f"{self.message} ({detail})" if detail else self.message


@dataclass
class RPCResponseError(MoneroRPCError):
    code: Optional[int]
    message: str
    data: Any = None

    def __str__(self) -> str:  # pragma: no cover - representational only
        return f"RPC error {self.code}: {self.message}"


@dataclass
class AutoconnectError(MoneroRPCError):
    """No candidate endpoint answered the liveness call."""

    attempts: List[Tuple["Endpoint", TransportError]] = field(default_factory=list)

    def __str__(self) -> str:
        if not self.attempts:
            return "autoconnect failed: no candidate endpoints"
        tried = ", ".join(endpoint.base_url for endpoint, _ in self.attempts)
        return f"autoconnect failed after {len(self.attempts)} candidates: {tried}"


def raise_for_error(response: Any) -> Any:
    """Raise RPCResponseError when ``response`` carries an ``error`` object.

    Dispatch never raises on RPC-level errors; callers who prefer exceptions
    pass responses through this helper.
    """
    if isinstance(response, dict) and isinstance(response.get("error"), dict):
        error = response["error"]
        raise RPCResponseError(code=error.get("code"), message=str(error.get("message", "")), data=error.get("data"))
    return response
