__version__ = "0.1.0"

from .autoconnect import AutoconnectProbe, ProbeState
from .candidates import build_candidates, fisher_yates
from .config import ClientConfig, Endpoint, load_known_endpoints
from .daemon import DaemonRPC
from .dispatcher import EndpointKind, RequestDispatcher
from .errors import (
    AutoconnectError,
    MoneroRPCError,
    NotConnectedError,
    RPCResponseError,
    TransportError,
    ValidationError,
    raise_for_error,
)
from .units import atomic_to_xmr, xmr_to_atomic
from .wallet import WalletRPC

__all__ = [
    "AutoconnectError",
    "AutoconnectProbe",
    "ClientConfig",
    "DaemonRPC",
    "Endpoint",
    "EndpointKind",
    "MoneroRPCError",
    "NotConnectedError",
    "ProbeState",
    "RPCResponseError",
    "RequestDispatcher",
    "TransportError",
    "ValidationError",
    "WalletRPC",
    "atomic_to_xmr",
    "build_candidates",
    "fisher_yates",
    "load_known_endpoints",
    "raise_for_error",
    "xmr_to_atomic",
]
