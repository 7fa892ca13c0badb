import enum
from typing import Any, Dict, Optional

from .config import Endpoint
from .http_client import HttpClient, auth_for


JSONRPC_VERSION = "2.0"
REQUEST_ID = "0"


class EndpointKind(enum.Enum):
    JSON_RPC = "json_rpc"
    EXTENSION = "extension"


def build_envelope(method: str, params: Any = None) -> Dict[str, Any]:
    envelope: Dict[str, Any] = {"jsonrpc": JSONRPC_VERSION, "id": REQUEST_ID, "method": method}
    if params is not None:
        envelope["params"] = params
    return envelope


def unwrap(body: Any) -> Any:
    if isinstance(body, dict) and "result" in body:
        return body["result"]
    return body


class RequestDispatcher:
    """Turns a method name and params into one HTTP POST.

    RPC-level errors are not interpreted: a body carrying ``error`` is
    returned to the caller as-is. Transport failures propagate as
    :class:`~monero_rpc.errors.TransportError`.
    """

    def __init__(self, endpoint: Endpoint, http: HttpClient) -> None:
        self.endpoint = endpoint
        self.http = http
        self._auth = auth_for(endpoint.credentials)

    def url_for(self, method: str, kind: EndpointKind) -> str:
        path = "json_rpc" if kind is EndpointKind.JSON_RPC else method.lstrip("/")
        return f"{self.endpoint.base_url}/{path}"

    def dispatch(self, method: str, params: Optional[Any] = None, kind: EndpointKind = EndpointKind.JSON_RPC) -> Any:
        if kind is EndpointKind.JSON_RPC:
            payload = build_envelope(method, params)
        else:
            payload = params if params is not None else {}
        body = self.http.post_json(self.url_for(method, kind), payload, auth=self._auth)
        return unwrap(body)
