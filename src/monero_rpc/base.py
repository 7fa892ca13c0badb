import logging
import random
from typing import Any, ClassVar, Dict, Mapping, Optional, Sequence, Tuple, Type, TypeVar, Union

from .autoconnect import AutoconnectProbe
from .candidates import build_candidates, local_endpoints
from .config import ClientConfig, Endpoint
from .dispatcher import EndpointKind, RequestDispatcher
from .errors import MoneroRPCError, NotConnectedError, ValidationError
from .http_client import HttpClient

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="BaseRPC")


class BaseRPC:
    """Shared plumbing for the daemon and wallet facades."""

    default_port: ClassVar[int] = 18081
    local_ports: ClassVar[Tuple[int, ...]] = ()
    liveness_method: ClassVar[str] = ""

    def __init__(
        self,
        endpoint: Optional[Endpoint] = None,
        config: Optional[ClientConfig] = None,
        http: Optional[HttpClient] = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.http = http or HttpClient(timeout=self.config.timeout, user_agent=self.config.user_agent)
        self._endpoint = endpoint
        self._dispatcher: Optional[RequestDispatcher] = None
        if endpoint is not None:
            self._dispatcher = RequestDispatcher(endpoint, self.http)

    @classmethod
    def from_config(
        cls: Type[R],
        descriptor: Union[Endpoint, Mapping[str, Any]],
        config: Optional[ClientConfig] = None,
        http: Optional[HttpClient] = None,
    ) -> R:
        if not isinstance(descriptor, Endpoint):
            descriptor = Endpoint.from_mapping(descriptor, defaults=Endpoint(port=cls.default_port))
        return cls(descriptor, config=config, http=http)

    @classmethod
    def from_fields(
        cls: Type[R],
        hostname: str = "127.0.0.1",
        port: Optional[int] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
        protocol: str = "http",
        config: Optional[ClientConfig] = None,
        http: Optional[HttpClient] = None,
    ) -> R:
        endpoint = Endpoint(
            hostname=hostname,
            port=cls.default_port if port is None else port,
            protocol=protocol,
            user=user,
            password=password,
        )
        return cls(endpoint, config=config, http=http)

    @property
    def endpoint(self) -> Optional[Endpoint]:
        return self._endpoint

    @property
    def is_connected(self) -> bool:
        return self._dispatcher is not None

    def known_endpoints(self) -> Sequence[Endpoint]:
        return []

    def connect(
        self: R,
        randomize: bool = False,
        candidates: Optional[Sequence[Endpoint]] = None,
        rng: Optional[random.Random] = None,
    ) -> R:
        """Probe candidate endpoints and adopt the first one that answers.

        The endpoint given at construction (if any) is tried first, then
        the local default ports, then ``candidates`` (or the facade's
        built-in list of known endpoints), shuffled when ``randomize``.
        Raises AutoconnectError when none answers.
        """
        ordered = build_candidates(
            self._endpoint,
            randomize,
            known=self.known_endpoints() if candidates is None else candidates,
            local=local_endpoints(self.local_ports),
            rng=rng,
        )
        probe = AutoconnectProbe(ordered, self._probe)
        endpoint = probe.resolve()
        self._endpoint = endpoint
        self._dispatcher = RequestDispatcher(endpoint, self.http)
        return self

    def _probe(self, endpoint: Endpoint) -> Any:
        return RequestDispatcher(endpoint, self.http).dispatch(self.liveness_method)

    def call(self, method: str, params: Optional[Any] = None) -> Any:
        return self._active().dispatch(method, params)

    def call_extension(self, path: str, params: Optional[Any] = None) -> Any:
        return self._active().dispatch(path, params, kind=EndpointKind.EXTENSION)

    def _active(self) -> RequestDispatcher:
        if self._dispatcher is None:
            raise NotConnectedError(f"{type(self).__name__} has no endpoint; pass one or call connect()")
        return self._dispatcher

    def close(self) -> None:
        self.http.close()

    def __enter__(self: R) -> R:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def require(**values: Any) -> None:
    for name, value in values.items():
        if value is None:
            raise ValidationError(f"{name} required")


def compact(**values: Any) -> Dict[str, Any]:
    """Drop optional params the caller left unset."""
    return {key: value for key, value in values.items() if value is not None}


def persist(rpc: BaseRPC, result: Any) -> Any:
    """Follow a wallet mutation with a best-effort ``store`` call.

    The store outcome never changes ``result``.
    """
    if not rpc.config.autosave:
        return result
    try:
        rpc.call("store")
    except MoneroRPCError as exc:
        logger.warning("store after mutation failed: %s", exc)
    return result
