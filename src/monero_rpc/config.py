from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import yaml

from . import __version__
from .errors import ValidationError

PROTOCOLS = ("http", "https")
KNOWN_NODES_RESOURCE = "nodes.yaml"


@dataclass(frozen=True)
class Endpoint:
    hostname: str = "127.0.0.1"
    port: int = 18081
    protocol: str = "http"
    user: Optional[str] = None
    password: Optional[str] = None

    def __post_init__(self) -> None:
        if self.protocol not in PROTOCOLS:
            raise ValidationError(f"unsupported protocol {self.protocol!r}; expected one of {PROTOCOLS}")

    @property
    def base_url(self) -> str:
        host = f"[{self.hostname}]" if ":" in self.hostname and not self.hostname.startswith("[") else self.hostname
        return f"{self.protocol}://{host}:{self.port}"

    @property
    def credentials(self) -> Optional[Tuple[str, str]]:
        if self.user is None:
            return None
        return self.user, self.password if self.password is not None else ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], defaults: Optional["Endpoint"] = None) -> "Endpoint":
        # Only absent keys fall back; a present falsy value (port 0, "") is kept.
        base = defaults or cls()
        unknown = set(data) - {"hostname", "port", "protocol", "user", "pass", "password"}
        if unknown:
            raise ValidationError(f"unknown endpoint fields: {sorted(unknown)}")
        password = data["password"] if "password" in data else data.get("pass", base.password)
        try:
            port = int(data["port"]) if "port" in data else base.port
        except (TypeError, ValueError):
            raise ValidationError(f"endpoint port is not an integer: {data['port']!r}") from None
        return cls(
            hostname=str(data["hostname"]) if "hostname" in data else base.hostname,
            port=port,
            protocol=str(data["protocol"]) if "protocol" in data else base.protocol,
            user=data["user"] if "user" in data else base.user,
            password=password,
        )


@dataclass(frozen=True)
class ClientConfig:
    timeout: float = 30.0
    user_agent: str = f"monero-rpc-client/{__version__}"
    autosave: bool = True


def _parse_yaml(text: str, source: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValidationError(f"{source} is not valid YAML: {exc}") from None


def _read_text(path: Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ValidationError(f"cannot read {path}: {exc.strerror or exc}") from None


def load_known_endpoints(path: Optional[Path] = None) -> List[Endpoint]:
    if path is None:
        text = resources.files("monero_rpc.data").joinpath(KNOWN_NODES_RESOURCE).read_text(encoding="utf-8")
        source = KNOWN_NODES_RESOURCE
    else:
        text = _read_text(path)
        source = str(path)
    document = _parse_yaml(text, source) or {}
    nodes = document.get("nodes", []) if isinstance(document, dict) else []
    return [Endpoint.from_mapping(entry) for entry in nodes]


def load_config(config_path: Path) -> Dict[str, Any]:
    document = _parse_yaml(_read_text(config_path), str(config_path)) or {}
    if not isinstance(document, dict):
        raise ValidationError(f"{config_path} must contain a mapping")
    return document
