import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .base import BaseRPC
from .config import ClientConfig, Endpoint, load_config, load_known_endpoints
from .daemon import DaemonRPC
from .errors import MoneroRPCError, ValidationError
from .wallet import WalletRPC

FACADES = {"daemon": DaemonRPC, "wallet": WalletRPC}
ENDPOINT_FLAGS = ("hostname", "port", "user", "password", "protocol")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="monero-rpc", description="Call a monerod or monero-wallet-rpc method")
    parser.add_argument("service", choices=sorted(FACADES))
    parser.add_argument("method", help="RPC method name, or path for --extension calls")
    parser.add_argument("--params", default=None, help="JSON-encoded params")
    parser.add_argument("--extension", action="store_true", help="Post raw params to /<method> instead of /json_rpc")
    parser.add_argument("--config", type=Path, default=None, help="YAML file with endpoint and client options")
    parser.add_argument("--host", dest="hostname", default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--user", default=None)
    parser.add_argument("--password", default=None)
    parser.add_argument("--protocol", choices=("http", "https"), default=None)
    parser.add_argument("--timeout", type=float, default=None)
    parser.add_argument("--autoconnect", action="store_true", help="Probe local and known endpoints")
    parser.add_argument("--random", action="store_true", help="Shuffle known endpoints before probing")
    parser.add_argument("--nodes", type=Path, default=None, help="YAML list of known endpoints for --autoconnect")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def build_facade(args: argparse.Namespace, settings: Dict[str, Any]) -> BaseRPC:
    facade_cls = FACADES[args.service]
    endpoint_fields: Dict[str, Any] = dict(settings.get(args.service) or {})
    for flag in ENDPOINT_FLAGS:
        value = getattr(args, flag)
        if value is not None:
            endpoint_fields[flag] = value

    client = dict(settings.get("client") or {})
    if args.timeout is not None:
        client["timeout"] = args.timeout
    try:
        config = ClientConfig(**client)
    except TypeError as exc:
        raise ValidationError(f"invalid client options: {exc}") from None

    endpoint: Optional[Endpoint] = None
    if endpoint_fields or not args.autoconnect:
        endpoint = Endpoint.from_mapping(endpoint_fields, defaults=Endpoint(port=facade_cls.default_port))
    facade = facade_cls(endpoint, config=config)

    if args.autoconnect:
        known = load_known_endpoints(args.nodes) if args.nodes else None
        facade.connect(randomize=args.random, candidates=known)
    return facade


def run(args: argparse.Namespace) -> Any:
    settings = load_config(args.config) if args.config else {}
    try:
        params = json.loads(args.params) if args.params is not None else None
    except ValueError as exc:
        raise ValidationError(f"--params is not valid JSON: {exc}") from None

    with build_facade(args, settings) as facade:
        if args.extension:
            return facade.call_extension(args.method, params)
        return facade.call(args.method, params)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    try:
        result = run(args)
    except MoneroRPCError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2, sort_keys=True))
    return 0
