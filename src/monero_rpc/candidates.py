import random
from typing import Iterable, List, Optional, Sequence, TypeVar

from .config import Endpoint, load_known_endpoints

T = TypeVar("T")

DAEMON_LOCAL_PORTS = (18081, 28081, 38081)
WALLET_LOCAL_PORTS = (18082, 28082, 38082)


def fisher_yates(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Return a uniformly permuted copy of ``items``."""
    rng = rng or random.Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def local_endpoints(ports: Iterable[int], hostname: str = "127.0.0.1") -> List[Endpoint]:
    return [Endpoint(hostname=hostname, port=port) for port in ports]


def build_candidates(
    requested: Optional[Endpoint],
    shuffle: bool,
    known: Optional[Sequence[Endpoint]] = None,
    local: Optional[Sequence[Endpoint]] = None,
    rng: Optional[random.Random] = None,
) -> List[Endpoint]:
    """Order endpoints for autoconnect: requested, then local, then known.

    Only the known list is shuffled, so a requested endpoint is always
    tried first and local services always precede remote ones.
    """
    remote = list(load_known_endpoints() if known is None else known)
    if shuffle:
        remote = fisher_yates(remote, rng)
    candidates = list(local_endpoints(DAEMON_LOCAL_PORTS) if local is None else local) + remote
    if requested is not None:
        candidates.insert(0, requested)
    return candidates
