import enum
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from .config import Endpoint
from .errors import AutoconnectError, TransportError

logger = logging.getLogger(__name__)

Liveness = Callable[[Endpoint], object]


class ProbeState(enum.Enum):
    PROBING = "probing"
    RESOLVED = "resolved"
    EXHAUSTED = "exhausted"


class AutoconnectProbe:
    """Tries candidates strictly in order until one answers ``liveness``.

    ``liveness`` raises TransportError for an unreachable endpoint; any
    parsed reply, including an RPC-level error body, counts as alive.
    """

    def __init__(self, candidates: Sequence[Endpoint], liveness: Liveness) -> None:
        self.candidates = list(candidates)
        self.liveness = liveness
        self.state = ProbeState.PROBING if self.candidates else ProbeState.EXHAUSTED
        self.cursor = 0
        self.resolved: Optional[Endpoint] = None
        self.attempts: List[Tuple[Endpoint, TransportError]] = []

    def resolve(self) -> Endpoint:
        if self.state is ProbeState.RESOLVED and self.resolved is not None:
            return self.resolved
        while self.state is ProbeState.PROBING:
            candidate = self.candidates[self.cursor]
            try:
                self.liveness(candidate)
            except TransportError as exc:
                logger.warning("candidate %s is unreachable: %s", candidate.base_url, exc.message)
                self.attempts.append((candidate, exc))
                self.cursor += 1
                if self.cursor >= len(self.candidates):
                    self.state = ProbeState.EXHAUSTED
                continue
            self.state = ProbeState.RESOLVED
            self.resolved = candidate
            logger.info("autoconnect resolved to %s", candidate.base_url)
            return candidate
        raise AutoconnectError(attempts=list(self.attempts))
