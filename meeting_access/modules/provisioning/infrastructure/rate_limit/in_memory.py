import asyncio
import logging
import time
from collections import deque
from collections.abc import Callable

from meeting_access.modules.provisioning.application.interfaces import \
    IRateLimiter

logger = logging.getLogger(__name__)


class InMemoryRateLimiter(IRateLimiter):
    """Rolling-window limiter for a single process."""

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_requests <= 0 or window_seconds <= 0:
            raise ValueError('max_requests and window_seconds must be positive')
        self._max_requests = max_requests
        self._window_seconds = window_seconds
        self._clock = clock
        self._hits: dict[str, deque[float]] = {}
        self._lock = asyncio.Lock()
        self._last_sweep: float | None = None

    @property
    def tracked_keys(self) -> int:
        return len(self._hits)

    @staticmethod
    def _prune(hits: deque[float], cutoff: float) -> None:
        while hits and hits[0] <= cutoff:
            hits.popleft()

    def _sweep(self, now: float) -> None:
        # Drop keys whose whole window has expired, at most once per window
        if self._last_sweep is not None and now - self._last_sweep < self._window_seconds:
            return
        self._last_sweep = now
        cutoff = now - self._window_seconds
        stale = []
        for key, hits in self._hits.items():
            self._prune(hits, cutoff)
            if not hits:
                stale.append(key)
        for key in stale:
            del self._hits[key]

    async def check_and_increment(self, key: str) -> bool:
        async with self._lock:
            now = self._clock()
            self._sweep(now)

            hits = self._hits.setdefault(key, deque())
            self._prune(hits, now - self._window_seconds)
            if len(hits) >= self._max_requests:
                logger.info(f'Rate limit reached for {key}')
                return False

            hits.append(now)
            return True
