import logging
import time
from collections.abc import Callable
from uuid import uuid4

from redis.asyncio import Redis

from meeting_access.modules.provisioning.application.interfaces import \
    IRateLimiter

logger = logging.getLogger(__name__)

# Prune, count and add in one script so concurrent callers cannot both pass
SLIDING_WINDOW_SCRIPT = """
local key = KEYS[1]
local now = tonumber(ARGV[1])
local window = tonumber(ARGV[2])
local limit = tonumber(ARGV[3])

redis.call('ZREMRANGEBYSCORE', key, '-inf', now - window)
if redis.call('ZCARD', key) >= limit then
    return 0
end
redis.call('ZADD', key, now, ARGV[4])
redis.call('PEXPIRE', key, window)
return 1
"""


class RedisRateLimiter(IRateLimiter):
    """Rolling-window limiter shared by every process using the same Redis."""

    def __init__(
        self,
        redis_client: Redis,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.time,
    ):
        if max_requests <= 0 or window_seconds <= 0:
            raise ValueError('max_requests and window_seconds must be positive')
        self._redis = redis_client
        self._prefix = 'rate_limit'
        self._max_requests = max_requests
        self._window_ms = int(window_seconds * 1000)
        self._clock = clock
        self._script = redis_client.register_script(SLIDING_WINDOW_SCRIPT)

    def _get_key(self, key: str) -> str:
        return f'{self._prefix}:{key}'

    async def check_and_increment(self, key: str) -> bool:
        now_ms = int(self._clock() * 1000)
        allowed = await self._script(
            keys=[self._get_key(key)],
            args=[now_ms, self._window_ms, self._max_requests, f'{now_ms}-{uuid4().hex}'],
        )
        if not int(allowed):
            logger.info(f'Rate limit reached for {key}')
            return False
        return True
