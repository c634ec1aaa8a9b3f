from .in_memory import InMemoryRateLimiter
from .redis_limiter import RedisRateLimiter

__all__ = ['InMemoryRateLimiter', 'RedisRateLimiter']
