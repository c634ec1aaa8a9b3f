"""Tests for the rolling-window rate limiters."""
from __future__ import annotations

import asyncio

import pytest
import pytest_asyncio
from fakeredis import FakeAsyncRedis

from meeting_access.modules.provisioning.infrastructure.rate_limit import (
    InMemoryRateLimiter, RedisRateLimiter)
from tests.conftest import FakeClock


@pytest.mark.asyncio
async def test_in_memory_window_rolls():
    clock = FakeClock(100.0)
    limiter = InMemoryRateLimiter(max_requests=2, window_seconds=10, clock=clock)

    assert await limiter.check_and_increment('a')
    clock.advance(5)
    assert await limiter.check_and_increment('a')
    assert not await limiter.check_and_increment('a')

    # first hit leaves the window, second one is still inside it
    clock.advance(5)
    assert await limiter.check_and_increment('a')
    assert not await limiter.check_and_increment('a')


@pytest.mark.asyncio
async def test_in_memory_keys_are_independent():
    limiter = InMemoryRateLimiter(max_requests=1, window_seconds=60, clock=FakeClock())

    assert await limiter.check_and_increment('a')
    assert not await limiter.check_and_increment('a')
    assert await limiter.check_and_increment('b')


@pytest.mark.asyncio
async def test_in_memory_forgets_idle_keys():
    clock = FakeClock(0.0)
    limiter = InMemoryRateLimiter(max_requests=1, window_seconds=1, clock=clock)

    for i in range(1000):
        assert await limiter.check_and_increment(f'provisioning:user-{i}')
    assert limiter.tracked_keys == 1000

    clock.advance(100)
    assert await limiter.check_and_increment('provisioning:user-0')

    assert limiter.tracked_keys == 1


@pytest.mark.asyncio
async def test_in_memory_keeps_keys_with_live_hits():
    clock = FakeClock(0.0)
    limiter = InMemoryRateLimiter(max_requests=1, window_seconds=10, clock=clock)

    assert await limiter.check_and_increment('old')
    clock.advance(6)
    assert await limiter.check_and_increment('recent')
    clock.advance(5)
    assert await limiter.check_and_increment('other')

    assert limiter.tracked_keys == 2
    assert not await limiter.check_and_increment('recent')


@pytest.mark.parametrize(('max_requests', 'window'), [(0, 60), (5, 0)])
def test_in_memory_rejects_bad_limits(max_requests, window):
    with pytest.raises(ValueError):
        InMemoryRateLimiter(max_requests=max_requests, window_seconds=window)


@pytest_asyncio.fixture
async def redis_client():
    client = FakeAsyncRedis(decode_responses=True)
    yield client
    await client.flushall()
    await client.aclose()


@pytest.mark.asyncio
async def test_redis_window_rolls(redis_client):
    clock = FakeClock(1_000.0)
    limiter = RedisRateLimiter(redis_client, max_requests=2, window_seconds=10, clock=clock)

    assert await limiter.check_and_increment('provisioning:user-1')
    assert await limiter.check_and_increment('provisioning:user-1')
    assert not await limiter.check_and_increment('provisioning:user-1')
    assert await limiter.check_and_increment('provisioning:user-2')

    clock.advance(11)
    assert await limiter.check_and_increment('provisioning:user-1')


@pytest.mark.asyncio
async def test_redis_rejected_calls_are_not_counted(redis_client):
    limiter = RedisRateLimiter(redis_client, max_requests=1, window_seconds=60, clock=FakeClock())

    assert await limiter.check_and_increment('k')
    assert not await limiter.check_and_increment('k')

    assert await redis_client.zcard('rate_limit:k') == 1
    assert await redis_client.pttl('rate_limit:k') > 0


@pytest.mark.asyncio
async def test_redis_concurrent_checks_respect_limit(redis_client):
    limiter = RedisRateLimiter(redis_client, max_requests=3, window_seconds=60)

    results = await asyncio.gather(*(limiter.check_and_increment('k') for _ in range(10)))

    assert results.count(True) == 3
