"""Tests for the background rate-limit sweep."""

import asyncio

import pytest

from rtctf.scheduling.cleanup import start_rate_limit_sweeper
from rtctf.services.rate_limiter import InMemoryRateLimiter


@pytest.mark.asyncio
async def test_sweeper_purges_expired_records_until_cancelled(clock):
    limiter = InMemoryRateLimiter(max_requests=5, window_seconds=10, clock=clock)
    limiter.try_acquire("a")
    limiter.try_acquire("b")
    clock.advance(11)

    task = asyncio.create_task(start_rate_limit_sweeper(limiter, 0.01))
    await asyncio.sleep(0.05)
    assert len(limiter) == 0

    task.cancel()
    await asyncio.gather(task, return_exceptions=True)
    assert task.done()
