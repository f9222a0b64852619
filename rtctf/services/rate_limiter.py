"""Per-client request rate limiting.

Responsibilities:
- Expose a storage-agnostic `RateLimiter` capability (`try_acquire`).
- Provide the in-memory, single-process implementation used by default.
"""

from __future__ import annotations

import logging
import math
import threading
from collections.abc import Callable
from time import monotonic
from typing import Protocol

from rtctf.core.config import settings
from rtctf.models.domain import RateLimitDecision, RateLimitRecord

logger = logging.getLogger(__name__)


class RateLimiter(Protocol):
    def try_acquire(self, key: str) -> RateLimitDecision: ...

    def purge_expired(self) -> int: ...


class InMemoryRateLimiter:
    """Fixed window per key that resets on the first hit after expiry.

    Check-and-increment runs under one process-wide lock, so concurrent
    requests from the same client cannot corrupt or undercount the table.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = monotonic,
    ) -> None:
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._records: dict[str, RateLimitRecord] = {}
        self._lock = threading.Lock()

    def try_acquire(self, key: str) -> RateLimitDecision:
        now = self._clock()
        with self._lock:
            record = self._records.get(key)
            if record is None or now > record.reset_time:
                self._records[key] = RateLimitRecord(count=1, reset_time=now + self.window_seconds)
                return RateLimitDecision(allowed=True)

            if record.count >= self.max_requests:
                retry_after = max(1, math.ceil(record.reset_time - now))
                return RateLimitDecision(allowed=False, retry_after_seconds=retry_after)

            record.count += 1
            return RateLimitDecision(allowed=True)

    def purge_expired(self) -> int:
        now = self._clock()
        with self._lock:
            expired = [key for key, record in self._records.items() if now > record.reset_time]
            for key in expired:
                del self._records[key]
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


def create_rate_limiter() -> InMemoryRateLimiter:
    logger.info(
        "[RateLimiter] In-memory limiter: max=%d per %ds",
        settings.rate_limit_max_requests, settings.rate_limit_window_seconds,
    )
    return InMemoryRateLimiter(
        max_requests=settings.rate_limit_max_requests,
        window_seconds=settings.rate_limit_window_seconds,
    )


rate_limiter: RateLimiter = create_rate_limiter()
