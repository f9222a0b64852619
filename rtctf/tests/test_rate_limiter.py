"""Tests for the in-memory per-client rate limiter."""

import threading

from rtctf.services.rate_limiter import InMemoryRateLimiter


def test_allows_up_to_max_then_denies(clock):
    limiter = InMemoryRateLimiter(max_requests=3, window_seconds=60, clock=clock)
    assert [limiter.try_acquire("a").allowed for _ in range(4)] == [True, True, True, False]


def test_denied_decision_carries_remaining_window(clock):
    limiter = InMemoryRateLimiter(max_requests=1, window_seconds=60, clock=clock)
    limiter.try_acquire("a")
    clock.advance(15.5)
    decision = limiter.try_acquire("a")
    assert decision.allowed is False
    assert decision.retry_after_seconds == 45


def test_retry_after_is_at_least_one_second(clock):
    limiter = InMemoryRateLimiter(max_requests=1, window_seconds=60, clock=clock)
    limiter.try_acquire("a")
    clock.advance(59.9)
    assert limiter.try_acquire("a").retry_after_seconds == 1


def test_window_resets_after_expiry(clock):
    limiter = InMemoryRateLimiter(max_requests=2, window_seconds=60, clock=clock)
    limiter.try_acquire("a")
    limiter.try_acquire("a")
    assert limiter.try_acquire("a").allowed is False

    clock.advance(60)
    assert limiter.try_acquire("a").allowed is False  # reset only once now > reset_time

    clock.advance(0.001)
    assert limiter.try_acquire("a").allowed is True
    assert limiter.try_acquire("a").allowed is True
    assert limiter.try_acquire("a").allowed is False


def test_keys_are_independent(clock):
    limiter = InMemoryRateLimiter(max_requests=1, window_seconds=60, clock=clock)
    assert limiter.try_acquire("a").allowed is True
    assert limiter.try_acquire("b").allowed is True
    assert limiter.try_acquire("a").allowed is False


def test_purge_expired_removes_only_stale_records(clock):
    limiter = InMemoryRateLimiter(max_requests=5, window_seconds=60, clock=clock)
    limiter.try_acquire("old")
    clock.advance(30)
    limiter.try_acquire("fresh")
    clock.advance(31)

    assert limiter.purge_expired() == 1
    assert len(limiter) == 1
    assert limiter.try_acquire("fresh").allowed is True


def test_concurrent_acquire_never_exceeds_max():
    limiter = InMemoryRateLimiter(max_requests=50, window_seconds=60)
    allowed = []
    lock = threading.Lock()

    def worker():
        for _ in range(20):
            decision = limiter.try_acquire("shared")
            with lock:
                allowed.append(decision.allowed)

    threads = [threading.Thread(target=worker) for _ in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert allowed.count(True) == 50
    assert allowed.count(False) == 150
