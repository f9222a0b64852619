"""Shared test fixtures for RTCTF backend tests."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from rtctf.api.v1.deps import get_rate_limiter
from rtctf.core.config import settings
from rtctf.pipeline import enhancement_metrics_tracker
from rtctf.services.rate_limiter import InMemoryRateLimiter


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", "")
    monkeypatch.setattr(settings, "gemini_api_key", "")
    monkeypatch.setattr(settings, "enhancement_model", "gpt-4o-mini")
    monkeypatch.setattr(settings, "enhancement_timeout_seconds", 8.0)
    monkeypatch.setattr(settings, "environment", "dev")
    enhancement_metrics_tracker.reset()
    yield
    enhancement_metrics_tracker.reset()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def rate_limiter(clock: FakeClock) -> InMemoryRateLimiter:
    return InMemoryRateLimiter(max_requests=100, window_seconds=900, clock=clock)


@pytest.fixture
async def test_app(rate_limiter):
    from rtctf.main import app

    app.dependency_overrides[get_rate_limiter] = lambda: rate_limiter
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
