"""Smoke tests for health endpoint."""

import pytest


@pytest.mark.asyncio
async def test_health_returns_ok(client):
    resp = await client.get("/api/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["enhancement"]["attempts"] == 0


@pytest.mark.asyncio
async def test_health_response_content_type(client):
    resp = await client.get("/api/health")
    assert "application/json" in resp.headers["content-type"]


@pytest.mark.asyncio
async def test_health_carries_security_headers(client):
    resp = await client.get("/api/health")
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["X-Frame-Options"] == "DENY"
