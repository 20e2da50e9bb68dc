"""Health & Readiness — liveness always up, readiness follows the store."""

from unittest.mock import AsyncMock


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_reachable_store(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_with_unreachable_store(client, app, monkeypatch):
    monkeypatch.setattr(
        app.state.db_manager, "health_check", AsyncMock(return_value=False),
    )
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
