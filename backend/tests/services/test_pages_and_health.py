"""Entry page, static assets and health checks."""

from exercise_tracker.infrastructure.database import DatabaseSessionManager
from exercise_tracker.main import app


async def test_index_page_served(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    assert "/api/exercise/new-user" in res.text


async def test_static_stylesheet_served(client):
    res = await client.get("/public/style.css")
    assert res.status_code == 200


async def test_liveness(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_reports_unreachable_database(client, monkeypatch):
    async def _down(self):
        return False

    monkeypatch.setattr(DatabaseSessionManager, "health_check", _down)
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_cors_allows_any_origin(client):
    res = await client.get(
        "/api/exercise/users", headers={"Origin": "https://example.org"},
    )
    assert res.headers["access-control-allow-origin"] == "*"
    assert app.state.db_manager is not None
