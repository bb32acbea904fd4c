# =============================================================================
# tests/test_health.py - Health Check and Error Handling Tests
# =============================================================================
# Run with: pytest tests/test_health.py -v
# =============================================================================

from fastapi.testclient import TestClient

from app.main import app
from core.services.resources import todo_service


class TestHealth:
    """Tests for the unauthenticated health endpoints."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["environment"] == "development"
        assert body["version"] == "1.0.0"
        assert body["timestamp"]

    def test_liveness(self, client):
        response = client.get("/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    def test_readiness(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["checks"] == {"database": "healthy", "storage": "healthy"}

    def test_readiness_degraded_when_database_down(self, client, monkeypatch):
        monkeypatch.setattr("app.routers.health.check_connection", lambda: False)

        body = client.get("/health/ready").json()

        assert body["status"] == "degraded"
        assert body["checks"]["database"] == "unhealthy"

    def test_root(self, client):
        assert client.get("/").json()["name"] == "LifeLog API"


class TestUnexpectedErrors:
    """Unhandled exceptions become a generic 500."""

    def test_internal_error_is_generic(self, auth_headers, monkeypatch):
        def broken_list(*args, **kwargs):
            raise RuntimeError("database password is hunter2")

        monkeypatch.setattr(todo_service, "list", broken_list)

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/api/todos", headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
        assert "hunter2" not in response.text
