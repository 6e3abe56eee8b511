"""Tests for health endpoints and cross-cutting middleware."""

from fastapi.testclient import TestClient


class TestHealth:
    def test_liveness(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readiness(self, client: TestClient):
        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["checks"]["database"]["status"] == "healthy"
        assert body["checks"]["redis"]["status"] == "disabled"

    def test_readiness_fails_without_database(self, client: TestClient, app_dependencies):
        app_dependencies.database_service.health_check = lambda: False

        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"


class TestMiddleware:
    def test_request_id_is_echoed(self, client: TestClient):
        response = client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    def test_request_id_is_generated(self, client: TestClient):
        assert client.get("/health").headers["X-Request-ID"]

    def test_security_headers(self, client: TestClient):
        response = client.get("/health")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
