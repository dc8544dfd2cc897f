"""Tests for health endpoints and API middleware."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from neuro_score.api.middleware import APIKeyMiddleware, RequestLoggingMiddleware
from neuro_score.api.routes import health


@pytest.fixture
def client():
    app = FastAPI()
    app.include_router(health.router)
    return TestClient(app)


@pytest.fixture
def secured_client():
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(APIKeyMiddleware, api_key="secret")
    app.include_router(health.router)

    @app.get("/api/v1/ping")
    async def ping():
        return {"pong": True}

    return TestClient(app)


class TestHealthEndpoints:
    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "neuro-score"
        assert data["tests"] >= 17

    def test_liveness_check(self, client):
        response = client.get("/health/live")
        assert response.status_code == 200
        assert response.json()["status"] == "alive"


class TestAPIKeyMiddleware:
    def test_health_skips_auth(self, secured_client):
        assert secured_client.get("/health").status_code == 200

    def test_missing_key_rejected(self, secured_client):
        response = secured_client.get("/api/v1/ping")
        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized"

    def test_header_key_accepted(self, secured_client):
        response = secured_client.get("/api/v1/ping", headers={"X-API-Key": "secret"})
        assert response.status_code == 200
        assert "X-Process-Time" in response.headers

    def test_bearer_key_accepted(self, secured_client):
        response = secured_client.get("/api/v1/ping", headers={"Authorization": "Bearer secret"})
        assert response.status_code == 200

    def test_wrong_key_rejected(self, secured_client):
        response = secured_client.get("/api/v1/ping", headers={"X-API-Key": "nope"})
        assert response.status_code == 401
