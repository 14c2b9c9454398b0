"""
Tests for health check and root endpoints.
"""
from unittest.mock import patch

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_root_endpoint(client: AsyncClient):
    """Test root endpoint returns API info."""
    response = await client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Welcome to AgriFusion Backend!"
    assert data["version"] == "1.0.0"
    assert data["endpoints"] == {
        "farmer": "/api/farmer/advice",
        "market": "/api/market/trends",
        "buyer": "/api/buyer/timing",
    }


@pytest.mark.asyncio
async def test_health_check_reports_mock_provider(client: AsyncClient):
    response = await client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "degraded"
    assert data["services"]["llm"] == "mock"
    assert "timestamp" in data


@pytest.mark.asyncio
async def test_unknown_route_returns_404(client: AsyncClient):
    response = await client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"error": "Route not found"}


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: AsyncClient):
    response = await client.get("/", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


@pytest.mark.asyncio
async def test_request_id_is_generated(client: AsyncClient):
    response = await client.get("/")
    assert response.headers["X-Request-ID"]


@pytest.mark.asyncio
async def test_wrong_method_keeps_error_envelope(client: AsyncClient):
    response = await client.get("/api/farmer/advice")
    assert response.status_code == 405
    assert "error" in response.json()


class TestLiveProvider:

    @pytest.fixture
    def llm_client(self, static_llm):
        return static_llm

    @pytest.mark.asyncio
    async def test_health_check_is_healthy(self, client: AsyncClient):
        response = await client.get("/api/health")
        data = response.json()
        assert data["status"] == "healthy"
        assert data["services"]["llm"] == "static"


@pytest.mark.asyncio
@pytest.mark.parametrize("key_valid", [True, False])
async def test_health_check_reports_api_key(client: AsyncClient, key_valid):
    with patch("agrifusion.api.routes.health.validate_api_key", return_value=key_valid):
        response = await client.get("/api/health")

    services = response.json()["services"]
    assert services["api_key_configured"] is key_valid
    assert services["llm"] == "mock"
