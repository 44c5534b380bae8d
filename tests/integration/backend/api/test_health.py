"""Integration tests for health endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_liveness_always_healthy(client: AsyncClient) -> None:
    """GET /health should always return 200."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_readiness_checks_database(client: AsyncClient) -> None:
    response = await client.get("/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["checks"]["database"]["status"] == "healthy"


@pytest.mark.asyncio
async def test_detailed_returns_app_info(client: AsyncClient) -> None:
    """GET /health/detailed should include application info."""
    data = (await client.get("/health/detailed")).json()
    assert data["application"]["name"] == "TenantCRM"
    assert "version" in data["application"]
    assert data["tenancy"]["default_tenant"] == "demo"


@pytest.mark.asyncio
async def test_health_needs_no_token(client: AsyncClient) -> None:
    assert (await client.get("/health/detailed")).status_code == 200
