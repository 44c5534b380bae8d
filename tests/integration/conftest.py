"""
Integration Test Fixtures.

Fixtures for integration tests - uses a real database and the full app.
These fixtures build on the root conftest.py database fixtures.
"""

from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tenantcrm.backend.core.database import get_db_session
from tenantcrm.backend.services.tenant import TenantService

DEMO_EMAIL = "admin@demo.local"
DEMO_PASSWORD = "demo"


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
def app(db_session: AsyncSession) -> Generator[FastAPI, None, None]:
    """
    The application with its database session overridden.

    Every request in a test shares the test's session, so rows created
    by one request are visible to the next.
    """

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    from tenantcrm.backend.main import create_app

    application = create_app()
    application.dependency_overrides[get_db_session] = override_get_db_session
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client bound to the app.

    Usage:
        async def test_health_endpoint(client: AsyncClient):
            response = await client.get("/health")
            assert response.status_code == 200
    """
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as test_client:
        yield test_client


# =============================================================================
# Authentication Fixtures
# =============================================================================


@pytest.fixture
async def demo_admin(db_session: AsyncSession) -> Any:
    """Default tenant plus the demo admin as its owner."""
    user = await TenantService(db_session).seed_demo_admin(DEMO_PASSWORD)
    await db_session.flush()
    return user


@pytest.fixture
async def auth_headers(client: AsyncClient, demo_admin: Any) -> dict[str, str]:
    """
    Bearer headers for the demo admin, active in the default tenant.

    Usage:
        async def test_list(client: AsyncClient, auth_headers: dict):
            response = await client.get("/accounts", headers=auth_headers)
    """
    response = await client.post("/auth/login", json={"email": DEMO_EMAIL, "password": DEMO_PASSWORD})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def register_user(client: AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    """
    Register users through the API.

    Usage:
        payload = await register_user("Ana", "ana@example.com")
        headers = {"Authorization": f"Bearer {payload['token']}"}
    """

    async def _register(name: str, email: str, password: str = "secret1") -> dict[str, Any]:
        response = await client.post("/auth/register", json={"name": name, "email": email, "password": password})
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
async def member_headers(
    register_user: Callable[..., Awaitable[dict[str, Any]]],
    db_session: AsyncSession,
    demo_admin: Any,
) -> dict[str, str]:
    """Bearer headers for a plain member of the default tenant."""
    payload = await register_user("Mia Member", "mia@example.com")
    await TenantService(db_session).add_member("demo", payload["user"]["id"], "member")
    await db_session.flush()
    return {"Authorization": f"Bearer {payload['token']}", "X-Tenant-Id": "demo"}


# =============================================================================
# API Response Assertion Helpers
# =============================================================================


class ApiAssertions:
    """Helper class for API response assertions."""

    @staticmethod
    def assert_ok(response: Any, expected_status: int = 200) -> Any:
        """
        Assert the response succeeded and return its JSON body.

        Raises:
            AssertionError: If the status differs
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        return response.json()

    @staticmethod
    def assert_error(
        response: Any,
        expected_status: int,
        expected_code: str | None = None,
    ) -> dict[str, Any]:
        """
        Assert the response is an error body `{"error": code, ...}`.

        Raises:
            AssertionError: If response is not an error or codes don't match
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        data = response.json()
        assert isinstance(data.get("error"), str), f"Missing error code: {data}"

        if expected_code:
            assert data["error"] == expected_code, (
                f"Expected error code {expected_code}, got {data['error']}"
            )
        return data

    @staticmethod
    def assert_validation_error(response: Any, field: str | None = None) -> dict[str, Any]:
        """Assert a 400 validation error, optionally naming the field."""
        data = ApiAssertions.assert_error(response, 400, "validation_error")

        if field:
            errors = data.get("details", {}).get("validation_errors", [])
            fields = [e.get("field", "") for e in errors]
            assert any(field in f for f in fields), (
                f"Expected validation error for field '{field}', "
                f"got errors for: {fields}"
            )
        return data


@pytest.fixture
def api() -> ApiAssertions:
    """Provide API assertion helpers."""
    return ApiAssertions()
