"""
Integration Tests for Request Context Middleware and error bodies.

Tests that request context is propagated and that every failure answers
with the `{"error": ...}` body.
"""

import pytest
from fastapi import Request
from httpx import ASGITransport, AsyncClient

from tenantcrm.backend.main import create_app


class TestFrontendHeader:

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("header", "expected"),
        [("CLI", "cli"), ("web", "web"), ("toaster", "unknown"), (None, "unknown")],
    )
    async def test_frontend_is_a_known_source(self, header, expected):
        app = create_app()

        @app.get("/frontend")
        async def frontend(request: Request) -> dict:
            return {"frontend": request.state.frontend}

        headers = {"X-Frontend-ID": header} if header else {}
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
            response = await test_client.get("/frontend", headers=headers)

        assert response.json() == {"frontend": expected}


class TestRequestIdHeader:
    """Tests for X-Request-ID header handling."""

    @pytest.mark.asyncio
    async def test_generates_request_id(self, client: AsyncClient):
        """Should generate X-Request-ID when not provided."""
        response = await client.get("/health")

        assert response.status_code == 200
        # UUID format: 8-4-4-4-12 = 36 characters
        assert len(response.headers["X-Request-ID"]) == 36

    @pytest.mark.asyncio
    async def test_propagates_provided_request_id(self, client: AsyncClient):
        """Should use provided X-Request-ID header."""
        response = await client.get("/health", headers={"X-Request-ID": "my-request-12345"})

        assert response.headers["X-Request-ID"] == "my-request-12345"


class TestResponseTimeHeader:

    @pytest.mark.asyncio
    async def test_includes_response_time(self, client: AsyncClient):
        time_header = (await client.get("/health")).headers["X-Response-Time"]

        assert time_header.endswith("ms")
        assert time_header[:-2].isdigit()

    @pytest.mark.asyncio
    async def test_response_time_on_error(self, client: AsyncClient, auth_headers):
        """Should include response time even on error responses."""
        response = await client.get("/accounts/nonexistent", headers=auth_headers)

        assert response.status_code == 404
        assert "X-Response-Time" in response.headers


class TestErrorBodies:

    @pytest.mark.asyncio
    async def test_unknown_route(self, client: AsyncClient, api):
        api.assert_error(await client.get("/no/such/route"), 404, "not_found")

    @pytest.mark.asyncio
    async def test_malformed_json(self, client: AsyncClient, auth_headers, api):
        response = await client.post(
            "/accounts", content=b"{not json", headers={**auth_headers, "Content-Type": "application/json"},
        )

        api.assert_error(response, 400, "validation_error")

    @pytest.mark.asyncio
    async def test_unhandled_exception_is_internal_error(self, api):
        app = create_app()

        @app.get("/boom")
        async def boom() -> None:
            raise RuntimeError("kaboom")

        async with AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False), base_url="http://test",
        ) as test_client:
            response = await test_client.get("/boom")

        data = api.assert_error(response, 500, "internal_error")
        assert "kaboom" not in response.text
        assert "message" not in data
