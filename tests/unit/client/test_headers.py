"""Unit tests for request header composition."""

from tenantcrm.client.credentials import RequestContext
from tenantcrm.client.headers import build_headers


class TestBuildHeaders:

    def test_anonymous_context(self) -> None:
        assert build_headers(RequestContext()) == {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def test_token_and_tenant(self) -> None:
        headers = build_headers(RequestContext(token="t0k", tenant_id="acme"))

        assert headers["Authorization"] == "Bearer t0k"
        assert headers["X-Tenant-Id"] == "acme"

    def test_empty_values_are_omitted(self) -> None:
        headers = build_headers(RequestContext(token="", tenant_id=""))

        assert "Authorization" not in headers
        assert "X-Tenant-Id" not in headers

    def test_extra_headers_override_case_insensitively(self) -> None:
        headers = build_headers(
            RequestContext(token="t0k", tenant_id="acme"),
            {"x-tenant-id": "other", "X-Trace": "1"},
        )

        assert headers["x-tenant-id"] == "other"
        assert "X-Tenant-Id" not in headers
        assert headers["X-Trace"] == "1"
        assert headers["Authorization"] == "Bearer t0k"

    def test_is_pure(self) -> None:
        context = RequestContext(token="t0k", tenant_id="acme")
        assert build_headers(context) == build_headers(context)
