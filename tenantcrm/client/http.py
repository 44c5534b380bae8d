"""
HTTP Client.

Async client for the CRM REST API. Every call composes fresh headers
from the current credentials, performs exactly one round trip, and
either returns the decoded JSON body or raises ApiError.

All requests include X-Frontend-ID: cli for log routing.

Base URL resolution, first match wins:
    EXPO_PUBLIC_API_BASE_URL, EXPO_PUBLIC_API_URL, CRM_API_URL,
    then server.host/server.port from config/settings/application.yaml
"""

import os
from typing import Any

import httpx

from tenantcrm.backend.core.config import get_server_base_url
from tenantcrm.backend.core.logging import get_logger, log_with_source
from tenantcrm.client.credentials import CredentialStore, RequestContext
from tenantcrm.client.headers import build_headers

logger = get_logger(__name__)

BASE_URL_ENV_VARS = ("EXPO_PUBLIC_API_BASE_URL", "EXPO_PUBLIC_API_URL", "CRM_API_URL")
NO_CONTENT_STATUSES = (204, 304)


class ApiError(Exception):
    """
    A request that did not succeed.

    Attributes:
        status: HTTP status, or 0 when no response was received
        code: The body's `error` code when present ("network_error" and
            "timeout" for transport failures)
        body: Decoded response body ({} when absent or malformed)
    """

    def __init__(
        self,
        message: str,
        status: int,
        code: str | None = None,
        body: Any = None,
    ) -> None:
        self.message = message
        self.status = status
        self.code = code
        self.body = body if body is not None else {}
        super().__init__(message)


class IdCollisionError(ApiError):
    """Raised when every generated id for a create was already taken."""


def resolve_base_url() -> str:
    """Base URL from the environment, else the configured loopback address."""
    for name in BASE_URL_ENV_VARS:
        value = os.environ.get(name, "").strip()
        if value:
            return value.rstrip("/")
    base_url, _ = get_server_base_url()
    return base_url


def join_url(base_url: str, path: str) -> str:
    """Join base URL and path without doubling slashes; absolute URLs pass through."""
    if path.startswith(("http://", "https://")):
        return path
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def decode_body(response: httpx.Response) -> Any:
    """Decode a JSON body; empty or malformed bodies decode to {}."""
    if not response.content.strip():
        return {}
    try:
        return response.json()
    except ValueError:
        return {}


def error_from_response(status: int, body: Any) -> ApiError:
    """Build an ApiError from a non-2xx status and its decoded body."""
    code = None
    message = None
    if isinstance(body, dict):
        if isinstance(body.get("error"), str):
            code = body["error"]
        if isinstance(body.get("message"), str) and body["message"]:
            message = body["message"]
    return ApiError(message or code or f"HTTP {status}", status=status, code=code, body=body)


class APIClient:
    """
    HTTP client for backend API communication.

    Features:
    - Base URL from environment or settings
    - Authorization and X-Tenant-Id from the credential store, per request
    - X-Frontend-ID header for log routing
    - Structured logging of requests/responses
    - Uniform ApiError for HTTP and transport failures

    Usage:
        client = APIClient(credentials=CredentialStore())
        accounts = await client.request("GET", "/accounts")
        await client.request("POST", "/accounts", {"name": "Acme"})
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        credentials: CredentialStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the API client.

        Args:
            base_url: Backend API base URL. If None, see resolve_base_url().
            timeout: Default per-request deadline in seconds. If None, reads client.yaml.
            credentials: Source of token and tenant. Without one, requests are anonymous.
            transport: Optional httpx transport (tests use httpx.MockTransport).
        """
        self.base_url = (base_url or resolve_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else get_server_base_url()[1]
        self.credentials = credentials
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"X-Frontend-ID": "cli"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def current_context(self) -> RequestContext:
        if self.credentials is None:
            return RequestContext()
        return self.credentials.context()

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        params: dict[str, Any] | None = None,
        context: RequestContext | None = None,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        Make one HTTP request to the backend.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: API path (e.g., /accounts) or an absolute http(s) URL
            body: JSON-serializable request body
            params: Query parameters
            context: Credentials to use instead of the credential store snapshot
            timeout: Deadline in seconds for this call
            headers: Extra headers; they override generated ones

        Returns:
            Decoded JSON body, or None for 204/304 responses

        Raises:
            ApiError: On non-2xx status, network failure, or timeout
        """
        client = await self._get_client()
        url = join_url(self.base_url, path)
        request_headers = build_headers(context or self.current_context(), headers)

        log_with_source(logger, "cli", "debug", "API request", method=method, path=path)

        try:
            response = await client.request(
                method,
                url,
                json=body,
                params=params,
                headers=request_headers,
                timeout=timeout if timeout is not None else self.timeout,
            )
        except httpx.TimeoutException as e:
            log_with_source(
                logger, "cli", "warning", "API request timed out",
                method=method, path=path, error=str(e),
            )
            raise ApiError("Request timed out", status=0, code="timeout") from e
        except httpx.TransportError as e:
            log_with_source(
                logger, "cli", "error", "API request failed",
                method=method, path=path, error=str(e),
            )
            raise ApiError(str(e) or "Network error", status=0, code="network_error") from e

        log_with_source(
            logger, "cli", "debug", "API response",
            method=method, path=path, status_code=response.status_code,
        )

        if response.status_code in NO_CONTENT_STATUSES:
            return None

        data = decode_body(response)
        if not 200 <= response.status_code <= 299:
            raise error_from_response(response.status_code, data)
        return data

    async def get(self, path: str, **kwargs: Any) -> Any:
        """Make a GET request."""
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, body: Any = None, **kwargs: Any) -> Any:
        """Make a POST request."""
        return await self.request("POST", path, body, **kwargs)

    async def patch(self, path: str, body: Any = None, **kwargs: Any) -> Any:
        """Make a PATCH request."""
        return await self.request("PATCH", path, body, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        """Make a DELETE request."""
        return await self.request("DELETE", path, **kwargs)
