"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are mocked.
Unit tests should be fast and isolated, never touching real databases
or the network. HTTP traffic goes through httpx.MockTransport.
"""

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from tenantcrm.backend.core.tenancy import TenantContext
from tenantcrm.client.credentials import CredentialStore
from tenantcrm.client.http import APIClient
from tenantcrm.client.storage import MemoryStore


# =============================================================================
# Database Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_db_session() -> AsyncMock:
    """
    Mock database session for unit tests.

    Provides a fully mocked AsyncSession with common methods.
    """
    session = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.execute = AsyncMock()
    session.add = MagicMock()
    session.delete = AsyncMock()
    return session


@pytest.fixture
def admin_ctx() -> TenantContext:
    return TenantContext(user_id="u-admin", email="admin@demo.local", tenant_id="demo", role="owner")


@pytest.fixture
def member_ctx() -> TenantContext:
    return TenantContext(user_id="u-member", email="mia@example.com", tenant_id="demo", role="member")


# =============================================================================
# HTTP Mock Fixtures
# =============================================================================


class RecordingTransport(httpx.MockTransport):
    """
    MockTransport that remembers every request it served.

    Usage:
        transport = RecordingTransport(lambda request: httpx.Response(200, json=[]))
        ...
        assert transport.requests[0].url.path == "/accounts"
    """

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def credentials(memory_store: MemoryStore) -> CredentialStore:
    return CredentialStore(memory_store, default_tenant="demo")


@pytest.fixture
def make_api(credentials: CredentialStore) -> Callable[..., tuple[APIClient, RecordingTransport]]:
    """
    Build an APIClient whose requests are answered by `handler`.

    Usage:
        api, transport = make_api(lambda request: httpx.Response(200, json={"ok": True}))
    """

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> tuple[APIClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        api = APIClient(base_url="http://crm.test", timeout=5, credentials=credentials, transport=transport)
        return api, transport

    return _make


# =============================================================================
# Logging Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            with patch("module.logger", mock_logger):
                # Test code that logs
                mock_logger.info.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.exception = MagicMock()
    return logger
