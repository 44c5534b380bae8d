"""
Auth Client.

Login, registration and tenant switching persist the returned token and
active tenant through the CredentialStore; logout clears both.
"""

from typing import Any

from tenantcrm.backend.core.logging import get_logger, log_with_source
from tenantcrm.client.credentials import CredentialStore
from tenantcrm.client.http import APIClient

logger = get_logger(__name__)


class AuthClient:
    def __init__(self, api: APIClient, credentials: CredentialStore) -> None:
        self.api = api
        self.credentials = credentials

    def _remember(self, result: dict[str, Any]) -> None:
        token = result.get("token")
        if token:
            self.credentials.set_token(token)
        tenant = result.get("active_tenant")
        if tenant:
            self.credentials.set_active_tenant(tenant)

    async def login(self, email: str, password: str) -> dict[str, Any]:
        result = await self.api.post("/auth/login", {"email": email, "password": password})
        self._remember(result)
        log_with_source(logger, "cli", "info", "Logged in", active_tenant=result.get("active_tenant"))
        return result

    async def register(self, name: str, email: str, password: str) -> dict[str, Any]:
        result = await self.api.post(
            "/auth/register",
            {"name": name, "email": email, "password": password},
        )
        self._remember(result)
        log_with_source(logger, "cli", "info", "Registered", active_tenant=result.get("active_tenant"))
        return result

    async def me(self) -> dict[str, Any]:
        return await self.api.get("/auth/me")

    async def switch_tenant(self, tenant_id: str) -> dict[str, Any]:
        """Ask the server for a token bound to `tenant_id` and make it active."""
        result = await self.api.post("/me/tenant/switch", {"tenant_id": tenant_id})
        self._remember(result)
        log_with_source(logger, "cli", "info", "Switched tenant", active_tenant=result.get("active_tenant"))
        return result

    def logout(self) -> None:
        self.credentials.clear()
        log_with_source(logger, "cli", "info", "Logged out")

    def is_authenticated(self) -> bool:
        return self.credentials.get_token() is not None
