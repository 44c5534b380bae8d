"""
Tenants Client.

Workspaces the current user belongs to, and member management for the
active workspace. Switching the active workspace lives on AuthClient
because it issues a new token.
"""

from typing import Any
from urllib.parse import quote

from tenantcrm.client.http import APIClient


class TenantsClient:
    def __init__(self, api: APIClient) -> None:
        self.api = api

    async def list(self) -> dict[str, Any]:
        """`{"items": [{id, name, role}], "active_tenant": ...}`"""
        return await self.api.get("/tenants")

    async def current(self) -> dict[str, Any]:
        return await self.api.get("/tenants/current")

    async def members(self) -> dict[str, Any]:
        return await self.api.get("/tenants/members")

    async def create(self, name: str, id: str | None = None) -> dict[str, Any]:
        body: dict[str, Any] = {"name": name}
        if id:
            body["id"] = id
        return await self.api.post("/tenants", body)

    async def invite(self, email: str, role: str = "member") -> dict[str, Any]:
        """`{"invite_token", "tenant", "email", "role", "expires_at"}`"""
        return await self.api.post("/tenants/invitations", {"email": email, "role": role})

    async def accept_invitation(
        self,
        token: str,
        name: str | None = None,
        password: str | None = None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {"token": token}
        if name:
            body["name"] = name
        if password:
            body["password"] = password
        return await self.api.post("/invitations/accept", body)

    async def change_role(self, user_id: str, role: str) -> Any:
        return await self.api.patch(f"/tenants/members/{quote(user_id, safe='')}", {"role": role})

    async def remove_member(self, user_id: str) -> Any:
        return await self.api.delete(f"/tenants/members/{quote(user_id, safe='')}")
