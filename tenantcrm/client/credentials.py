"""
Credential Store.

Holds the bearer token and the active tenant in durable local storage.
The token is written on login/register/switch and removed on logout.
The active tenant falls back to the configured default tenant.

A `RequestContext` is an immutable snapshot taken right before a request
is built, so a tenant switch applies to the very next call.
"""

from dataclasses import dataclass

from tenantcrm.client.storage import KeyValueStore, get_default_store

TOKEN_KEY = "auth.token"
TENANT_KEY = "auth.tenant"


@dataclass(frozen=True)
class RequestContext:
    """Credentials attached to one outgoing request."""

    token: str | None = None
    tenant_id: str | None = None


class CredentialStore:
    """
    Token and active tenant, persisted in a KeyValueStore.

    Usage:
        credentials = CredentialStore(MemoryStore())
        credentials.set_token("eyJ...")
        credentials.set_active_tenant("acme")
        credentials.context()  # RequestContext(token="eyJ...", tenant_id="acme")
    """

    def __init__(self, store: KeyValueStore | None = None, default_tenant: str | None = None) -> None:
        self.store = store if store is not None else get_default_store()
        self.default_tenant = default_tenant or _configured_default_tenant()

    def get_token(self) -> str | None:
        token = self.store.get(TOKEN_KEY)
        return token if isinstance(token, str) and token else None

    def set_token(self, token: str) -> None:
        self.store.set(TOKEN_KEY, token)

    def clear_token(self) -> None:
        self.store.delete(TOKEN_KEY)

    def get_active_tenant(self) -> str:
        tenant = self.store.get(TENANT_KEY)
        return tenant if isinstance(tenant, str) and tenant else self.default_tenant

    def set_active_tenant(self, tenant_id: str) -> None:
        self.store.set(TENANT_KEY, tenant_id)

    def clear_active_tenant(self) -> None:
        self.store.delete(TENANT_KEY)

    def clear(self) -> None:
        """Forget token and tenant (logout)."""
        self.clear_token()
        self.clear_active_tenant()

    def context(self) -> RequestContext:
        """Snapshot of the current credential."""
        return RequestContext(token=self.get_token(), tenant_id=self.get_active_tenant())


def _configured_default_tenant() -> str:
    from tenantcrm.backend.core.config import get_app_config

    return get_app_config().tenancy.default_tenant
