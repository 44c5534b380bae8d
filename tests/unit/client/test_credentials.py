"""Unit tests for the credential store."""

from tenantcrm.client.credentials import CredentialStore, RequestContext
from tenantcrm.client.storage import MemoryStore


class TestCredentialStore:

    def test_defaults(self, credentials: CredentialStore) -> None:
        assert credentials.get_token() is None
        assert credentials.get_active_tenant() == "demo"
        assert credentials.context() == RequestContext(token=None, tenant_id="demo")

    def test_default_tenant_from_configuration(self) -> None:
        assert CredentialStore(MemoryStore()).get_active_tenant() == "demo"

    def test_set_and_snapshot(self, credentials: CredentialStore) -> None:
        credentials.set_token("t0k")
        credentials.set_active_tenant("acme")

        assert credentials.context() == RequestContext(token="t0k", tenant_id="acme")

    def test_snapshot_is_not_affected_by_later_changes(self, credentials: CredentialStore) -> None:
        credentials.set_active_tenant("acme")
        snapshot = credentials.context()

        credentials.set_active_tenant("other")

        assert snapshot.tenant_id == "acme"

    def test_clear(self, credentials: CredentialStore, memory_store: MemoryStore) -> None:
        credentials.set_token("t0k")
        credentials.set_active_tenant("acme")

        credentials.clear()

        assert credentials.get_token() is None
        assert credentials.get_active_tenant() == "demo"
        assert memory_store.get("auth.token") is None

    def test_non_string_values_are_ignored(self, memory_store: MemoryStore) -> None:
        memory_store.set("auth.token", 42)
        memory_store.set("auth.tenant", "")

        credentials = CredentialStore(memory_store, default_tenant="demo")

        assert credentials.get_token() is None
        assert credentials.get_active_tenant() == "demo"
