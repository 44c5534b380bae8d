"""
CRM Client Facade.

Bundles the HTTP client, the credential store and every resource client
behind one object.

Usage:
    async with CRMClient() as crm:
        await crm.auth.login("admin@demo.local", "demo")
        accounts = await crm.accounts.list()
"""

from typing import Any

import httpx

from tenantcrm.client.credentials import CredentialStore
from tenantcrm.client.http import APIClient
from tenantcrm.client.resources import (
    AccountsClient,
    ActivitiesClient,
    AuthClient,
    ContactsClient,
    DealsClient,
    LeadsClient,
    NotesClient,
    TenantsClient,
)
from tenantcrm.client.storage import KeyValueStore


class CRMClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        store: KeyValueStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.credentials = CredentialStore(store)
        self.api = APIClient(
            base_url=base_url,
            timeout=timeout,
            credentials=self.credentials,
            transport=transport,
        )
        self.auth = AuthClient(self.api, self.credentials)
        self.tenants = TenantsClient(self.api)
        self.accounts = AccountsClient(self.api)
        self.contacts = ContactsClient(self.api)
        self.deals = DealsClient(self.api)
        self.leads = LeadsClient(self.api)
        self.activities = ActivitiesClient(self.api)
        self.notes = NotesClient(self.api)

    async def close(self) -> None:
        await self.api.close()

    async def __aenter__(self) -> "CRMClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
