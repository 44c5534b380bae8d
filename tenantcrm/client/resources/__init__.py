"""
Resource Clients.

Thin verb and path mappings over APIClient, one per API resource.
"""

from tenantcrm.client.resources.accounts import AccountsClient, AccountsPage
from tenantcrm.client.resources.activities import ActivitiesClient
from tenantcrm.client.resources.auth import AuthClient
from tenantcrm.client.resources.base import ResourceClient
from tenantcrm.client.resources.contacts import ContactsClient
from tenantcrm.client.resources.deals import DealsClient
from tenantcrm.client.resources.leads import LeadsClient
from tenantcrm.client.resources.notes import NotesClient
from tenantcrm.client.resources.tenants import TenantsClient

__all__ = [
    "AccountsClient",
    "AccountsPage",
    "ActivitiesClient",
    "AuthClient",
    "ContactsClient",
    "DealsClient",
    "LeadsClient",
    "NotesClient",
    "ResourceClient",
    "TenantsClient",
]
