"""
Contacts Client.
"""

from tenantcrm.client.resources.base import ResourceClient


class ContactsClient(ResourceClient):
    resource = "contacts"
    entity = "contact"
