"""
Notes Client.

Filters accepted by `list`: deal_id, contact_id, account_id, lead_id.
"""

from tenantcrm.client.resources.base import ResourceClient


class NotesClient(ResourceClient):
    resource = "notes"
    entity = "note"
