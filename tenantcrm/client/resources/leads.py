"""
Leads Client.
"""

from tenantcrm.client.resources.base import ResourceClient


class LeadsClient(ResourceClient):
    resource = "leads"
    entity = "lead"
