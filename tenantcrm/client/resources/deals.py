"""
Deals Client.
"""

from tenantcrm.client.resources.base import ResourceClient


class DealsClient(ResourceClient):
    resource = "deals"
    entity = "deal"
