"""
CRM API Client.

Tenant-scoped request pipeline: credential store → header composer →
HTTP client → resource clients, plus activity reminder scheduling.
"""

from tenantcrm.client.credentials import CredentialStore, RequestContext
from tenantcrm.client.crm import CRMClient
from tenantcrm.client.headers import build_headers
from tenantcrm.client.http import APIClient, ApiError, IdCollisionError

__all__ = [
    "APIClient",
    "ApiError",
    "CRMClient",
    "CredentialStore",
    "IdCollisionError",
    "RequestContext",
    "build_headers",
]
