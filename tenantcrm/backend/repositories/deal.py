"""
Deal Repository.
"""

from tenantcrm.backend.models.deal import Deal
from tenantcrm.backend.repositories.base import TenantScopedRepository


class DealRepository(TenantScopedRepository[Deal]):
    model = Deal
