"""
Lead Repository.
"""

from tenantcrm.backend.models.lead import Lead
from tenantcrm.backend.repositories.base import TenantScopedRepository


class LeadRepository(TenantScopedRepository[Lead]):
    model = Lead
