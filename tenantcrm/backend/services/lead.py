"""
Lead Service.
"""

from tenantcrm.backend.models.lead import Lead
from tenantcrm.backend.repositories.lead import LeadRepository
from tenantcrm.backend.services.base import EntityService


class LeadService(EntityService[Lead]):
    entity = "lead"
    repository_class = LeadRepository
    required_fields = ("name",)
