"""
Activity Service.

Owners and admins see every activity of the tenant. Members only see
(and can change) activities they created or that are assigned to them.
"""

from typing import Any

from tenantcrm.backend.models.activity import Activity
from tenantcrm.backend.repositories.account import AccountRepository
from tenantcrm.backend.repositories.activity import ActivityRepository
from tenantcrm.backend.repositories.contact import ContactRepository
from tenantcrm.backend.repositories.deal import DealRepository
from tenantcrm.backend.repositories.lead import LeadRepository
from tenantcrm.backend.services.base import EntityService


class ActivityService(EntityService[Activity]):
    entity = "activity"
    repository_class = ActivityRepository
    required_fields = ("type", "title", "status")
    reference_fields = {
        "account_id": AccountRepository,
        "contact_id": ContactRepository,
        "lead_id": LeadRepository,
        "deal_id": DealRepository,
    }

    def _make_repository(self) -> ActivityRepository:
        visible_to = None if self.ctx.is_admin else self.ctx.user_id
        return ActivityRepository(self.session, self.ctx.tenant_id, visible_to=visible_to)

    def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        data["created_by"] = self.ctx.user_id
        return data
