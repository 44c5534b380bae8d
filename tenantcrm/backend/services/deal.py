"""
Deal Service.

Pipeline automation: moving a deal into the `propuesta` stage schedules
a follow-up task ("Enviar propuesta") due one day later, linked to the
deal and created in the same transaction.
"""

from pydantic import BaseModel

from tenantcrm.backend.core.utils import new_id, now_ms
from tenantcrm.backend.models.deal import Deal
from tenantcrm.backend.repositories.account import AccountRepository
from tenantcrm.backend.repositories.activity import ActivityRepository
from tenantcrm.backend.repositories.contact import ContactRepository
from tenantcrm.backend.repositories.deal import DealRepository
from tenantcrm.backend.services.base import EntityService

PROPOSAL_STAGE = "propuesta"
PROPOSAL_TASK_TITLE = "Enviar propuesta"
PROPOSAL_TASK_DELAY_MS = 24 * 60 * 60 * 1000


class DealService(EntityService[Deal]):
    entity = "deal"
    repository_class = DealRepository
    required_fields = ("title", "stage")
    reference_fields = {
        "account_id": AccountRepository,
        "contact_id": ContactRepository,
    }

    async def update(self, id: str, data: BaseModel) -> Deal:
        """Update a deal, creating the proposal task on entry to `propuesta`."""
        previous_stage = (await self.repo.get_by_id(id)).stage
        deal = await super().update(id, data)

        if previous_stage != PROPOSAL_STAGE and deal.stage == PROPOSAL_STAGE:
            await self._create_proposal_task(deal)
        return deal

    async def _create_proposal_task(self, deal: Deal) -> None:
        activities = ActivityRepository(self.session, self.ctx.tenant_id)
        task = await self._execute_db_operation(
            "create proposal task",
            activities.create(
                id=new_id(),
                type="task",
                title=PROPOSAL_TASK_TITLE,
                due_date=now_ms() + PROPOSAL_TASK_DELAY_MS,
                status="open",
                deal_id=deal.id,
                created_by=self.ctx.user_id,
            ),
        )
        self._log_operation("Proposal task created", deal_id=deal.id, activity_id=task.id)
