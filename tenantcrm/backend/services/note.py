"""
Note Service.
"""

from typing import Any

from tenantcrm.backend.core.exceptions import AuthorizationError
from tenantcrm.backend.models.note import Note
from tenantcrm.backend.repositories.account import AccountRepository
from tenantcrm.backend.repositories.contact import ContactRepository
from tenantcrm.backend.repositories.deal import DealRepository
from tenantcrm.backend.repositories.lead import LeadRepository
from tenantcrm.backend.repositories.note import NoteRepository
from tenantcrm.backend.services.base import EntityService


class NoteService(EntityService[Note]):
    entity = "note"
    repository_class = NoteRepository
    required_fields = ("body",)
    reference_fields = {
        "account_id": AccountRepository,
        "contact_id": ContactRepository,
        "lead_id": LeadRepository,
        "deal_id": DealRepository,
    }

    def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        data["created_by"] = self.ctx.user_id
        return data

    async def delete(self, id: str) -> None:
        """
        Delete a note. Only its author or a tenant admin may do so.

        Raises:
            NotFoundError: If the note does not exist in this tenant
            AuthorizationError: `forbidden_role` for other members
        """
        note = await self.repo.get_by_id(id)
        if note.created_by != self.ctx.user_id and not self.ctx.is_admin:
            raise AuthorizationError("Only the author or an admin can delete this note", code="forbidden_role")
        await super().delete(id)
