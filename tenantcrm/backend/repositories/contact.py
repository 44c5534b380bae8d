"""
Contact Repository.
"""

from sqlalchemy import select

from tenantcrm.backend.models.contact import Contact
from tenantcrm.backend.repositories.base import TenantScopedRepository


class ContactRepository(TenantScopedRepository[Contact]):
    model = Contact

    async def exists_for_account(self, account_id: str) -> bool:
        """Check whether any contact of this tenant references the account."""
        result = await self.session.execute(
            select(Contact.id)
            .where(Contact.tenant_id == self.tenant_id, Contact.account_id == account_id)
            .limit(1)
        )
        return result.scalar_one_or_none() is not None
