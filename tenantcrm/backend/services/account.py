"""
Account Service.
"""

from tenantcrm.backend.core.exceptions import ConflictError
from tenantcrm.backend.models.account import Account
from tenantcrm.backend.repositories.account import AccountRepository
from tenantcrm.backend.repositories.contact import ContactRepository
from tenantcrm.backend.services.base import EntityService


class AccountService(EntityService[Account]):
    """Accounts. An account still referenced by contacts cannot be deleted."""

    entity = "account"
    repository_class = AccountRepository
    required_fields = ("name",)

    async def delete(self, id: str) -> None:
        """
        Delete an account that no contact references.

        Raises:
            NotFoundError: If the account does not exist in this tenant
            ConflictError: `account_has_contacts` while contacts reference it
        """
        await self.repo.get_by_id(id)
        if await ContactRepository(self.session, self.ctx.tenant_id).exists_for_account(id):
            raise ConflictError("Account has contacts", code="account_has_contacts")
        await super().delete(id)
