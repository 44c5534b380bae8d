"""
Account Repository.
"""

from tenantcrm.backend.models.account import Account
from tenantcrm.backend.repositories.base import TenantScopedRepository


class AccountRepository(TenantScopedRepository[Account]):
    model = Account
