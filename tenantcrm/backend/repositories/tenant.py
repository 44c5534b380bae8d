"""
Tenant and Membership Repositories.
"""

from sqlalchemy import select

from tenantcrm.backend.core.exceptions import NotFoundError
from tenantcrm.backend.core.utils import now_ms
from tenantcrm.backend.models.tenant import Membership, Tenant
from tenantcrm.backend.models.user import User
from tenantcrm.backend.repositories.base import BaseRepository


class TenantRepository(BaseRepository[Tenant]):
    model = Tenant


class MembershipRepository(BaseRepository[Membership]):
    """Memberships are keyed by (tenant_id, user_id) rather than a single id."""

    model = Membership

    async def get_role(self, tenant_id: str, user_id: str) -> str | None:
        """Return the user's role in the tenant, or None when not a member."""
        result = await self.session.execute(
            select(Membership.role).where(
                Membership.tenant_id == tenant_id,
                Membership.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def get_membership(self, tenant_id: str, user_id: str) -> Membership:
        """
        Raises:
            NotFoundError: `membership_not_found` when the user is not in the tenant
        """
        result = await self.session.execute(
            select(Membership).where(
                Membership.tenant_id == tenant_id,
                Membership.user_id == user_id,
            )
        )
        membership = result.scalar_one_or_none()
        if membership is None:
            raise NotFoundError("Membership not found", code="membership_not_found")
        return membership

    async def set_role(self, tenant_id: str, user_id: str, role: str) -> Membership:
        membership = await self.get_membership(tenant_id, user_id)
        membership.role = role
        membership.updated_at = now_ms()
        await self.session.flush()
        return membership

    async def remove(self, tenant_id: str, user_id: str) -> None:
        membership = await self.get_membership(tenant_id, user_id)
        await self.session.delete(membership)
        await self.session.flush()

    async def list_for_user(self, user_id: str) -> list[tuple[Tenant, str]]:
        """Tenants the user belongs to, with the user's role in each."""
        result = await self.session.execute(
            select(Tenant, Membership.role)
            .join(Membership, Membership.tenant_id == Tenant.id)
            .where(Membership.user_id == user_id)
            .order_by(Tenant.name.asc(), Tenant.id.asc())
        )
        return [(tenant, role) for tenant, role in result.all()]

    async def list_members(self, tenant_id: str) -> list[tuple[User, str]]:
        """Users of a tenant, with each user's role."""
        result = await self.session.execute(
            select(User, Membership.role)
            .join(Membership, Membership.user_id == User.id)
            .where(Membership.tenant_id == tenant_id)
            .order_by(User.name.asc(), User.id.asc())
        )
        return [(user, role) for user, role in result.all()]
