"""
Tenant Service.

Workspaces and memberships: creation, listing, member listing, switching
the active tenant, and bootstrapping the default tenant and demo admin.

Membership management follows the role ladder owner > admin > member.
Owners and admins invite, re-role and remove members. Only an owner may
grant the owner role or act on another owner. Nobody changes or removes
their own membership.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from tenantcrm.backend.core.config import get_app_config
from tenantcrm.backend.core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from tenantcrm.backend.core.security import create_invite_token, decode_invite_token, hash_password
from tenantcrm.backend.core.tenancy import TenantContext
from tenantcrm.backend.core.utils import new_id
from tenantcrm.backend.models.tenant import Membership, Tenant
from tenantcrm.backend.models.user import User
from tenantcrm.backend.repositories.tenant import MembershipRepository, TenantRepository
from tenantcrm.backend.repositories.user import UserRepository
from tenantcrm.backend.services.base import BaseService


class TenantService(BaseService):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.tenant_repo = TenantRepository(session)
        self.membership_repo = MembershipRepository(session)

    async def create_tenant(self, owner_id: str, name: str, tenant_id: str | None = None) -> Tenant:
        """
        Create a workspace and make `owner_id` its owner.

        Raises:
            ValidationError: `invalid_tenant_id` for a malformed id
            ConflictError: `tenant_exists` when the id is taken
        """
        tenant_id = tenant_id or new_id()
        self._validate_id(tenant_id, code="invalid_tenant_id")
        if await self.tenant_repo.exists(tenant_id):
            raise ConflictError("Tenant already exists", code="tenant_exists")

        tenant = await self._execute_db_operation(
            "create tenant",
            self.tenant_repo.create(id=tenant_id, name=name, created_by=owner_id),
            conflict_code="tenant_exists",
        )
        await self.add_member(tenant.id, owner_id, "owner")
        self._log_operation("Tenant created", tenant_id=tenant.id, owner_id=owner_id)
        return tenant

    async def add_member(self, tenant_id: str, user_id: str, role: str) -> Membership:
        return await self._execute_db_operation(
            "add member",
            self.membership_repo.create(tenant_id=tenant_id, user_id=user_id, role=role),
            conflict_code="already_member",
        )

    async def get_tenant(self, tenant_id: str) -> Tenant:
        return await self.tenant_repo.get_by_id(tenant_id)

    async def list_for_user(self, user_id: str) -> list[tuple[Tenant, str]]:
        return await self.membership_repo.list_for_user(user_id)

    async def list_members(self, tenant_id: str) -> list[tuple[User, str]]:
        return await self.membership_repo.list_members(tenant_id)

    async def default_tenant_for(self, user_id: str) -> str:
        """The configured default tenant if the user is a member, else their first tenant."""
        default_tenant = get_app_config().tenancy.default_tenant
        if await self.membership_repo.get_role(default_tenant, user_id) is not None:
            return default_tenant
        memberships = await self.membership_repo.list_for_user(user_id)
        return memberships[0][0].id if memberships else default_tenant

    async def switch(self, user_id: str, tenant_id: str) -> Tenant:
        """
        Check that the user may make `tenant_id` their active tenant.

        Raises:
            AuthorizationError: `not_a_member` when the user has no membership
        """
        if await self.membership_repo.get_role(tenant_id, user_id) is None:
            raise AuthorizationError("Not a member of this tenant", code="not_a_member")
        tenant = await self.tenant_repo.get_by_id(tenant_id)
        self._log_operation("Tenant switched", user_id=user_id, tenant_id=tenant_id)
        return tenant

    async def ensure_default_tenant(self) -> Tenant:
        """Create the configured default tenant if it does not exist."""
        tenancy = get_app_config().tenancy
        tenant = await self.tenant_repo.get_by_id_or_none(tenancy.default_tenant)
        if tenant is None:
            tenant = await self._execute_db_operation(
                "create default tenant",
                self.tenant_repo.create(id=tenancy.default_tenant, name=tenancy.default_tenant_name),
            )
            self._log_operation("Default tenant created", tenant_id=tenant.id)
        return tenant

    async def seed_demo_admin(self, password: str) -> User:
        """
        Ensure the demo admin user exists and owns the default tenant.

        Safe to run repeatedly; an existing user keeps its password.
        """
        tenancy = get_app_config().tenancy
        tenant = await self.ensure_default_tenant()

        user_repo = UserRepository(self.session)
        user = await user_repo.get_by_email(tenancy.demo_admin_email)
        if user is None:
            user = await self._execute_db_operation(
                "create demo admin",
                user_repo.create(
                    id=new_id(),
                    name=tenancy.demo_admin_name,
                    email=tenancy.demo_admin_email,
                    password_hash=hash_password(password),
                ),
            )
        if await self.membership_repo.get_role(tenant.id, user.id) is None:
            await self.add_member(tenant.id, user.id, "owner")

        self._log_operation("Demo admin ensured", user_id=user.id, tenant_id=tenant.id)
        return user

    # -------------------------------------------------------------------------
    # Membership management
    # -------------------------------------------------------------------------

    def _require_owner_for(self, ctx: TenantContext, *roles: str, code: str) -> None:
        """Only an owner may grant, revoke or act on the owner role."""
        if "owner" in roles and ctx.role != "owner":
            raise AuthorizationError("Only an owner can manage owners", code=code)

    async def invite(self, ctx: TenantContext, email: str, role: str) -> tuple[str, int]:
        """
        Issue an invitation to join the caller's tenant.

        Returns:
            (invite token, expiry in epoch milliseconds)

        Raises:
            AuthorizationError: `only_owner_can_invite_owner` for an owner invite by a non-owner
            ConflictError: `already_member` when the email already belongs to a member
        """
        email = email.strip().lower()
        self._require_owner_for(ctx, role, code="only_owner_can_invite_owner")

        user = await UserRepository(self.session).get_by_email(email)
        if user is not None and await self.membership_repo.get_role(ctx.tenant_id, user.id) is not None:
            raise ConflictError("User is already a member", code="already_member")

        token, expires_at = create_invite_token(ctx.tenant_id, email, role)
        self._log_operation("Invitation issued", tenant_id=ctx.tenant_id, invited_by=ctx.user_id, role=role)
        return token, expires_at

    async def accept_invitation(
        self,
        token: str,
        name: str | None = None,
        password: str | None = None,
    ) -> tuple[User, str, str]:
        """
        Join the tenant named by an invitation.

        A new user is created for an unknown email, which needs a password.
        An existing user keeps their name and password. Accepting twice is
        harmless: an existing membership keeps its role.

        Returns:
            (user, tenant id, effective role)

        Raises:
            ValidationError: `invalid_or_expired_invite`, or `password_required` for a new user
            NotFoundError: `tenant_not_found` when the tenant has been removed
        """
        claims = decode_invite_token(token)
        tenant_id, email = claims["tenant"], claims["email"]
        role = claims.get("role") or "member"

        if not await self.tenant_repo.exists(tenant_id):
            raise NotFoundError("Tenant not found", code="tenant_not_found")

        user_repo = UserRepository(self.session)
        user = await user_repo.get_by_email(email)
        if user is None:
            if not password:
                raise ValidationError("password required", code="password_required")
            user = await self._execute_db_operation(
                "create invited user",
                user_repo.create(
                    id=new_id(),
                    name=(name or "").strip() or email,
                    email=email,
                    password_hash=hash_password(password),
                ),
                conflict_code="email_taken",
            )

        existing = await self.membership_repo.get_role(tenant_id, user.id)
        if existing is None:
            await self.add_member(tenant_id, user.id, role)
        else:
            role = existing

        self._log_operation("Invitation accepted", tenant_id=tenant_id, user_id=user.id, role=role)
        return user, tenant_id, role

    async def change_role(self, ctx: TenantContext, user_id: str, role: str) -> Membership:
        """
        Change a member's role in the caller's tenant.

        Raises:
            ValidationError: `cannot_change_own_role`
            NotFoundError: `membership_not_found`
            AuthorizationError: `only_owner_can_manage_owner`
        """
        if user_id == ctx.user_id:
            raise ValidationError("You cannot change your own role", code="cannot_change_own_role")

        membership = await self.membership_repo.get_membership(ctx.tenant_id, user_id)
        self._require_owner_for(ctx, membership.role, role, code="only_owner_can_manage_owner")

        membership = await self._execute_db_operation(
            "change role",
            self.membership_repo.set_role(ctx.tenant_id, user_id, role),
        )
        self._log_operation("Member role changed", tenant_id=ctx.tenant_id, user_id=user_id, role=role)
        return membership

    async def remove_member(self, ctx: TenantContext, user_id: str) -> None:
        """
        Remove a member from the caller's tenant.

        Raises:
            ValidationError: `cannot_remove_self`
            NotFoundError: `membership_not_found`
            AuthorizationError: `only_owner_can_manage_owner`
        """
        if user_id == ctx.user_id:
            raise ValidationError("You cannot remove yourself", code="cannot_remove_self")

        membership = await self.membership_repo.get_membership(ctx.tenant_id, user_id)
        self._require_owner_for(ctx, membership.role, code="only_owner_can_manage_owner")

        await self._execute_db_operation(
            "remove member",
            self.membership_repo.remove(ctx.tenant_id, user_id),
        )
        self._log_operation("Member removed", tenant_id=ctx.tenant_id, user_id=user_id)
