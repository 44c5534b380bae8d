"""
Tenant Context Resolution.

Every entity route runs inside a tenant. The tenant is resolved per
request from, in order:

    1. The tenant header (X-Tenant-Id, configurable in tenancy.yaml)
    2. The `active_tenant` claim of the bearer token
    3. The configured default tenant

A valid bearer token is always required and the caller must be a member
of the resolved tenant. The resolved tenant and user are bound to the
structlog context so every later log line in the request carries them.

Usage in endpoints:
    @router.get("")
    async def list_accounts(ctx: CurrentTenant, db: DbSession): ...

    @router.post("")
    async def create_account(ctx: AdminTenant, db: DbSession): ...
"""

from dataclasses import dataclass
from typing import Annotated, Any

import structlog
from fastapi import Depends, Header, Request

from tenantcrm.backend.core.config import get_app_config
from tenantcrm.backend.core.dependencies import DbSession
from tenantcrm.backend.core.exceptions import AuthenticationError, AuthorizationError
from tenantcrm.backend.core.logging import get_logger
from tenantcrm.backend.core.security import decode_token
from tenantcrm.backend.models.user import User
from tenantcrm.backend.repositories.tenant import MembershipRepository
from tenantcrm.backend.repositories.user import UserRepository

logger = get_logger(__name__)

ADMIN_ROLES = ("owner", "admin")


@dataclass(frozen=True)
class TenantContext:
    """Who is calling and in which tenant."""

    user_id: str
    email: str
    tenant_id: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role in ADMIN_ROLES


async def get_token_claims(
    authorization: Annotated[str | None, Header()] = None,
) -> dict[str, Any]:
    """Extract and verify the bearer token from the Authorization header."""
    if not authorization or not authorization.lower().startswith("bearer "):
        raise AuthenticationError("Missing bearer token", code="missing_bearer")
    token = authorization[7:].strip()
    if not token:
        raise AuthenticationError("Missing bearer token", code="missing_bearer")
    return decode_token(token)


TokenClaims = Annotated[dict[str, Any], Depends(get_token_claims)]


async def get_current_user(claims: TokenClaims, db: DbSession) -> User:
    """Load the active user named by the token's `sub` claim."""
    user = await UserRepository(db).get_by_id_or_none(claims["sub"])
    if user is None or not user.is_active:
        raise AuthenticationError("Invalid or expired token", code="invalid_token")
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


def resolve_tenant_id(header_value: str | None, claims: dict[str, Any]) -> str:
    """Pick the tenant for a request: header, then token claim, then default."""
    if header_value and header_value.strip():
        return header_value.strip()
    claimed = claims.get("active_tenant")
    if isinstance(claimed, str) and claimed:
        return claimed
    return get_app_config().tenancy.default_tenant


async def get_tenant_context(
    request: Request,
    user: CurrentUser,
    claims: TokenClaims,
    db: DbSession,
) -> TenantContext:
    """
    Resolve the tenant for this request and verify membership.

    Raises:
        AuthorizationError: If the user is not a member of the tenant
    """
    header_name = get_app_config().tenancy.header_name
    tenant_id = resolve_tenant_id(request.headers.get(header_name), claims)

    role = await MembershipRepository(db).get_role(tenant_id, user.id)
    if role is None:
        logger.warning(
            "Tenant access denied",
            extra={"tenant_id": tenant_id, "user_id": user.id},
        )
        raise AuthorizationError("Not a member of this tenant", code="not_a_member")

    structlog.contextvars.bind_contextvars(tenant_id=tenant_id, user_id=user.id)
    return TenantContext(user_id=user.id, email=user.email, tenant_id=tenant_id, role=role)


CurrentTenant = Annotated[TenantContext, Depends(get_tenant_context)]


def require_roles(*roles: str):
    """
    Dependency factory that admits only the given tenant roles.

    Usage:
        AdminTenant = Annotated[TenantContext, Depends(require_roles("owner", "admin"))]
    """

    async def checker(ctx: CurrentTenant) -> TenantContext:
        if ctx.role not in roles:
            raise AuthorizationError(
                f"Requires role: {', '.join(roles)}",
                code="forbidden_role",
            )
        return ctx

    return checker


AdminTenant = Annotated[TenantContext, Depends(require_roles(*ADMIN_ROLES))]
