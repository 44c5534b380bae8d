"""
Tenants API Endpoints.

Workspace listing, creation, membership, and switching the active tenant.
Owners and admins manage the members of the current workspace. Invitations
are signed tokens; accepting one needs no bearer token.
"""

from fastapi import APIRouter

from tenantcrm.backend.core.dependencies import DbSession
from tenantcrm.backend.core.tenancy import AdminTenant, CurrentTenant, CurrentUser, TokenClaims, resolve_tenant_id
from tenantcrm.backend.schemas.auth import UserResponse
from tenantcrm.backend.schemas.base import OkResponse
from tenantcrm.backend.schemas.tenant import (
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    CurrentTenantResponse,
    InvitationCreate,
    InvitationResponse,
    MemberItem,
    MembersResponse,
    RoleUpdate,
    SwitchTenantRequest,
    SwitchTenantResponse,
    TenantCreate,
    TenantListResponse,
    TenantMembershipItem,
    TenantResponse,
)
from tenantcrm.backend.services.auth import issue_token
from tenantcrm.backend.services.tenant import TenantService

router = APIRouter()
me_router = APIRouter()
invitations_router = APIRouter()


@router.get(
    "",
    response_model=TenantListResponse,
    summary="List my workspaces",
)
async def list_tenants(user: CurrentUser, claims: TokenClaims, db: DbSession) -> TenantListResponse:
    memberships = await TenantService(db).list_for_user(user.id)
    return TenantListResponse(
        items=[TenantMembershipItem(id=tenant.id, name=tenant.name, role=role) for tenant, role in memberships],
        active_tenant=resolve_tenant_id(None, claims),
    )


@router.post(
    "",
    response_model=TenantResponse,
    status_code=201,
    summary="Create a workspace",
    description="The caller becomes the owner. A taken id answers 409 `tenant_exists`.",
)
async def create_tenant(data: TenantCreate, user: CurrentUser, db: DbSession) -> TenantResponse:
    tenant = await TenantService(db).create_tenant(user.id, name=data.name, tenant_id=data.id)
    return TenantResponse.model_validate(tenant)


@router.get("/current", response_model=CurrentTenantResponse, summary="Current workspace")
async def current_tenant(ctx: CurrentTenant, db: DbSession) -> CurrentTenantResponse:
    tenant = await TenantService(db).get_tenant(ctx.tenant_id)
    return CurrentTenantResponse(tenant=TenantResponse.model_validate(tenant))


@router.get("/members", response_model=MembersResponse, summary="Members of the current workspace")
async def list_members(ctx: CurrentTenant, db: DbSession) -> MembersResponse:
    members = await TenantService(db).list_members(ctx.tenant_id)
    return MembersResponse(
        tenant=ctx.tenant_id,
        items=[
            MemberItem(user_id=member.id, name=member.name, email=member.email, role=role)
            for member, role in members
        ],
    )


@router.patch(
    "/members/{user_id}",
    response_model=OkResponse,
    summary="Change a member's role",
    description="Owners and admins only. Only an owner may grant or revoke the owner role.",
)
async def change_member_role(user_id: str, data: RoleUpdate, ctx: AdminTenant, db: DbSession) -> OkResponse:
    await TenantService(db).change_role(ctx, user_id, data.role)
    return OkResponse()


@router.delete(
    "/members/{user_id}",
    response_model=OkResponse,
    summary="Remove a member",
    description="Owners and admins only. Only an owner may remove another owner.",
)
async def remove_member(user_id: str, ctx: AdminTenant, db: DbSession) -> OkResponse:
    await TenantService(db).remove_member(ctx, user_id)
    return OkResponse()


@router.post(
    "/invitations",
    response_model=InvitationResponse,
    status_code=201,
    summary="Invite someone to the current workspace",
)
async def create_invitation(data: InvitationCreate, ctx: AdminTenant, db: DbSession) -> InvitationResponse:
    token, expires_at = await TenantService(db).invite(ctx, data.email, data.role)
    return InvitationResponse(
        invite_token=token,
        tenant=ctx.tenant_id,
        email=data.email.strip().lower(),
        role=data.role,
        expires_at=expires_at,
    )


@invitations_router.post(
    "/accept",
    response_model=AcceptInvitationResponse,
    summary="Accept an invitation",
    description="Creates the account when the invited email has none. Log in afterwards.",
)
async def accept_invitation(data: AcceptInvitationRequest, db: DbSession) -> AcceptInvitationResponse:
    user, tenant_id, role = await TenantService(db).accept_invitation(
        data.token, name=data.name, password=data.password,
    )
    return AcceptInvitationResponse(tenant_id=tenant_id, role=role, user=UserResponse.model_validate(user))


@me_router.post(
    "/tenant/switch",
    response_model=SwitchTenantResponse,
    summary="Switch active workspace",
    description="Issue a new token whose `active_tenant` is the requested workspace.",
)
async def switch_tenant(data: SwitchTenantRequest, user: CurrentUser, db: DbSession) -> SwitchTenantResponse:
    tenant = await TenantService(db).switch(user.id, data.tenant_id)
    return SwitchTenantResponse(
        token=issue_token(user, tenant.id),
        active_tenant=tenant.id,
        tenant=TenantResponse.model_validate(tenant),
    )
