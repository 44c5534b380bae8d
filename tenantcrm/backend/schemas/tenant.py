"""
Tenant Schemas.

Workspaces, memberships and invitations.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from tenantcrm.backend.schemas.auth import UserResponse

TenantRole = Literal["owner", "admin", "member"]
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class TenantCreate(BaseModel):
    """Schema for creating a workspace. A time-ordered id is generated when omitted."""

    id: str | None = Field(default=None, max_length=64)
    name: str = Field(..., min_length=1, max_length=255, examples=["Ventas Norte"])


class TenantResponse(BaseModel):
    id: str
    name: str
    created_at: int

    model_config = ConfigDict(from_attributes=True)


class TenantMembershipItem(BaseModel):
    """A workspace the caller belongs to, with the caller's role there."""

    id: str
    name: str
    role: str


class TenantListResponse(BaseModel):
    items: list[TenantMembershipItem]
    active_tenant: str


class CurrentTenantResponse(BaseModel):
    tenant: TenantResponse


class MemberItem(BaseModel):
    user_id: str
    name: str
    email: str
    role: str


class MembersResponse(BaseModel):
    tenant: str
    items: list[MemberItem]


class SwitchTenantRequest(BaseModel):
    tenant_id: str = Field(..., min_length=1, max_length=64)


class SwitchTenantResponse(BaseModel):
    token: str
    active_tenant: str
    tenant: TenantResponse


class RoleUpdate(BaseModel):
    role: TenantRole


class InvitationCreate(BaseModel):
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN, examples=["luis@example.com"])
    role: TenantRole = "member"


class InvitationResponse(BaseModel):
    """Signed invitation. It is handed to the invitee out of band."""

    invite_token: str
    tenant: str
    email: str
    role: str
    expires_at: int


class AcceptInvitationRequest(BaseModel):
    """`name` and `password` are used only when the email has no account yet."""

    token: str = Field(..., min_length=1)
    name: str | None = Field(default=None, max_length=255)
    password: str | None = Field(default=None, min_length=4, max_length=128)


class AcceptInvitationResponse(BaseModel):
    ok: bool = True
    tenant_id: str
    role: str
    user: UserResponse
