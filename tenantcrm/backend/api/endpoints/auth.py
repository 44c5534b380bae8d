"""
Auth API Endpoints.

Registration, login, and the current session.
"""

from fastapi import APIRouter

from tenantcrm.backend.core.dependencies import DbSession
from tenantcrm.backend.core.tenancy import CurrentTenant, CurrentUser
from tenantcrm.backend.schemas.auth import (
    LoginRequest,
    MeResponse,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from tenantcrm.backend.services.auth import AuthService

router = APIRouter()


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=201,
    summary="Register",
    description="Create a user and a personal workspace owned by that user.",
)
async def register(data: RegisterRequest, db: DbSession) -> TokenResponse:
    user, tenant_id, token = await AuthService(db).register(data)
    return TokenResponse(token=token, active_tenant=tenant_id, user=UserResponse.model_validate(user))


@router.post("/login", response_model=TokenResponse, summary="Log in")
async def login(data: LoginRequest, db: DbSession) -> TokenResponse:
    user, tenant_id, token = await AuthService(db).login(data)
    return TokenResponse(token=token, active_tenant=tenant_id, user=UserResponse.model_validate(user))


@router.get(
    "/me",
    response_model=MeResponse,
    summary="Current session",
    description="The authenticated user, the resolved tenant, and the user's role there.",
)
async def me(user: CurrentUser, ctx: CurrentTenant) -> MeResponse:
    return MeResponse(user=UserResponse.model_validate(user), tenant=ctx.tenant_id, role=ctx.role)
