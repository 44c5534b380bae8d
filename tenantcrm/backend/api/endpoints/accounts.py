"""
Accounts API Endpoints.

Reads are open to every tenant member; writes need owner or admin.
"""

from fastapi import APIRouter

from tenantcrm.backend.core.dependencies import DbSession, ListLimit, ListOffset
from tenantcrm.backend.core.tenancy import AdminTenant, CurrentTenant
from tenantcrm.backend.schemas.account import AccountCreate, AccountResponse, AccountUpdate
from tenantcrm.backend.schemas.base import OkResponse
from tenantcrm.backend.services.account import AccountService

router = APIRouter()


@router.get(
    "",
    response_model=list[AccountResponse],
    summary="List accounts",
    description="Accounts of the current tenant, most recently updated first.",
)
async def list_accounts(
    ctx: CurrentTenant,
    db: DbSession,
    limit: ListLimit,
    offset: ListOffset,
) -> list[AccountResponse]:
    accounts = await AccountService(db, ctx).list(limit, offset)
    return [AccountResponse.model_validate(account) for account in accounts]


@router.get(
    "/{account_id}",
    response_model=AccountResponse,
    summary="Get an account",
)
async def get_account(account_id: str, ctx: CurrentTenant, db: DbSession) -> AccountResponse:
    account = await AccountService(db, ctx).get(account_id)
    return AccountResponse.model_validate(account)


@router.post(
    "",
    response_model=AccountResponse,
    status_code=201,
    summary="Create an account",
    description="Create an account. A duplicate id answers 409 `account_exists`.",
)
async def create_account(data: AccountCreate, ctx: AdminTenant, db: DbSession) -> AccountResponse:
    account = await AccountService(db, ctx).create(data)
    return AccountResponse.model_validate(account)


@router.patch(
    "/{account_id}",
    response_model=OkResponse,
    summary="Update an account",
    description="Only the supplied fields are changed.",
)
async def update_account(
    account_id: str,
    data: AccountUpdate,
    ctx: AdminTenant,
    db: DbSession,
) -> OkResponse:
    await AccountService(db, ctx).update(account_id, data)
    return OkResponse()


@router.delete(
    "/{account_id}",
    response_model=OkResponse,
    summary="Delete an account",
    description="Fails with 409 `account_has_contacts` while contacts reference the account.",
)
async def delete_account(account_id: str, ctx: AdminTenant, db: DbSession) -> OkResponse:
    await AccountService(db, ctx).delete(account_id)
    return OkResponse()
