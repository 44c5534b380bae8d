"""
Deals API Endpoints.

Any tenant member may work on deals. Moving a deal into `propuesta`
creates a follow-up task; see DealService.
"""

from fastapi import APIRouter

from tenantcrm.backend.core.dependencies import DbSession, ListLimit, ListOffset
from tenantcrm.backend.core.tenancy import CurrentTenant
from tenantcrm.backend.schemas.base import OkResponse
from tenantcrm.backend.schemas.deal import DealCreate, DealResponse, DealUpdate
from tenantcrm.backend.services.deal import DealService

router = APIRouter()


@router.get("", response_model=list[DealResponse], summary="List deals")
async def list_deals(
    ctx: CurrentTenant,
    db: DbSession,
    limit: ListLimit,
    offset: ListOffset,
) -> list[DealResponse]:
    deals = await DealService(db, ctx).list(limit, offset)
    return [DealResponse.model_validate(deal) for deal in deals]


@router.get("/{deal_id}", response_model=DealResponse, summary="Get a deal")
async def get_deal(deal_id: str, ctx: CurrentTenant, db: DbSession) -> DealResponse:
    deal = await DealService(db, ctx).get(deal_id)
    return DealResponse.model_validate(deal)


@router.post("", response_model=DealResponse, status_code=201, summary="Create a deal")
async def create_deal(data: DealCreate, ctx: CurrentTenant, db: DbSession) -> DealResponse:
    deal = await DealService(db, ctx).create(data)
    return DealResponse.model_validate(deal)


@router.patch(
    "/{deal_id}",
    response_model=OkResponse,
    summary="Update a deal",
    description="Entering stage `propuesta` schedules an 'Enviar propuesta' task due in 24 hours.",
)
async def update_deal(deal_id: str, data: DealUpdate, ctx: CurrentTenant, db: DbSession) -> OkResponse:
    await DealService(db, ctx).update(deal_id, data)
    return OkResponse()


@router.delete("/{deal_id}", response_model=OkResponse, summary="Delete a deal")
async def delete_deal(deal_id: str, ctx: CurrentTenant, db: DbSession) -> OkResponse:
    await DealService(db, ctx).delete(deal_id)
    return OkResponse()
