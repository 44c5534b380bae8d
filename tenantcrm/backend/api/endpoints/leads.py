"""
Leads API Endpoints.
"""

from fastapi import APIRouter

from tenantcrm.backend.core.dependencies import DbSession, ListLimit, ListOffset
from tenantcrm.backend.core.tenancy import AdminTenant, CurrentTenant
from tenantcrm.backend.schemas.base import OkResponse
from tenantcrm.backend.schemas.lead import LeadCreate, LeadResponse, LeadUpdate
from tenantcrm.backend.services.lead import LeadService

router = APIRouter()


@router.get("", response_model=list[LeadResponse], summary="List leads")
async def list_leads(
    ctx: CurrentTenant,
    db: DbSession,
    limit: ListLimit,
    offset: ListOffset,
) -> list[LeadResponse]:
    leads = await LeadService(db, ctx).list(limit, offset)
    return [LeadResponse.model_validate(lead) for lead in leads]


@router.get("/{lead_id}", response_model=LeadResponse, summary="Get a lead")
async def get_lead(lead_id: str, ctx: CurrentTenant, db: DbSession) -> LeadResponse:
    lead = await LeadService(db, ctx).get(lead_id)
    return LeadResponse.model_validate(lead)


@router.post("", response_model=LeadResponse, status_code=201, summary="Create a lead")
async def create_lead(data: LeadCreate, ctx: AdminTenant, db: DbSession) -> LeadResponse:
    lead = await LeadService(db, ctx).create(data)
    return LeadResponse.model_validate(lead)


@router.patch("/{lead_id}", response_model=OkResponse, summary="Update a lead")
async def update_lead(lead_id: str, data: LeadUpdate, ctx: AdminTenant, db: DbSession) -> OkResponse:
    await LeadService(db, ctx).update(lead_id, data)
    return OkResponse()


@router.delete("/{lead_id}", response_model=OkResponse, summary="Delete a lead")
async def delete_lead(lead_id: str, ctx: AdminTenant, db: DbSession) -> OkResponse:
    await LeadService(db, ctx).delete(lead_id)
    return OkResponse()
