"""
Activities API Endpoints.

REST API endpoints for tasks, calls, meetings and note-type activities.
Members only see activities they created or that are assigned to them.
"""

from fastapi import APIRouter, Query

from tenantcrm.backend.core.dependencies import DbSession, ListLimit, ListOffset
from tenantcrm.backend.core.tenancy import CurrentTenant
from tenantcrm.backend.schemas.activity import (
    ActivityCreate,
    ActivityResponse,
    ActivityStatus,
    ActivityUpdate,
)
from tenantcrm.backend.schemas.base import OkResponse
from tenantcrm.backend.services.activity import ActivityService

router = APIRouter()


@router.get(
    "",
    response_model=list[ActivityResponse],
    summary="List activities",
    description="Filter by linked record, status, or reminders later than `remind_after`.",
)
async def list_activities(
    ctx: CurrentTenant,
    db: DbSession,
    limit: ListLimit,
    offset: ListOffset,
    deal_id: str | None = Query(default=None),
    contact_id: str | None = Query(default=None),
    account_id: str | None = Query(default=None),
    lead_id: str | None = Query(default=None),
    status: ActivityStatus | None = Query(default=None),
    remind_after: int | None = Query(
        default=None,
        description="Only activities whose reminder is later than this epoch-ms time",
    ),
) -> list[ActivityResponse]:
    activities = await ActivityService(db, ctx).list(
        limit,
        offset,
        deal_id=deal_id,
        contact_id=contact_id,
        account_id=account_id,
        lead_id=lead_id,
        status=status,
        remind_after=remind_after,
    )
    return [ActivityResponse.model_validate(activity) for activity in activities]


@router.get("/{activity_id}", response_model=ActivityResponse, summary="Get an activity")
async def get_activity(activity_id: str, ctx: CurrentTenant, db: DbSession) -> ActivityResponse:
    activity = await ActivityService(db, ctx).get(activity_id)
    return ActivityResponse.model_validate(activity)


@router.post("", response_model=ActivityResponse, status_code=201, summary="Create an activity")
async def create_activity(data: ActivityCreate, ctx: CurrentTenant, db: DbSession) -> ActivityResponse:
    activity = await ActivityService(db, ctx).create(data)
    return ActivityResponse.model_validate(activity)


@router.patch("/{activity_id}", response_model=OkResponse, summary="Update an activity")
async def update_activity(
    activity_id: str,
    data: ActivityUpdate,
    ctx: CurrentTenant,
    db: DbSession,
) -> OkResponse:
    await ActivityService(db, ctx).update(activity_id, data)
    return OkResponse()


@router.delete("/{activity_id}", response_model=OkResponse, summary="Delete an activity")
async def delete_activity(activity_id: str, ctx: CurrentTenant, db: DbSession) -> OkResponse:
    await ActivityService(db, ctx).delete(activity_id)
    return OkResponse()
