"""
Notes API Endpoints.

REST API endpoints for notes attached to accounts, contacts, leads and deals.
"""

from fastapi import APIRouter, Query

from tenantcrm.backend.core.dependencies import DbSession, ListLimit, ListOffset
from tenantcrm.backend.core.tenancy import CurrentTenant
from tenantcrm.backend.schemas.base import OkResponse
from tenantcrm.backend.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from tenantcrm.backend.services.note import NoteService

router = APIRouter()


@router.get("", response_model=list[NoteResponse], summary="List notes")
async def list_notes(
    ctx: CurrentTenant,
    db: DbSession,
    limit: ListLimit,
    offset: ListOffset,
    deal_id: str | None = Query(default=None),
    contact_id: str | None = Query(default=None),
    account_id: str | None = Query(default=None),
    lead_id: str | None = Query(default=None),
) -> list[NoteResponse]:
    notes = await NoteService(db, ctx).list(
        limit,
        offset,
        deal_id=deal_id,
        contact_id=contact_id,
        account_id=account_id,
        lead_id=lead_id,
    )
    return [NoteResponse.model_validate(note) for note in notes]


@router.get("/{note_id}", response_model=NoteResponse, summary="Get a note")
async def get_note(note_id: str, ctx: CurrentTenant, db: DbSession) -> NoteResponse:
    note = await NoteService(db, ctx).get(note_id)
    return NoteResponse.model_validate(note)


@router.post("", response_model=NoteResponse, status_code=201, summary="Create a note")
async def create_note(data: NoteCreate, ctx: CurrentTenant, db: DbSession) -> NoteResponse:
    note = await NoteService(db, ctx).create(data)
    return NoteResponse.model_validate(note)


@router.patch("/{note_id}", response_model=OkResponse, summary="Update a note")
async def update_note(note_id: str, data: NoteUpdate, ctx: CurrentTenant, db: DbSession) -> OkResponse:
    await NoteService(db, ctx).update(note_id, data)
    return OkResponse()


@router.delete(
    "/{note_id}",
    response_model=OkResponse,
    summary="Delete a note",
    description="Allowed for the note's author and for tenant owners or admins.",
)
async def delete_note(note_id: str, ctx: CurrentTenant, db: DbSession) -> OkResponse:
    await NoteService(db, ctx).delete(note_id)
    return OkResponse()
