"""
Contacts API Endpoints.
"""

from fastapi import APIRouter

from tenantcrm.backend.core.dependencies import DbSession, ListLimit, ListOffset
from tenantcrm.backend.core.tenancy import AdminTenant, CurrentTenant
from tenantcrm.backend.schemas.base import OkResponse
from tenantcrm.backend.schemas.contact import ContactCreate, ContactResponse, ContactUpdate
from tenantcrm.backend.services.contact import ContactService

router = APIRouter()


@router.get("", response_model=list[ContactResponse], summary="List contacts")
async def list_contacts(
    ctx: CurrentTenant,
    db: DbSession,
    limit: ListLimit,
    offset: ListOffset,
) -> list[ContactResponse]:
    contacts = await ContactService(db, ctx).list(limit, offset)
    return [ContactResponse.model_validate(contact) for contact in contacts]


@router.get("/{contact_id}", response_model=ContactResponse, summary="Get a contact")
async def get_contact(contact_id: str, ctx: CurrentTenant, db: DbSession) -> ContactResponse:
    contact = await ContactService(db, ctx).get(contact_id)
    return ContactResponse.model_validate(contact)


@router.post(
    "",
    response_model=ContactResponse,
    status_code=201,
    summary="Create a contact",
    description="`account_id`, when given, must name an account of the same tenant.",
)
async def create_contact(data: ContactCreate, ctx: AdminTenant, db: DbSession) -> ContactResponse:
    contact = await ContactService(db, ctx).create(data)
    return ContactResponse.model_validate(contact)


@router.patch("/{contact_id}", response_model=OkResponse, summary="Update a contact")
async def update_contact(
    contact_id: str,
    data: ContactUpdate,
    ctx: AdminTenant,
    db: DbSession,
) -> OkResponse:
    await ContactService(db, ctx).update(contact_id, data)
    return OkResponse()


@router.delete("/{contact_id}", response_model=OkResponse, summary="Delete a contact")
async def delete_contact(contact_id: str, ctx: AdminTenant, db: DbSession) -> OkResponse:
    await ContactService(db, ctx).delete(contact_id)
    return OkResponse()
