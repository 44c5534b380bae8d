"""
Note Schemas.
"""

from pydantic import BaseModel, Field

from tenantcrm.backend.schemas.base import EntityResponse


class NoteCreate(BaseModel):
    """Schema for creating a note."""

    id: str | None = Field(default=None, max_length=64)
    body: str = Field(..., min_length=1, max_length=10000, examples=["Llamó para pedir descuento"])
    account_id: str | None = Field(default=None, max_length=64)
    contact_id: str | None = Field(default=None, max_length=64)
    lead_id: str | None = Field(default=None, max_length=64)
    deal_id: str | None = Field(default=None, max_length=64)


class NoteUpdate(BaseModel):
    body: str | None = Field(default=None, min_length=1, max_length=10000)
    account_id: str | None = Field(default=None, max_length=64)
    contact_id: str | None = Field(default=None, max_length=64)
    lead_id: str | None = Field(default=None, max_length=64)
    deal_id: str | None = Field(default=None, max_length=64)


class NoteResponse(EntityResponse):
    body: str
    account_id: str | None = None
    contact_id: str | None = None
    lead_id: str | None = None
    deal_id: str | None = None
    created_by: str | None = None
