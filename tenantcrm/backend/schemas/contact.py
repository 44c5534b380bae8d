"""
Contact Schemas.
"""

from pydantic import BaseModel, Field

from tenantcrm.backend.schemas.base import EntityResponse


class ContactCreate(BaseModel):
    """Schema for creating a contact."""

    id: str | None = Field(default=None, max_length=64)
    name: str = Field(..., min_length=1, max_length=255, examples=["Ana Pérez"])
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=64)
    company: str | None = Field(default=None, max_length=255)
    position: str | None = Field(default=None, max_length=255)
    account_id: str | None = Field(default=None, max_length=64)


class ContactUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=64)
    company: str | None = Field(default=None, max_length=255)
    position: str | None = Field(default=None, max_length=255)
    account_id: str | None = Field(default=None, max_length=64)


class ContactResponse(EntityResponse):
    name: str
    email: str | None = None
    phone: str | None = None
    company: str | None = None
    position: str | None = None
    account_id: str | None = None
