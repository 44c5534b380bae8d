"""
Account Schemas.
"""

from pydantic import BaseModel, Field

from tenantcrm.backend.schemas.base import EntityResponse


class AccountCreate(BaseModel):
    """Schema for creating an account. The id is generated when omitted."""

    id: str | None = Field(default=None, max_length=64, examples=["a1"])
    name: str = Field(..., min_length=1, max_length=255, examples=["Acme"])
    website: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=64)


class AccountUpdate(BaseModel):
    """Schema for updating an account. Only supplied fields change."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    website: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=64)


class AccountResponse(EntityResponse):
    name: str
    website: str | None = None
    phone: str | None = None
