"""
Lead Schemas.
"""

from typing import Literal

from pydantic import BaseModel, Field

from tenantcrm.backend.schemas.base import EntityResponse

LeadStatus = Literal["nuevo", "contactado", "calificado", "ganado", "perdido"]


class LeadCreate(BaseModel):
    id: str | None = Field(default=None, max_length=64)
    name: str = Field(..., min_length=1, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=64)
    company: str | None = Field(default=None, max_length=255)
    status: LeadStatus | None = None


class LeadUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=64)
    company: str | None = Field(default=None, max_length=255)
    status: LeadStatus | None = None


class LeadResponse(EntityResponse):
    name: str
    email: str | None = None
    phone: str | None = None
    company: str | None = None
    status: str | None = None
