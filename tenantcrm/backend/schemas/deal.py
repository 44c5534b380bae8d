"""
Deal Schemas.
"""

from typing import Literal

from pydantic import BaseModel, Field

from tenantcrm.backend.schemas.base import EntityResponse

DealStage = Literal["nuevo", "calificado", "propuesta", "negociacion", "ganado", "perdido"]


class DealCreate(BaseModel):
    """Schema for creating a deal. Stage defaults to `nuevo`."""

    id: str | None = Field(default=None, max_length=64)
    title: str = Field(..., min_length=1, max_length=255, examples=["Renovación anual"])
    amount: float | None = None
    stage: DealStage = "nuevo"
    account_id: str | None = Field(default=None, max_length=64)
    contact_id: str | None = Field(default=None, max_length=64)
    close_date: int | None = Field(default=None, description="Expected close, epoch milliseconds")


class DealUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    amount: float | None = None
    stage: DealStage | None = None
    account_id: str | None = Field(default=None, max_length=64)
    contact_id: str | None = Field(default=None, max_length=64)
    close_date: int | None = None


class DealResponse(EntityResponse):
    title: str
    amount: float | None = None
    stage: str
    account_id: str | None = None
    contact_id: str | None = None
    close_date: int | None = None
