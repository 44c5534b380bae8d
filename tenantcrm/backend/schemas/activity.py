"""
Activity Schemas.

Pydantic schemas for activity (task, call, meeting, note) requests and
responses. `remind_at_ms` drives client-side reminders.
"""

from typing import Literal

from pydantic import BaseModel, Field

from tenantcrm.backend.schemas.base import EntityResponse

ActivityType = Literal["task", "call", "meeting", "note"]
ActivityStatus = Literal["open", "done", "canceled"]


class ActivityCreate(BaseModel):
    """Schema for creating an activity."""

    id: str | None = Field(default=None, max_length=64)
    type: ActivityType = Field(..., examples=["task"])
    title: str = Field(..., min_length=1, max_length=255, examples=["Llamar al cliente"])
    due_date: int | None = Field(default=None, description="Due time, epoch milliseconds")
    remind_at_ms: int | None = Field(default=None, description="Reminder time, epoch milliseconds")
    status: ActivityStatus = "open"
    notes: str | None = Field(default=None, max_length=10000)
    account_id: str | None = Field(default=None, max_length=64)
    contact_id: str | None = Field(default=None, max_length=64)
    lead_id: str | None = Field(default=None, max_length=64)
    deal_id: str | None = Field(default=None, max_length=64)
    assigned_to: str | None = Field(default=None, max_length=64)


class ActivityUpdate(BaseModel):
    """Schema for updating an activity. Only supplied fields change."""

    type: ActivityType | None = None
    title: str | None = Field(default=None, min_length=1, max_length=255)
    due_date: int | None = None
    remind_at_ms: int | None = None
    status: ActivityStatus | None = None
    notes: str | None = Field(default=None, max_length=10000)
    account_id: str | None = Field(default=None, max_length=64)
    contact_id: str | None = Field(default=None, max_length=64)
    lead_id: str | None = Field(default=None, max_length=64)
    deal_id: str | None = Field(default=None, max_length=64)
    assigned_to: str | None = Field(default=None, max_length=64)


class ActivityResponse(EntityResponse):
    type: str
    title: str
    due_date: int | None = None
    remind_at_ms: int | None = None
    status: str
    notes: str | None = None
    account_id: str | None = None
    contact_id: str | None = None
    lead_id: str | None = None
    deal_id: str | None = None
    created_by: str | None = None
    assigned_to: str | None = None
