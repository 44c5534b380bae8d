"""
Base Schemas.

Response bodies shared by every endpoint. Successful calls return the
resource itself (a row or a list of rows) or `OkResponse`; failures
return `ErrorResponse`.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

ID_PATTERN = r"^[A-Za-z0-9_-]+$"


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(description="Machine-readable error code", examples=["not_found"])
    message: str | None = Field(default=None, description="Human-readable message")
    details: dict[str, Any] | None = None


class OkResponse(BaseModel):
    """Acknowledgement returned by update and delete operations."""

    ok: bool = True


class EntityResponse(BaseModel):
    """Fields every tenant-owned entity returns. The tenant is never exposed."""

    id: str
    created_at: int = Field(description="Creation time, epoch milliseconds")
    updated_at: int = Field(description="Last update time, epoch milliseconds")

    model_config = ConfigDict(from_attributes=True)
