"""
Activity Model.

A task, call, meeting or note-type action, optionally with a reminder time
and links to an account, contact, lead or deal.
"""

from sqlalchemy import BigInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tenantcrm.backend.models.base import Base, TenantKeyMixin, TimestampMixin


class Activity(TenantKeyMixin, TimestampMixin, Base):
    """Activity database model."""

    __tablename__ = "activities"

    type: Mapped[str] = mapped_column(String(16), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    due_date: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    remind_at_ms: Mapped[int | None] = mapped_column(BigInteger, nullable=True, index=True)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="open", index=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    account_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    contact_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    lead_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    deal_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    created_by: Mapped[str | None] = mapped_column(String(64), nullable=True)
    assigned_to: Mapped[str | None] = mapped_column(String(64), nullable=True)

    def __repr__(self) -> str:
        return f"<Activity(tenant_id={self.tenant_id}, id={self.id}, title={self.title!r})>"
