"""
Note Model.

Free text attached to an account, contact, lead or deal.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tenantcrm.backend.models.base import Base, TenantKeyMixin, TimestampMixin


class Note(TenantKeyMixin, TimestampMixin, Base):
    """
    Note database model.

    Records who wrote the note so deletion can be limited to the
    author or a tenant admin.
    """

    __tablename__ = "notes"

    body: Mapped[str] = mapped_column(Text, nullable=False)
    account_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    contact_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    lead_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    deal_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    created_by: Mapped[str | None] = mapped_column(String(64), nullable=True)

    def __repr__(self) -> str:
        return f"<Note(tenant_id={self.tenant_id}, id={self.id})>"
