"""
Lead Model.

A prospect that has not yet become an account or contact.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from tenantcrm.backend.models.base import Base, TenantKeyMixin, TimestampMixin


class Lead(TenantKeyMixin, TimestampMixin, Base):
    """Lead database model."""

    __tablename__ = "leads"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    company: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[str | None] = mapped_column(String(32), nullable=True)

    def __repr__(self) -> str:
        return f"<Lead(tenant_id={self.tenant_id}, id={self.id}, name={self.name!r})>"
