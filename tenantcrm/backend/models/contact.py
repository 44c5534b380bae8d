"""
Contact Model.

A person, optionally linked to an account of the same tenant.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from tenantcrm.backend.models.base import Base, TenantKeyMixin, TimestampMixin


class Contact(TenantKeyMixin, TimestampMixin, Base):
    """Contact database model."""

    __tablename__ = "contacts"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    company: Mapped[str | None] = mapped_column(String(255), nullable=True)
    position: Mapped[str | None] = mapped_column(String(255), nullable=True)
    account_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)

    def __repr__(self) -> str:
        return f"<Contact(tenant_id={self.tenant_id}, id={self.id}, name={self.name!r})>"
