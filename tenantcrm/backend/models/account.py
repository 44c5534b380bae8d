"""
Account Model.

A company or organization the tenant does business with.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from tenantcrm.backend.models.base import Base, TenantKeyMixin, TimestampMixin


class Account(TenantKeyMixin, TimestampMixin, Base):
    """Account database model."""

    __tablename__ = "accounts"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    website: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)

    def __repr__(self) -> str:
        return f"<Account(tenant_id={self.tenant_id}, id={self.id}, name={self.name!r})>"
