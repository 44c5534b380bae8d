"""
Tenant and Membership Models.

A tenant is an isolated workspace. Memberships grant a user a role
(owner, admin, member) inside one tenant.
"""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from tenantcrm.backend.models.base import Base, TimestampMixin


class Tenant(TimestampMixin, Base):
    """Tenant (workspace) database model."""

    __tablename__ = "tenants"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_by: Mapped[str | None] = mapped_column(String(64), nullable=True)

    def __repr__(self) -> str:
        return f"<Tenant(id={self.id}, name={self.name!r})>"


class Membership(TimestampMixin, Base):
    """A user's role inside a tenant."""

    __tablename__ = "memberships"

    tenant_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("tenants.id", ondelete="CASCADE"), primary_key=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True, index=True,
    )
    role: Mapped[str] = mapped_column(String(16), nullable=False, default="member")

    def __repr__(self) -> str:
        return f"<Membership(tenant_id={self.tenant_id}, user_id={self.user_id}, role={self.role!r})>"
