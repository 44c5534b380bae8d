"""
Deal Model.

A sales opportunity moving through pipeline stages.
"""

from sqlalchemy import BigInteger, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from tenantcrm.backend.models.base import Base, TenantKeyMixin, TimestampMixin

DEFAULT_DEAL_STAGE = "nuevo"


class Deal(TenantKeyMixin, TimestampMixin, Base):
    """Deal database model."""

    __tablename__ = "deals"

    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    amount: Mapped[float | None] = mapped_column(Float, nullable=True)
    stage: Mapped[str] = mapped_column(String(32), nullable=False, default=DEFAULT_DEAL_STAGE)
    account_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    contact_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    close_date: Mapped[int | None] = mapped_column(BigInteger, nullable=True)

    def __repr__(self) -> str:
        return f"<Deal(tenant_id={self.tenant_id}, id={self.id}, stage={self.stage!r})>"
