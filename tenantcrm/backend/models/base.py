"""
SQLAlchemy Base Model.

Base class for all database models with common fields and utilities.
"""

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from tenantcrm.backend.core.utils import new_id, now_ms


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class TimestampMixin:
    """Mixin that adds created_at and updated_at as epoch milliseconds."""

    created_at: Mapped[int] = mapped_column(
        BigInteger,
        default=now_ms,
        nullable=False,
    )
    updated_at: Mapped[int] = mapped_column(
        BigInteger,
        default=now_ms,
        onupdate=now_ms,
        nullable=False,
        index=True,
    )


class TenantKeyMixin:
    """
    Mixin for tenant-owned entities.

    The primary key is (tenant_id, id): the same id may exist in two
    tenants, and every lookup must name the tenant.
    """

    tenant_id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        index=True,
    )
    id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        default=new_id,
    )
