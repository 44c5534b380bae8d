"""
User Model.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from tenantcrm.backend.core.utils import new_id
from tenantcrm.backend.models.base import Base, TimestampMixin


class User(TimestampMixin, Base):
    """A person who can log in and belong to one or more tenants."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email!r})>"
