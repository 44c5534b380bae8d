"""
Base Repository.

Base classes for all repositories with common CRUD operations.
`TenantScopedRepository` adds the tenant filter to every statement it
issues, so an id from another tenant behaves exactly like a missing one.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from tenantcrm.backend.core.exceptions import NotFoundError
from tenantcrm.backend.core.logging import get_logger
from tenantcrm.backend.core.utils import now_ms
from tenantcrm.backend.models.base import Base

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with common CRUD operations.

    Subclasses should set the model class:

        class UserRepository(BaseRepository[User]):
            model = User
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _select(self) -> Select:
        """Base SELECT for this repository. Scoped subclasses add filters here."""
        return select(self.model)

    async def get_by_id(self, id: str) -> ModelType:
        """
        Get a single record by ID.

        Raises:
            NotFoundError: If record not found
        """
        instance = await self.get_by_id_or_none(id)
        if instance is None:
            raise NotFoundError("not found")
        return instance

    async def get_by_id_or_none(self, id: str) -> ModelType | None:
        """Get a single record by ID, returning None if not found."""
        result = await self.session.execute(
            self._select().where(self.model.id == str(id))
        )
        return result.scalar_one_or_none()

    async def create(self, **kwargs: Any) -> ModelType:
        """Create a new record."""
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def update(self, id: str, **kwargs: Any) -> ModelType:
        """
        Update an existing record and bump `updated_at`.

        Raises:
            NotFoundError: If record not found
        """
        instance = await self.get_by_id(id)

        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)
        instance.updated_at = now_ms()

        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, id: str) -> None:
        """
        Delete a record by ID.

        Raises:
            NotFoundError: If record not found
        """
        instance = await self.get_by_id(id)
        await self.session.delete(instance)
        await self.session.flush()

    async def exists(self, id: str) -> bool:
        """Check if a record exists by ID."""
        return await self.get_by_id_or_none(id) is not None


class TenantScopedRepository(BaseRepository[ModelType]):
    """
    Repository for models that carry a tenant_id.

        repo = AccountRepository(session, tenant_id="demo")
        await repo.list(limit=100)
    """

    def __init__(self, session: AsyncSession, tenant_id: str) -> None:
        super().__init__(session)
        self.tenant_id = tenant_id

    def _select(self) -> Select:
        return select(self.model).where(self.model.tenant_id == self.tenant_id)

    async def create(self, **kwargs: Any) -> ModelType:
        """Create a record in this repository's tenant."""
        kwargs["tenant_id"] = self.tenant_id
        return await super().create(**kwargs)

    async def list(self, limit: int, offset: int = 0, **filters: Any) -> list[ModelType]:
        """
        List records, most recently updated first.

        The order is total, so consecutive offsets page without gaps.
        Keyword filters are equality matches; None values are ignored.
        """
        query = self._select()
        for field, value in filters.items():
            if value is not None:
                query = query.where(getattr(self.model, field) == value)
        query = (
            query.order_by(self.model.updated_at.desc(), self.model.id.asc())
            .offset(offset)
            .limit(limit)
        )

        result = await self.session.execute(query)
        return list(result.scalars().all())
