"""
Base Service.

Base classes for all services providing common patterns for business logic.
Services orchestrate repositories, handle transactions, and implement
business rules.

`EntityService` implements the CRUD flow shared by the tenant-owned
entities (accounts, contacts, deals, leads, activities, notes):

    - id format check and duplicate check on create
    - same-tenant check for every reference field (account_id, ...)
    - partial update that only touches supplied fields

Usage:
    from tenantcrm.backend.services.base import EntityService

    class AccountService(EntityService[Account]):
        entity = "account"
        repository_class = AccountRepository
"""

import re
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tenantcrm.backend.core.exceptions import (
    ConflictError,
    DatabaseError,
    ValidationError,
)
from tenantcrm.backend.core.logging import get_logger
from tenantcrm.backend.core.tenancy import TenantContext
from tenantcrm.backend.core.utils import new_id
from tenantcrm.backend.repositories.base import TenantScopedRepository
from tenantcrm.backend.schemas.base import ID_PATTERN

logger = get_logger(__name__)

T = TypeVar("T")
ModelT = TypeVar("ModelT")

ID_RE = re.compile(ID_PATTERN)


class BaseService:
    """
    Base class for all services.

    Provides:
    - Database session management
    - Logging context
    - Error wrapping for database operations
    - Common validation patterns

    Subclasses should:
    - Call super().__init__(session) in their __init__
    - Initialize repositories in __init__
    - Implement business logic methods
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize the service with a database session.

        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session
        self._logger = get_logger(self.__class__.__module__)

    @property
    def session(self) -> AsyncSession:
        """Get the database session."""
        return self._session

    async def _execute_db_operation(
        self,
        operation: str,
        coro: Any,
        conflict_code: str = "conflict",
    ) -> T:
        """
        Execute a database operation with error handling.

        Wraps database operations to convert SQLAlchemy exceptions
        to application-specific exceptions.

        Args:
            operation: Description of the operation for logging
            coro: Coroutine to execute
            conflict_code: Error code used for unique constraint violations

        Returns:
            Result of the coroutine

        Raises:
            ConflictError: For unique constraint violations
            DatabaseError: For other database errors
        """
        try:
            return await coro
        except IntegrityError as e:
            self._logger.warning(
                "Database integrity error",
                extra={"operation": operation, "error": str(e)},
            )
            error_str = str(e).lower()
            if "unique" in error_str or "duplicate" in error_str:
                raise ConflictError("Resource already exists", code=conflict_code)
            raise DatabaseError(f"Database constraint violation: {operation}")
        except SQLAlchemyError as e:
            self._logger.error(
                "Database error",
                extra={"operation": operation, "error": str(e)},
            )
            raise DatabaseError(f"Database operation failed: {operation}")

    def _validate_required(
        self,
        fields: dict[str, Any],
        field_names: list[str],
    ) -> None:
        """
        Validate that required fields are present and not empty.

        Raises:
            ValidationError: If any required field is missing or empty
        """
        missing = []
        for name in field_names:
            value = fields.get(name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)

        if missing:
            raise ValidationError(
                f"{', '.join(missing)} required",
                details={"missing_fields": missing},
            )

    def _validate_id(self, value: str, code: str) -> None:
        """
        Validate an identifier supplied by the client.

        Raises:
            ValidationError: If the id has characters outside [A-Za-z0-9_-]
        """
        if not ID_RE.fullmatch(value):
            raise ValidationError(
                "id may only contain letters, digits, '_' and '-'",
                code=code,
            )

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a service operation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """Log debug information."""
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )


class EntityService(BaseService, Generic[ModelT]):
    """
    CRUD for one tenant-owned entity.

    Class attributes:
        entity: Singular name used in error codes (`account` → `account_exists`)
        repository_class: TenantScopedRepository subclass for the entity
        required_fields: Fields that may not be cleared by an update
        reference_fields: Field name → repository class the id must exist in
    """

    entity: ClassVar[str]
    repository_class: ClassVar[type[TenantScopedRepository]]
    required_fields: ClassVar[tuple[str, ...]] = ()
    reference_fields: ClassVar[dict[str, type[TenantScopedRepository]]] = {}

    def __init__(self, session: AsyncSession, ctx: TenantContext) -> None:
        super().__init__(session)
        self.ctx = ctx
        self.repo = self._make_repository()

    def _make_repository(self) -> TenantScopedRepository:
        return self.repository_class(self.session, self.ctx.tenant_id)

    async def _check_references(self, data: dict[str, Any]) -> None:
        """
        Ensure every non-null reference points at a row in this tenant.

        Raises:
            ValidationError: `invalid_<field>` when the referenced row is missing
        """
        for field, repo_class in self.reference_fields.items():
            value = data.get(field)
            if value is None:
                continue
            if not await repo_class(self.session, self.ctx.tenant_id).exists(value):
                raise ValidationError(f"{field} does not exist", code=f"invalid_{field}")

    def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        """Hook for subclasses to fill server-side fields before insert."""
        return data

    async def get(self, id: str) -> ModelT:
        """Get one row of this tenant."""
        return await self.repo.get_by_id(id)

    async def list(self, limit: int, offset: int = 0, **filters: Any) -> list[ModelT]:
        self._log_debug(f"Listing {self.entity}s", limit=limit, offset=offset)
        return await self.repo.list(limit, offset, **filters)

    async def create(self, data: BaseModel) -> ModelT:
        """
        Create a row in the caller's tenant.

        Raises:
            ValidationError: For a malformed id or a dangling reference
            ConflictError: `<entity>_exists` when the id is already taken
        """
        values = data.model_dump()
        entity_id = values.pop("id", None) or new_id()
        self._validate_id(entity_id, code=f"invalid_{self.entity}_id")

        if await self.repo.exists(entity_id):
            raise ConflictError(f"{self.entity} already exists", code=f"{self.entity}_exists")
        await self._check_references(values)

        values = self._prepare_create(values)
        instance = await self._execute_db_operation(
            f"create {self.entity}",
            self.repo.create(id=entity_id, **values),
            conflict_code=f"{self.entity}_exists",
        )
        self._log_operation(f"{self.entity.capitalize()} created", id=entity_id)
        return instance

    async def update(self, id: str, data: BaseModel) -> ModelT:
        """
        Apply the supplied fields to an existing row.

        Raises:
            NotFoundError: If the row does not exist in this tenant
        """
        changes = data.model_dump(exclude_unset=True)
        cleared = [name for name in self.required_fields if name in changes]
        if cleared:
            self._validate_required(changes, cleared)
        await self._check_references(changes)

        instance = await self._execute_db_operation(
            f"update {self.entity}",
            self.repo.update(id, **changes),
        )
        self._log_operation(f"{self.entity.capitalize()} updated", id=id, fields=sorted(changes))
        return instance

    async def delete(self, id: str) -> None:
        """
        Delete a row of this tenant.

        Raises:
            NotFoundError: If the row does not exist in this tenant
        """
        await self._execute_db_operation(f"delete {self.entity}", self.repo.delete(id))
        self._log_operation(f"{self.entity.capitalize()} deleted", id=id)
