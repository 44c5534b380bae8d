"""
Activity Repository.

Adds reminder and visibility filters on top of the scoped list.
"""

from sqlalchemy import Select, or_

from tenantcrm.backend.models.activity import Activity
from tenantcrm.backend.repositories.base import TenantScopedRepository


class ActivityRepository(TenantScopedRepository[Activity]):
    model = Activity

    def __init__(self, session, tenant_id: str, visible_to: str | None = None) -> None:
        """
        Args:
            visible_to: When set, only activities created by or assigned
                to this user are returned.
        """
        super().__init__(session, tenant_id)
        self.visible_to = visible_to

    def _select(self) -> Select:
        query = super()._select()
        if self.visible_to is not None:
            query = query.where(
                or_(
                    Activity.created_by == self.visible_to,
                    Activity.assigned_to == self.visible_to,
                )
            )
        return query

    async def list(
        self,
        limit: int,
        offset: int = 0,
        remind_after: int | None = None,
        **filters,
    ) -> list[Activity]:
        """List activities; `remind_after` keeps reminders strictly later than it."""
        if remind_after is None:
            return await super().list(limit, offset, **filters)

        query = self._select().where(Activity.remind_at_ms > remind_after)
        for field, value in filters.items():
            if value is not None:
                query = query.where(getattr(Activity, field) == value)
        query = (
            query.order_by(Activity.updated_at.desc(), Activity.id.asc())
            .offset(offset)
            .limit(limit)
        )

        result = await self.session.execute(query)
        return list(result.scalars().all())
