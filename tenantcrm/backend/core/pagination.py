"""
Pagination Utilities.

List endpoints return a plain array ordered by `updated_at DESC, id ASC`,
bounded by `?limit=` and shifted by `?offset=`. The default and ceiling come from
application.yaml (`pagination.default_limit`, `pagination.max_limit`).
"""

from fastapi import Query

from tenantcrm.backend.core.config import get_app_config


def clamp_limit(limit: int | None) -> int:
    """Apply the configured default and ceiling to a requested limit."""
    pagination = get_app_config().application.pagination
    if limit is None:
        return pagination.default_limit
    return max(1, min(limit, pagination.max_limit))


def get_list_limit(
    limit: int | None = Query(
        default=None,
        ge=1,
        description="Maximum number of items to return (capped by configuration)",
    ),
) -> int:
    """
    FastAPI dependency for the list limit.

    Usage:
        @router.get("")
        async def list_items(limit: ListLimit):
            ...
    """
    return clamp_limit(limit)


def get_list_offset(
    offset: int = Query(
        default=0,
        ge=0,
        description="Number of items to skip; page through a full listing with limit and offset",
    ),
) -> int:
    """FastAPI dependency for the list offset."""
    return offset
