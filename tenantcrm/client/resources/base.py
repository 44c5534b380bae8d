"""
Base Resource Client.

Maps list/get/create/update/delete onto the REST routes of one resource:

    list    GET     /{resource}            (?limit=&offset= for paging)
    get     GET     /{resource}/{id}
    create  POST    /{resource}
    update  PATCH   /{resource}/{id}
    delete  DELETE  /{resource}/{id}

Ids are generated on the client. If the server reports that a generated
id is already taken (409 `<entity>_exists`), create retries with a new id.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from tenantcrm.backend.core.config import get_app_config
from tenantcrm.backend.core.logging import get_logger, log_with_source
from tenantcrm.backend.core.utils import new_id
from tenantcrm.client.http import APIClient, ApiError, IdCollisionError

logger = get_logger(__name__)

MAX_CREATE_ATTEMPTS = 3


class ResourceClient:
    """
    Client for one tenant-scoped resource.

    Subclasses set the path segment and the singular entity name:

        class AccountsClient(ResourceClient):
            resource = "accounts"
            entity = "account"
    """

    resource: str
    entity: str

    def __init__(self, api: APIClient) -> None:
        self.api = api

    @property
    def collection_path(self) -> str:
        return f"/{self.resource}"

    def item_path(self, id: str) -> str:
        return f"/{self.resource}/{quote(str(id), safe='')}"

    async def get(self, id: str) -> dict[str, Any]:
        return await self.api.get(self.item_path(id))

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Create a record and return it as stored.

        A caller-supplied id is sent once. Without one, a time-ordered id
        is generated and replaced on collision, at most MAX_CREATE_ATTEMPTS times.

        Raises:
            ApiError: On any failure other than a generated-id collision
            IdCollisionError: When every generated id collided
        """
        payload = dict(data)
        if payload.get("id"):
            return await self.api.post(self.collection_path, payload)

        exists_code = f"{self.entity}_exists"
        for attempt in range(1, MAX_CREATE_ATTEMPTS + 1):
            payload["id"] = new_id()
            try:
                return await self.api.post(self.collection_path, payload)
            except ApiError as e:
                if e.status != 409 or e.code != exists_code:
                    raise
                log_with_source(
                    logger, "cli", "warning", "Generated id collided, retrying",
                    resource=self.resource, attempt=attempt,
                )

        raise IdCollisionError(
            f"Could not allocate a free {self.entity} id after {MAX_CREATE_ATTEMPTS} attempts",
            status=409,
            code=exists_code,
        )

    async def update(self, id: str, patch: dict[str, Any]) -> Any:
        return await self.api.patch(self.item_path(id), patch)

    async def delete(self, id: str) -> Any:
        return await self.api.delete(self.item_path(id))

    async def list(self, **filters: Any) -> list[dict[str, Any]]:
        """List records; None-valued filters are not sent."""
        params = {name: value for name, value in filters.items() if value is not None}
        result = await self.api.get(self.collection_path, params=params or None)
        return result if isinstance(result, list) else []

    async def list_all(self, page_size: int | None = None, **filters: Any) -> list[dict[str, Any]]:
        """
        List every matching record, one `limit`/`offset` page at a time.

        Paging stops at the first page shorter than `page_size`, which
        defaults to the server's configured maximum list limit.
        """
        size = page_size or get_app_config().application.pagination.max_limit
        rows: list[dict[str, Any]] = []
        seen: set[str] = set()
        offset = 0
        while True:
            page = await self.list(limit=size, offset=offset, **filters)
            for row in page:
                if row.get("id") not in seen:
                    seen.add(row.get("id"))
                    rows.append(row)
            if len(page) < size:
                return rows
            offset += len(page)
