"""
Accounts Client.
"""

from dataclasses import dataclass, field
from typing import Any

from tenantcrm.client.resources.base import ResourceClient


@dataclass
class AccountsPage:
    items: list[dict[str, Any]] = field(default_factory=list)
    next_cursor: str | None = None


def _matches(account: dict[str, Any], query: str) -> bool:
    return any(
        query in (account.get(name) or "").lower()
        for name in ("name", "website", "phone")
    )


class AccountsClient(ResourceClient):
    resource = "accounts"
    entity = "account"

    async def list_paged(self, q: str = "", cursor: str | None = None, limit: int = 20) -> AccountsPage:
        """
        Search and page through accounts on the client.

        Matches `q` case-insensitively against name, website and phone,
        orders by updated_at descending then name, and resumes after the
        account whose id is `cursor`. An unknown cursor restarts from the
        first page.
        """
        query = q.strip().lower()
        accounts = await self.list()
        if query:
            accounts = [account for account in accounts if _matches(account, query)]
        accounts.sort(key=lambda a: (-(a.get("updated_at") or 0), (a.get("name") or "").lower()))

        start = 0
        if cursor:
            ids = [account.get("id") for account in accounts]
            start = ids.index(cursor) + 1 if cursor in ids else 0

        items = accounts[start:start + limit]
        has_more = start + limit < len(accounts)
        next_cursor = items[-1]["id"] if has_more and items else None
        return AccountsPage(items=items, next_cursor=next_cursor)
