"""
Activities Client.

Filters accepted by `list`: deal_id, contact_id, account_id, lead_id,
status, remind_after.
"""

from typing import Any

from tenantcrm.client.resources.base import ResourceClient


class ActivitiesClient(ResourceClient):
    resource = "activities"
    entity = "activity"

    async def list_open_with_reminder(self, now_ms: int) -> list[dict[str, Any]]:
        """Open activities whose reminder is still in the future."""
        activities = await self.list_all(status="open", remind_after=now_ms)
        return [
            activity for activity in activities
            if activity.get("remind_at_ms") is not None and activity["remind_at_ms"] > now_ms
        ]
