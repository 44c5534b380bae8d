"""
Activity Reminders.

Schedules a local notification for each open activity that has a
`remind_at_ms` in the future, and keeps a persistent map from activity id
to notification id (storage key `activity.notifications.map`) so a
reminder can be replaced or cancelled later.

The notification transport is pluggable through the Notifier protocol.
LogNotifier only logs what would be delivered.

Trigger shape:
    delay < 60 s   → interval trigger, at least 10 s
    otherwise      → absolute date trigger
"""

import math
from dataclasses import dataclass
from typing import Any, Literal, Protocol

from tenantcrm.backend.core.logging import get_logger, log_with_source
from tenantcrm.backend.core.utils import new_id, now_ms
from tenantcrm.client.storage import KeyValueStore

logger = get_logger(__name__)

REMINDER_MAP_KEY = "activity.notifications.map"
DEFAULT_MIN_LEAD_MS = 10_000
INTERVAL_THRESHOLD_MS = 60_000
MIN_INTERVAL_SECONDS = 10


def normalize_future_time(when_ms: int, now_ms: int, min_lead_ms: int = DEFAULT_MIN_LEAD_MS) -> int:
    """
    Push a reminder time at least `min_lead_ms` into the future and round
    it up to a whole second.

    >>> normalize_future_time(1_000, 5_000)
    15000
    >>> normalize_future_time(100_500, 5_000)
    101000
    """
    target = max(when_ms, now_ms + min_lead_ms)
    return math.ceil(target / 1000) * 1000


@dataclass(frozen=True)
class Trigger:
    """When a notification fires: after `seconds`, or at `at_ms`."""

    kind: Literal["interval", "date"]
    seconds: int | None = None
    at_ms: int | None = None


def build_trigger(when_ms: int, now_ms: int) -> Trigger:
    delay_ms = when_ms - now_ms
    if delay_ms < INTERVAL_THRESHOLD_MS:
        return Trigger(kind="interval", seconds=max(MIN_INTERVAL_SECONDS, math.ceil(delay_ms / 1000)))
    return Trigger(kind="date", at_ms=when_ms)


class Notifier(Protocol):
    """Delivers local notifications."""

    def schedule(self, title: str, body: str, trigger: Trigger, data: dict[str, Any]) -> str:
        """Schedule a notification and return its id."""
        ...

    def cancel(self, notification_id: str) -> None:
        ...


class LogNotifier:
    """Notifier that records and logs reminders instead of delivering them."""

    def __init__(self) -> None:
        self.scheduled: dict[str, dict[str, Any]] = {}

    def schedule(self, title: str, body: str, trigger: Trigger, data: dict[str, Any]) -> str:
        notification_id = new_id()
        self.scheduled[notification_id] = {"title": title, "body": body, "trigger": trigger, "data": data}
        log_with_source(
            logger, "cli", "info", "Reminder scheduled",
            notification_id=notification_id, title=title, trigger=trigger.kind,
            seconds=trigger.seconds, at_ms=trigger.at_ms, **data,
        )
        return notification_id

    def cancel(self, notification_id: str) -> None:
        self.scheduled.pop(notification_id, None)
        log_with_source(logger, "cli", "info", "Reminder cancelled", notification_id=notification_id)


class ReminderScheduler:
    """
    Keeps at most one scheduled notification per activity.

    Usage:
        scheduler = ReminderScheduler(LogNotifier(), MemoryStore())
        scheduler.schedule("act1", "Llamar", "Cliente Acme", when_ms)
        scheduler.cancel("act1")
    """

    def __init__(
        self,
        notifier: Notifier,
        store: KeyValueStore,
        min_lead_ms: int = DEFAULT_MIN_LEAD_MS,
    ) -> None:
        self.notifier = notifier
        self.store = store
        self.min_lead_ms = min_lead_ms

    def mapping(self) -> dict[str, str]:
        """Activity id → notification id, as persisted."""
        value = self.store.get(REMINDER_MAP_KEY, {})
        if not isinstance(value, dict):
            return {}
        return {str(k): str(v) for k, v in value.items()}

    def _save(self, mapping: dict[str, str]) -> None:
        self.store.set(REMINDER_MAP_KEY, mapping)

    def schedule(
        self,
        activity_id: str,
        title: str,
        body: str,
        when_ms: int,
        now: int | None = None,
    ) -> str:
        """
        Schedule (or replace) the reminder for an activity.

        Returns:
            The notifier's id for the new notification
        """
        current = now if now is not None else now_ms()
        fire_at = normalize_future_time(when_ms, current, self.min_lead_ms)

        mapping = self.mapping()
        previous = mapping.pop(activity_id, None)
        if previous is not None:
            self.notifier.cancel(previous)

        notification_id = self.notifier.schedule(
            title,
            body,
            build_trigger(fire_at, current),
            {"activity_id": activity_id},
        )
        mapping[activity_id] = notification_id
        self._save(mapping)
        return notification_id

    def cancel(self, activity_id: str) -> bool:
        """Cancel the reminder for an activity. Returns False if none was mapped."""
        mapping = self.mapping()
        notification_id = mapping.pop(activity_id, None)
        if notification_id is None:
            return False
        self.notifier.cancel(notification_id)
        self._save(mapping)
        return True

    def cancel_all(self) -> int:
        """Cancel every mapped reminder and return how many were cancelled."""
        mapping = self.mapping()
        for notification_id in mapping.values():
            self.notifier.cancel(notification_id)
        self._save({})
        return len(mapping)

    async def sync(self, activities_client: Any, now: int | None = None) -> int:
        """
        Reconcile local reminders with the server.

        Every open activity with a future reminder is (re)scheduled and
        reminders for any other activity are cancelled.

        Returns:
            Number of reminders scheduled
        """
        current = now if now is not None else now_ms()
        activities = await activities_client.list_open_with_reminder(current)
        wanted = {activity["id"] for activity in activities}

        for activity_id in set(self.mapping()) - wanted:
            self.cancel(activity_id)

        for activity in activities:
            self.schedule(
                activity["id"],
                activity.get("title") or "Recordatorio",
                activity.get("notes") or "",
                activity["remind_at_ms"],
                now=current,
            )

        log_with_source(logger, "cli", "info", "Reminders synced", scheduled=len(activities))
        return len(activities)
