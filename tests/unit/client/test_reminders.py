"""Unit tests for activity reminders."""

import pytest

from tenantcrm.client.reminders import (
    REMINDER_MAP_KEY,
    LogNotifier,
    ReminderScheduler,
    Trigger,
    build_trigger,
    normalize_future_time,
)
from tenantcrm.client.storage import MemoryStore

NOW = 1_700_000_000_000


class TestNormalizeFutureTime:

    def test_past_time_gets_minimum_lead(self) -> None:
        assert normalize_future_time(NOW - 5_000, NOW) == NOW + 10_000

    def test_rounds_up_to_whole_second(self) -> None:
        assert normalize_future_time(NOW + 60_001, NOW) == NOW + 61_000

    def test_future_time_on_second_is_kept(self) -> None:
        assert normalize_future_time(NOW + 120_000, NOW) == NOW + 120_000

    def test_custom_lead(self) -> None:
        assert normalize_future_time(NOW, NOW, min_lead_ms=30_000) == NOW + 30_000


class TestBuildTrigger:

    def test_short_delay_is_interval(self) -> None:
        assert build_trigger(NOW + 15_000, NOW) == Trigger(kind="interval", seconds=15)

    def test_interval_has_floor(self) -> None:
        assert build_trigger(NOW + 2_000, NOW).seconds == 10

    def test_long_delay_is_date(self) -> None:
        assert build_trigger(NOW + 60_000, NOW) == Trigger(kind="date", at_ms=NOW + 60_000)


class FakeActivities:
    def __init__(self, activities: list[dict]) -> None:
        self.activities = activities
        self.calls: list[int] = []

    async def list_open_with_reminder(self, now_ms: int) -> list[dict]:
        self.calls.append(now_ms)
        return self.activities


class TestReminderScheduler:

    @pytest.fixture
    def notifier(self) -> LogNotifier:
        return LogNotifier()

    @pytest.fixture
    def store(self) -> MemoryStore:
        return MemoryStore()

    @pytest.fixture
    def scheduler(self, notifier: LogNotifier, store: MemoryStore) -> ReminderScheduler:
        return ReminderScheduler(notifier, store)

    def test_schedule_persists_mapping(self, scheduler, notifier, store) -> None:
        notification_id = scheduler.schedule("t1", "Llamar", "Cliente Acme", NOW + 120_000, now=NOW)

        assert store.get(REMINDER_MAP_KEY) == {"t1": notification_id}
        scheduled = notifier.scheduled[notification_id]
        assert scheduled["trigger"] == Trigger(kind="date", at_ms=NOW + 120_000)
        assert scheduled["data"] == {"activity_id": "t1"}

    def test_reschedule_replaces_previous(self, scheduler, notifier) -> None:
        first = scheduler.schedule("t1", "Llamar", "", NOW + 120_000, now=NOW)
        second = scheduler.schedule("t1", "Llamar", "", NOW + 240_000, now=NOW)

        assert first not in notifier.scheduled
        assert list(notifier.scheduled) == [second]
        assert scheduler.mapping() == {"t1": second}

    def test_cancel(self, scheduler, notifier) -> None:
        scheduler.schedule("t1", "Llamar", "", NOW + 120_000, now=NOW)

        assert scheduler.cancel("t1") is True
        assert scheduler.cancel("t1") is False
        assert notifier.scheduled == {}
        assert scheduler.mapping() == {}

    def test_cancel_all(self, scheduler, notifier) -> None:
        scheduler.schedule("t1", "a", "", NOW + 120_000, now=NOW)
        scheduler.schedule("t2", "b", "", NOW + 120_000, now=NOW)

        assert scheduler.cancel_all() == 2
        assert notifier.scheduled == {}

    def test_corrupt_mapping_is_ignored(self, store) -> None:
        store.set(REMINDER_MAP_KEY, ["not", "a", "map"])

        assert ReminderScheduler(LogNotifier(), store).mapping() == {}

    @pytest.mark.asyncio
    async def test_sync_schedules_and_cancels_stale(self, scheduler, notifier) -> None:
        scheduler.schedule("stale", "Old", "", NOW + 120_000, now=NOW)
        activities = FakeActivities([
            {"id": "t1", "title": "Llamar", "notes": "Acme", "remind_at_ms": NOW + 30_000},
            {"id": "t2", "title": None, "notes": None, "remind_at_ms": NOW + 600_000},
        ])

        scheduled = await scheduler.sync(activities, now=NOW)

        assert scheduled == 2
        assert activities.calls == [NOW]
        assert set(scheduler.mapping()) == {"t1", "t2"}
        titles = sorted(item["title"] for item in notifier.scheduled.values())
        assert titles == ["Llamar", "Recordatorio"]
        t1 = notifier.scheduled[scheduler.mapping()["t1"]]
        assert t1["trigger"] == Trigger(kind="interval", seconds=30)
