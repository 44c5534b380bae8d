"""Unit tests for local key-value storage."""

import json
from pathlib import Path

import pytest

from tenantcrm.client.storage import JsonFileStore, MemoryStore, StorageError


class TestMemoryStore:

    def test_set_get_delete(self) -> None:
        store = MemoryStore()
        store.set("auth.tenant", "acme")

        assert store.get("auth.tenant") == "acme"
        store.delete("auth.tenant")
        assert store.get("auth.tenant", "fallback") == "fallback"

    def test_delete_missing_key(self) -> None:
        MemoryStore().delete("nothing")


class TestJsonFileStore:

    def test_values_survive_new_instance(self, tmp_path: Path) -> None:
        path = tmp_path / "state" / "storage.json"
        JsonFileStore(path).set("activity.notifications.map", {"a1": "n1"})

        assert JsonFileStore(path).get("activity.notifications.map") == {"a1": "n1"}
        assert json.loads(path.read_text())["activity.notifications.map"] == {"a1": "n1"}

    def test_missing_file_reads_default(self, tmp_path: Path) -> None:
        assert JsonFileStore(tmp_path / "none.json").get("auth.token") is None

    def test_corrupt_file_reads_default(self, tmp_path: Path) -> None:
        path = tmp_path / "storage.json"
        path.write_text("{not json", encoding="utf-8")
        store = JsonFileStore(path)

        assert store.get("auth.tenant", "demo") == "demo"
        # A write replaces the corrupt content.
        store.set("auth.tenant", "acme")
        assert store.get("auth.tenant") == "acme"

    def test_non_object_file_reads_default(self, tmp_path: Path) -> None:
        path = tmp_path / "storage.json"
        path.write_text("[1, 2]", encoding="utf-8")

        assert JsonFileStore(path).get("auth.token") is None

    def test_unserializable_value_raises(self, tmp_path: Path) -> None:
        store = JsonFileStore(tmp_path / "storage.json")

        with pytest.raises(StorageError):
            store.set("bad", object())

    def test_unwritable_location_raises(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory", encoding="utf-8")

        with pytest.raises(StorageError):
            JsonFileStore(blocker / "storage.json").set("auth.token", "t0k")
