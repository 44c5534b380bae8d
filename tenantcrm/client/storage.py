"""
Durable Local Storage.

Small key-value stores used by the client for the auth token, the active
tenant and the reminder map. Values are any JSON-serializable object.

Reads never fail: an unreadable or corrupt file yields the default and a
warning in the log. Writes that cannot be persisted raise StorageError.

Usage:
    store = JsonFileStore(Path("~/.tenantcrm/storage.json").expanduser())
    store.set("auth.tenant", "demo")
    store.get("auth.tenant")  # "demo"
"""

import json
import os
from pathlib import Path
from typing import Any

from tenantcrm.backend.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


class StorageError(Exception):
    """Raised when a value cannot be written to local storage."""


class KeyValueStore:
    """Interface shared by the client's local stores."""

    def get(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    """In-process store. Nothing survives the process; used by tests."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore(KeyValueStore):
    """
    Store backed by a single JSON object on disk.

    Every call reads the file, so separate processes (two CLI invocations)
    see each other's writes. Writes replace the file atomically.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            log_with_source(
                logger, "cli", "warning", "Local storage unreadable, using defaults",
                path=str(self.path), error=str(e),
            )
            return {}
        if not isinstance(data, dict):
            log_with_source(
                logger, "cli", "warning", "Local storage is not a JSON object, using defaults",
                path=str(self.path),
            )
            return {}
        return data

    def _write(self, data: dict[str, Any]) -> None:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e

    def get(self, key: str, default: Any = None) -> Any:
        return self._read().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)


def get_default_store() -> JsonFileStore:
    """File store at `client.storage_path` from client.yaml."""
    from tenantcrm.backend.core.config import get_app_config

    return JsonFileStore(Path(get_app_config().client.storage_path).expanduser())
