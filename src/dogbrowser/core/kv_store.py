"""Key-value storage with whole-value get/set semantics.

The favourites list is persisted as one opaque string blob under a fixed
key.  Stores in this module only know how to read and overwrite whole values;
they never merge or partially update.

- :class:`JsonFileKeyValueStore` keeps every key in a single JSON object on
  disk, rewriting the file on each ``set``.
- :class:`MemoryKeyValueStore` keeps values in a dict for the lifetime of the
  process.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Interface shared by all key-value stores."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class JsonFileKeyValueStore:
    """File-backed key-value store.

    The file holds a single JSON object mapping keys to string values.  A
    missing, unreadable, or non-object file reads as an empty store; the next
    ``set`` replaces it.  Write errors propagate to the caller.

    Args:
        path: Path to the JSON file (parent directories are created)
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable key-value file {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring key-value file {self.path}: top level is not an object")
            return {}
        return data

    def get(self, key: str) -> str | None:
        """Return the value stored at ``key``, or None if absent."""
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        """Overwrite the value stored at ``key``."""
        data = self._read_all()
        data[key] = value
        with open(self.path, "w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=2)


class MemoryKeyValueStore:
    """In-process key-value store."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
