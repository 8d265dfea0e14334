# core/storage.py

"""
Durable key-value storage used by the Gradebook for persistence.

The Gradebook only needs two calls, `get(key)` and `set(key, value)`, with string values.
Two implementations are provided:
- `JsonFileStore`: keeps every key in a single JSON object on disk.
- `MemoryStore`: keeps every key in a dictionary, for tests and throwaway sessions.

Both accept an optional `quota_bytes` limit. Writes that would exceed it raise `QuotaExceededError`
and leave the stored data unchanged.
"""

from __future__ import annotations

import json
import logging
import os

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Base class for every storage failure."""


class StorageUnavailableError(StorageError):
    """The store cannot be read or written at all."""


class QuotaExceededError(StorageError):
    """The write would grow the store past its quota."""


class KeyValueStore:
    """
    Interface for string key-value stores.

    Subclasses must implement `_read_all()` and `_write_all()`; quota accounting and key lookup are shared.
    """

    def __init__(self, quota_bytes: int | None = None):
        self._quota_bytes = quota_bytes

    @property
    def quota_bytes(self) -> int | None:
        return self._quota_bytes

    def get(self, key: str) -> str | None:
        """
        Returns the stored value for `key`, or None if nothing is stored.

        Raises:
            StorageUnavailableError: If the store cannot be read.
        """
        value = self._read_all().get(key)
        logger.debug("Read key %r (%s)", key, "miss" if value is None else "hit")
        return value

    def set(self, key: str, value: str) -> None:
        """
        Stores `value` under `key`, replacing any previous value.

        Raises:
            QuotaExceededError: If the store would exceed `quota_bytes`.
            StorageUnavailableError: If the store cannot be read or written.
        """
        entries = self._read_all()
        entries[key] = value

        if self._quota_bytes is not None:
            size = sum(len(k.encode()) + len(v.encode()) for k, v in entries.items())

            if size > self._quota_bytes:
                raise QuotaExceededError(
                    f"Writing {key!r} needs {size} bytes, but the quota is {self._quota_bytes}."
                )

        self._write_all(entries)
        logger.debug("Wrote key %r (%d characters)", key, len(value))

    def _read_all(self) -> dict[str, str]:
        raise NotImplementedError

    def _write_all(self, entries: dict[str, str]) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    def __init__(self, quota_bytes: int | None = None):
        super().__init__(quota_bytes)
        self._entries: dict[str, str] = {}

    def _read_all(self) -> dict[str, str]:
        return dict(self._entries)

    def _write_all(self, entries: dict[str, str]) -> None:
        self._entries = dict(entries)


class JsonFileStore(KeyValueStore):
    """
    Stores every key as a string value inside one JSON object at `path`.

    Notes:
        - A missing file is an empty store; the file and its parent directories are created on the first write.
        - A file that exists but is not a JSON object of strings is treated as unavailable rather than overwritten.
    """

    def __init__(self, path: str, quota_bytes: int | None = None):
        super().__init__(quota_bytes)
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def _read_all(self) -> dict[str, str]:
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                entries = json.load(f)

        except FileNotFoundError:
            return {}

        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StorageUnavailableError(
                f"The store at {self._path} is not valid JSON: {e}"
            )

        except OSError as e:
            raise StorageUnavailableError(f"Failed to read {self._path}: {e}")

        if not isinstance(entries, dict) or not all(
            isinstance(v, str) for v in entries.values()
        ):
            raise StorageUnavailableError(
                f"The store at {self._path} must contain a JSON object of strings."
            )

        return entries

    def _write_all(self, entries: dict[str, str]) -> None:
        try:
            parent = os.path.dirname(self._path)
            if parent:
                os.makedirs(parent, exist_ok=True)

            # this intentionally overwrites the whole file
            with open(self._path, "w", encoding="utf-8") as f:
                json.dump(entries, f, indent=2, sort_keys=True)

        except OSError as e:
            raise StorageUnavailableError(f"Failed to write {self._path}: {e}")
