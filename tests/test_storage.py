# tests/test_storage.py

import json

import pytest

from core.storage import (
    JsonFileStore,
    MemoryStore,
    QuotaExceededError,
    StorageUnavailableError,
)


def test_memory_store_get_and_set():
    store = MemoryStore()
    assert store.get("courses") is None

    store.set("courses", "[]")
    assert store.get("courses") == "[]"


def test_quota_rejects_write_and_keeps_old_value():
    store = MemoryStore(quota_bytes=20)
    store.set("k", "small")

    with pytest.raises(QuotaExceededError):
        store.set("k", "x" * 50)

    assert store.get("k") == "small"


def test_json_file_store_missing_file_is_empty(tmp_path):
    store = JsonFileStore(str(tmp_path / "missing.json"))

    assert store.get("courses") is None


def test_json_file_store_creates_parent_directories(tmp_path):
    path = tmp_path / "nested" / "dir" / "gradebook.json"
    store = JsonFileStore(str(path))

    store.set("courses", "[]")

    assert path.exists()
    with open(path) as f:
        assert json.load(f) == {"courses": "[]"}

    assert JsonFileStore(str(path)).get("courses") == "[]"


def test_json_file_store_rejects_corrupt_file(tmp_path):
    path = tmp_path / "gradebook.json"
    path.write_text("{not json")

    store = JsonFileStore(str(path))

    with pytest.raises(StorageUnavailableError):
        store.get("courses")

    with pytest.raises(StorageUnavailableError):
        store.set("courses", "[]")

    assert path.read_text() == "{not json"


def test_json_file_store_rejects_non_string_values(tmp_path):
    path = tmp_path / "gradebook.json"
    path.write_text(json.dumps({"courses": []}))

    with pytest.raises(StorageUnavailableError):
        JsonFileStore(str(path)).get("courses")


def test_json_file_store_unwritable_path(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    store = JsonFileStore(str(blocker / "gradebook.json"))

    with pytest.raises(StorageUnavailableError):
        store.set("courses", "[]")


def test_json_file_store_rejects_invalid_utf8(tmp_path):
    path = tmp_path / "gradebook.json"
    path.write_bytes(b'{"courses": "\xff\xfe"}')

    with pytest.raises(StorageUnavailableError):
        JsonFileStore(str(path)).get("courses")
