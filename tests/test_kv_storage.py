"""Unit tests for local key-value storage."""

import json

from serenemind.shared.infrastructure.persistence import InMemoryStorage, JsonFileStorage, KeyValueStorage


def test_storages_match_protocol(file_storage):
    assert isinstance(InMemoryStorage(), KeyValueStorage)
    assert isinstance(file_storage, KeyValueStorage)


def test_missing_file_is_empty(file_storage, storage_path):
    assert file_storage.get("angerLogs") is None
    assert file_storage.get("angerCount", 0) == 0
    assert not file_storage.contains("angerCount")
    assert not storage_path.exists()


def test_set_writes_json_object(file_storage, storage_path):
    assert file_storage.set("angerCount", 3) is True
    assert file_storage.set("angerLogs", "[]") is True

    with open(storage_path, encoding="utf-8") as f:
        assert json.load(f) == {"angerCount": 3, "angerLogs": "[]"}
    assert not storage_path.with_suffix(".tmp").exists()


def test_values_survive_new_instance(file_storage, storage_path):
    file_storage.set("angerCount", 7)
    reopened = JsonFileStorage(storage_path)
    assert reopened.get("angerCount") == 7
    assert reopened.contains("angerCount")


def test_remove(file_storage, storage_path):
    file_storage.set("angerCount", 1)
    assert file_storage.remove("angerCount") is True
    assert file_storage.remove("angerCount") is False
    assert JsonFileStorage(storage_path).get("angerCount") is None


def test_corrupt_file_is_moved_aside(storage_path):
    storage_path.parent.mkdir(parents=True)
    storage_path.write_text("{not valid json", encoding="utf-8")

    storage = JsonFileStorage(storage_path)
    assert storage.get("angerCount") is None
    assert not storage_path.exists()
    backups = list(storage_path.parent.glob("preferences.corrupted-*.json"))
    assert len(backups) == 1
    assert backups[0].read_text(encoding="utf-8") == "{not valid json"

    # A fresh write starts from an empty mapping
    assert storage.set("angerCount", 1) is True
    assert json.loads(storage_path.read_text(encoding="utf-8")) == {"angerCount": 1}


def test_non_object_file_is_reset(storage_path):
    storage_path.parent.mkdir(parents=True)
    storage_path.write_text("[1, 2, 3]", encoding="utf-8")

    storage = JsonFileStorage(storage_path)
    assert storage.get("angerCount") is None
    assert not storage_path.exists()


def test_write_failure_returns_false(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file where a directory should be", encoding="utf-8")

    storage = JsonFileStorage(blocker / "preferences.json")
    assert storage.set("angerCount", 1) is False
    # The in-memory value is still visible for this session
    assert storage.get("angerCount") == 1


def test_in_memory_storage():
    storage = InMemoryStorage({"angerCount": 2})
    assert storage.get("angerCount") == 2
    assert storage.set("angerLogs", "[]") is True
    assert storage.snapshot() == {"angerCount": 2, "angerLogs": "[]"}
    assert storage.remove("angerCount") is True
    assert storage.remove("angerCount") is False


def test_non_utf8_file_is_moved_aside(storage_path):
    storage_path.parent.mkdir(parents=True)
    storage_path.write_bytes(b'{"angerCount": 2, "angerLogs": "\xff\xfe"}')

    storage = JsonFileStorage(storage_path)
    assert storage.get("angerCount") is None
    assert not storage_path.exists()
    assert len(list(storage_path.parent.glob("preferences.corrupted-*.json"))) == 1


def test_deeply_nested_file_is_moved_aside(storage_path):
    storage_path.parent.mkdir(parents=True)
    storage_path.write_text("[" * 100000 + "]" * 100000, encoding="utf-8")

    storage = JsonFileStorage(storage_path)
    assert storage.get("angerCount") is None
    assert not storage_path.exists()
    assert storage.set("angerCount", 1) is True


def test_repeated_corruption_keeps_every_backup(storage_path):
    storage_path.parent.mkdir(parents=True)

    storage_path.write_text("{first", encoding="utf-8")
    assert JsonFileStorage(storage_path).get("angerCount") is None
    storage_path.write_text("{second", encoding="utf-8")
    assert JsonFileStorage(storage_path).get("angerCount") is None

    backups = sorted(
        p.read_text(encoding="utf-8")
        for p in storage_path.parent.glob("preferences.corrupted-*.json")
    )
    assert backups == ["{first", "{second"]


def test_unserializable_value_is_rejected(file_storage, storage_path):
    assert file_storage.set("angerLogs", object()) is False
    assert file_storage.get("angerLogs") is None
    assert not file_storage.contains("angerLogs")

    # Later writes are unaffected
    assert file_storage.set("angerCount", 1) is True
    assert json.loads(storage_path.read_text(encoding="utf-8")) == {"angerCount": 1}


def test_in_memory_remove_of_none_value():
    storage = InMemoryStorage({"angerLogs": None})
    assert storage.contains("angerLogs")
    assert storage.remove("angerLogs") is True
    assert not storage.contains("angerLogs")
    assert storage.remove("angerLogs") is False
