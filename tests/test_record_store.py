"""Unit tests for RecordStore."""

import json

import pytest

from serenemind.shared.domain.records import (
    COUNT_KEY,
    RECORDS_KEY,
    AngerRecord,
    RecordStore,
    progress_for,
    serialize_records,
)
from serenemind.shared.domain.records import store as store_module
from serenemind.shared.infrastructure.persistence import InMemoryStorage, JsonFileStorage


def test_load_empty(memory_storage):
    store = RecordStore.load(memory_storage)
    assert store.records == []
    assert store.total_count == 0
    assert store.progress == 0.0


def test_add_record_appends_and_increments(memory_storage):
    store = RecordStore.load(memory_storage)
    record = store.add_record("stuck in traffic")

    assert len(store.records) == 1
    assert store.total_count == 1
    assert store.records[0].reason == "stuck in traffic"
    assert record == store.records[0]


def test_add_record_preserves_insertion_order(memory_storage):
    store = RecordStore.load(memory_storage)
    store.add_record("a")
    store.add_record("b")

    assert [r.reason for r in store.records] == ["a", "b"]
    assert [r.reason for r in store.journal()] == ["b", "a"]


def test_add_record_persists_both_keys(memory_storage):
    store = RecordStore.load(memory_storage)
    store.add_record("a")
    store.add_record("b")

    stored = json.loads(memory_storage.get(RECORDS_KEY))
    assert [item["reason"] for item in stored] == ["a", "b"]
    assert memory_storage.get(COUNT_KEY) == 2


def test_state_survives_reload(file_storage, storage_path):
    first = RecordStore.load(file_storage)
    first.add_record("a")
    first.add_record("b")

    second = RecordStore.load(JsonFileStorage(storage_path))
    assert [(r.id, r.date, r.reason) for r in second.records] == [
        (r.id, r.date, r.reason) for r in first.records
    ]
    assert second.total_count == 2


def test_records_property_returns_copy(memory_storage):
    store = RecordStore.load(memory_storage)
    store.add_record("a")
    store.records.append(AngerRecord(reason="sneaky"))
    assert len(store.records) == 1


@pytest.mark.parametrize("bad_payload", [
    "not json at all",
    "{\"unexpected\": true}",
    "[{\"reason\": 1}]",
    42,
    ["raw", "list"],
])
def test_corrupted_records_load_as_empty(bad_payload):
    storage = InMemoryStorage({RECORDS_KEY: bad_payload, COUNT_KEY: 3})
    store = RecordStore.load(storage)
    assert store.records == []
    # The counter is read independently of the list
    assert store.total_count == 3


@pytest.mark.parametrize("raw_file", [
    b'{"angerCount": 2, "angerLogs": "\xff\xfe"}',
    b"[" * 100000 + b"]" * 100000,
])
def test_unreadable_storage_file_loads_empty(storage_path, raw_file):
    storage_path.parent.mkdir(parents=True)
    storage_path.write_bytes(raw_file)

    store = RecordStore.load(JsonFileStorage(storage_path))
    assert store.records == []
    assert store.total_count == 0

    store.add_record("fresh start")
    assert RecordStore.load(JsonFileStorage(storage_path)).total_count == 1


@pytest.mark.parametrize("bad_count", ["7", 2.5, True, -1, None])
def test_invalid_counter_loads_as_zero(bad_count):
    storage = InMemoryStorage({COUNT_KEY: bad_count})
    assert RecordStore.load(storage).total_count == 0


def test_counter_is_kept_independent_of_list():
    records = [AngerRecord(reason="only one")]
    storage = InMemoryStorage({RECORDS_KEY: serialize_records(records), COUNT_KEY: 10})

    store = RecordStore.load(storage)
    assert len(store.records) == 1
    assert store.total_count == 10

    store.add_record("another")
    assert len(store.records) == 2
    assert store.total_count == 11


def test_encode_failure_skips_records_write_only(memory_storage, monkeypatch):
    store = RecordStore.load(memory_storage)
    store.add_record("first")
    saved_records = memory_storage.get(RECORDS_KEY)

    def _fail(records):
        raise ValueError("cannot encode")

    monkeypatch.setattr(store_module, "serialize_records", _fail)
    store.add_record("second")

    assert memory_storage.get(RECORDS_KEY) == saved_records
    assert memory_storage.get(COUNT_KEY) == 2
    assert [r.reason for r in store.records] == ["first", "second"]


def test_store_does_not_validate_reason(memory_storage):
    store = RecordStore.load(memory_storage)
    store.add_record("")
    assert store.total_count == 1
    assert store.records[0].reason == ""


@pytest.mark.parametrize("count, expected", [
    (0, 0.0),
    (10, 0.2),
    (50, 1.0),
    (75, 1.0),
])
def test_progress_for(count, expected):
    assert progress_for(count) == pytest.approx(expected)


def test_progress_uses_configured_goal():
    storage = InMemoryStorage({COUNT_KEY: 5})
    store = RecordStore.load(storage, progress_goal=10)
    assert store.progress == pytest.approx(0.5)


def test_progress_rejects_non_positive_goal():
    with pytest.raises(ValueError):
        progress_for(1, goal=0)
