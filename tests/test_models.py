"""Unit tests for AngerRecord and record list encoding."""

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from serenemind.shared.domain.records import AngerRecord, deserialize_records, serialize_records


def test_record_defaults():
    record = AngerRecord(reason="traffic")
    assert record.reason == "traffic"
    assert record.id
    assert record.date.tzinfo is not None


def test_record_ids_are_unique():
    ids = {AngerRecord(reason="x").id for _ in range(100)}
    assert len(ids) == 100


def test_record_is_immutable():
    record = AngerRecord(reason="traffic")
    with pytest.raises(ValidationError):
        record.reason = "something else"


def test_serialized_layout():
    record = AngerRecord(
        id="abc",
        date=datetime(2025, 1, 1, 12, 30, tzinfo=timezone.utc),
        reason="queue",
    )
    data = json.loads(serialize_records([record]))
    assert isinstance(data, list)
    assert set(data[0]) == {"id", "date", "reason"}
    assert data[0]["id"] == "abc"
    assert data[0]["reason"] == "queue"
    assert data[0]["date"].startswith("2025-01-01T12:30:00")


def test_round_trip_preserves_content():
    records = [AngerRecord(reason=r) for r in ("a", "b", "ünïcode ☕", "")]
    decoded = deserialize_records(serialize_records(records))
    assert [(r.id, r.date, r.reason) for r in decoded] == [(r.id, r.date, r.reason) for r in records]


def test_empty_list_round_trip():
    assert deserialize_records(serialize_records([])) == []


@pytest.mark.parametrize("payload", [
    "not json",
    "{\"id\": \"x\"}",
    "[{\"id\": \"x\"}]",
    "[{\"id\": \"x\", \"date\": \"yesterday\", \"reason\": \"r\"}]",
])
def test_deserialize_rejects_malformed(payload):
    with pytest.raises(ValidationError):
        deserialize_records(payload)
