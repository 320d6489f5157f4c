"""Anger journal records and their persisted store."""

from .models import AngerRecord, deserialize_records, serialize_records
from .store import COUNT_KEY, RECORDS_KEY, RecordStore, progress_for

__all__ = [
    "AngerRecord",
    "COUNT_KEY",
    "RECORDS_KEY",
    "RecordStore",
    "deserialize_records",
    "progress_for",
    "serialize_records",
]
