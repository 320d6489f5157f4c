"""Canonical event definitions for Serenemind."""

from __future__ import annotations

from typing import Any, Dict

from .event_bus import EventPayload

# Record store lifecycle
TOPIC_STORE_LOADED = "store.loaded"
TOPIC_RECORD_ADDED = "record.added"


def create_store_loaded_event(record_count: int, total_count: int) -> EventPayload:
    """Create a store loaded event (records read back from storage)."""
    return {
        "record_count": record_count,
        "total_count": total_count,
    }


def create_record_added_event(record: Dict[str, Any], total_count: int) -> EventPayload:
    """Create a record added event.

    Args:
        record: The new record as a JSON-compatible dict
        total_count: Counter value after the increment
    """
    return {
        "record": record,
        "total_count": total_count,
    }

