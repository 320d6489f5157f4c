"""Serenemind package."""

from .shared.core.event_bus import EventBus
from .shared.domain.records import AngerRecord, RecordStore

__all__ = ["AngerRecord", "EventBus", "RecordStore"]
