"""
Shared Domain Module
====================

Business logic for the anger journal and the breathing exercise.
"""

# Records
from serenemind.shared.domain.records import (
    AngerRecord,
    RecordStore,
    deserialize_records,
    progress_for,
    serialize_records,
)

# Meditation
from serenemind.shared.domain.meditation import BreathingCycle

__all__ = [
    # Records
    "AngerRecord",
    "RecordStore",
    "deserialize_records",
    "progress_for",
    "serialize_records",
    # Meditation
    "BreathingCycle",
]
