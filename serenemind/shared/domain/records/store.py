"""Record store: the authoritative anger journal and its running counter.

The store keeps the in-memory list and counter and mirrors both into local
key-value storage after every mutation. Two independent storage entries
are used:

    "angerLogs"  -> JSON text of the full record list (rewritten every time)
    "angerCount" -> integer counter

The counter is persisted and loaded independently of the list, so the two
can disagree if storage was partially cleared. The store keeps whatever it
finds and only ever increments the counter.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from pydantic import ValidationError

from serenemind.shared.infrastructure.persistence import KeyValueStorage
from .models import AngerRecord, deserialize_records, serialize_records

logger = logging.getLogger(__name__)

RECORDS_KEY = "angerLogs"
COUNT_KEY = "angerCount"
DEFAULT_PROGRESS_GOAL = 50


def progress_for(total_count: int, goal: int = DEFAULT_PROGRESS_GOAL) -> float:
    """Fraction of ``goal`` reached, capped at 1.0."""
    if goal <= 0:
        raise ValueError("goal must be positive")
    return min(total_count / goal, 1.0)


def _load_records(storage: KeyValueStorage) -> List[AngerRecord]:
    payload = storage.get(RECORDS_KEY)
    if payload is None:
        return []
    if not isinstance(payload, (str, bytes)):
        logger.warning(f"Ignoring stored '{RECORDS_KEY}': expected JSON text, got {type(payload).__name__}")
        return []

    try:
        return deserialize_records(payload)
    except ValidationError as e:
        logger.warning(f"Ignoring stored '{RECORDS_KEY}': {e.error_count()} decode error(s)")
        return []


def _load_count(storage: KeyValueStorage) -> int:
    value = storage.get(COUNT_KEY)
    if value is None:
        return 0
    # bool is an int subclass but never a valid counter
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        logger.warning(f"Ignoring stored '{COUNT_KEY}'={value!r}, starting at 0")
        return 0
    return value


class RecordStore:
    """In-memory anger journal kept in sync with key-value storage.

    Build one per session with :meth:`load` and hand it to whatever renders
    it; there is no module-level instance.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        records: Optional[Sequence[AngerRecord]] = None,
        total_count: int = 0,
        progress_goal: int = DEFAULT_PROGRESS_GOAL,
    ) -> None:
        self.storage = storage
        self._records: List[AngerRecord] = list(records or [])
        self._total_count = total_count
        self.progress_goal = progress_goal

    @classmethod
    def load(cls, storage: KeyValueStorage, progress_goal: int = DEFAULT_PROGRESS_GOAL) -> "RecordStore":
        """Create a store from whatever is persisted in ``storage``.

        Never raises for bad data: an unreadable record list loads as empty
        and an absent or invalid counter loads as 0.
        """
        records = _load_records(storage)
        total_count = _load_count(storage)
        if total_count != len(records):
            logger.info(f"Stored counter ({total_count}) differs from record count ({len(records)})")
        logger.info(f"RecordStore loaded: {len(records)} record(s), total_count={total_count}")
        return cls(storage, records, total_count, progress_goal)

    # --- Read access ---

    @property
    def records(self) -> List[AngerRecord]:
        """Records oldest first. Returns a copy."""
        return list(self._records)

    @property
    def total_count(self) -> int:
        return self._total_count

    @property
    def progress(self) -> float:
        return progress_for(self._total_count, self.progress_goal)

    def journal(self) -> List[AngerRecord]:
        """Records newest first, the order they are displayed in."""
        return list(reversed(self._records))

    def __len__(self) -> int:
        return len(self._records)

    # --- Mutation ---

    def add_record(self, reason: str) -> AngerRecord:
        """Append a new record, bump the counter and persist both.

        ``reason`` is stored as given; callers are expected to reject empty
        input before getting here.
        """
        record = AngerRecord(reason=reason)
        self._records.append(record)
        self._total_count += 1
        logger.debug(f"Added record {record.id} (total_count={self._total_count})")
        self.save()
        return record

    def save(self) -> None:
        """Rewrite both storage entries from the in-memory state.

        If the record list cannot be encoded its write is skipped; the
        counter is written regardless.
        """
        try:
            payload = serialize_records(self._records)
        except (ValueError, TypeError) as e:
            logger.warning(f"Skipping '{RECORDS_KEY}' write, could not encode records: {e}")
        else:
            self.storage.set(RECORDS_KEY, payload)

        self.storage.set(COUNT_KEY, self._total_count)
