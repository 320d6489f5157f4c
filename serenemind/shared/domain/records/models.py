"""Data models for the anger journal."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Iterable, List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


def _new_record_id() -> str:
    return str(uuid.uuid4())


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AngerRecord(BaseModel):
    """One journaled anger episode.

    Records are immutable once created: the identifier and timestamp are
    assigned at construction and never change.
    """
    model_config = ConfigDict(frozen=True, extra='ignore')

    id: str = Field(default_factory=_new_record_id, description="Process-unique record identifier")
    date: datetime = Field(default_factory=_utc_now, description="Creation time (UTC)")
    reason: str = Field(description="Free-text reason entered by the user")


_RecordList = TypeAdapter(List[AngerRecord])


def serialize_records(records: Iterable[AngerRecord]) -> str:
    """Encode records as a JSON array of ``{id, date, reason}`` objects."""
    return _RecordList.dump_json(list(records)).decode("utf-8")


def deserialize_records(payload: str | bytes) -> List[AngerRecord]:
    """Decode a JSON array produced by :func:`serialize_records`.

    Raises:
        pydantic.ValidationError: If the payload is not valid JSON or any
            element does not match the record schema.
    """
    return _RecordList.validate_json(payload)
