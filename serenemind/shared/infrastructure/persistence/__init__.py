"""Persistence adapters (local key-value storage)."""

from serenemind.shared.infrastructure.persistence.kv_storage import (
    InMemoryStorage,
    JsonFileStorage,
    KeyValueStorage,
)

__all__ = ["InMemoryStorage", "JsonFileStorage", "KeyValueStorage"]
