"""
Shared Infrastructure Module
=============================

Technical adapters for local device storage.
"""

# Persistence
from serenemind.shared.infrastructure.persistence import (
    InMemoryStorage,
    JsonFileStorage,
    KeyValueStorage,
)

__all__ = [
    # Persistence
    "InMemoryStorage",
    "JsonFileStorage",
    "KeyValueStorage",
]
