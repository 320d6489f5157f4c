"""State container handed to the UI.

Owns the reactive AppState for one app session. It is built explicitly in
``main`` and passed to ``build_shell``; nothing here is global.
"""

from __future__ import annotations

import logging

from serenemind.shared.core.configuration import SystemConfig
from serenemind.shared.core.event_bus import EventBus
from serenemind.shared.domain.records import RecordStore
from serenemind.shared.infrastructure.persistence import KeyValueStorage

from .app_state import AppState

logger = logging.getLogger(__name__)


class Store:
    """Per-session state for the tracker application.

    Usage:
        store = Store.open(event_bus, JsonFileStorage(path), config)
        await store.app.initialize()
        build_shell(page, store)
    """

    def __init__(self, event_bus: EventBus, records: RecordStore, config: SystemConfig) -> None:
        """Initialize store.

        Args:
            event_bus: The shared event bus instance
            records: Loaded record store for this session
            config: Effective system configuration
        """
        self.config = config
        self.records = records
        self.app = AppState(event_bus, records)

    @classmethod
    def open(cls, event_bus: EventBus, storage: KeyValueStorage, config: SystemConfig) -> "Store":
        """Load persisted records from ``storage`` and build the session state."""
        records = RecordStore.load(storage, progress_goal=config.tracker.progress_goal)
        logger.info("Store opened")
        return cls(event_bus, records, config)
