"""Application State for the tracker app.

Reactive view-model between the Flet UI and the RecordStore. UI controls
listen to the Rx fields here; the only write path into the store is
``log_anger``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fletx.core import RxInt, RxList, RxStr

from serenemind.shared.core import events
from serenemind.shared.core.event_bus import EventBus, EventPayload
from serenemind.shared.domain.records import AngerRecord, RecordStore

logger = logging.getLogger(__name__)

TAB_TRACKER = "tracker"
TAB_MEDITATION = "meditation"


def _record_row(record: AngerRecord) -> Dict[str, Any]:
    return record.model_dump(mode="json")


class AppState:
    """Reactive state for the tracker and meditation tabs.

    Mirrors the RecordStore into Rx primitives so bound controls refresh
    whenever a record is logged.
    """

    def __init__(self, event_bus: EventBus, records: RecordStore) -> None:
        """Initialize application state.

        Args:
            event_bus: The shared event bus for UI notifications
            records: The session's record store
        """
        self.bus = event_bus
        self.record_store = records

        # Navigation
        self.nav_items: List[Dict[str, str]] = [
            {"id": TAB_TRACKER, "label": "Tracker", "icon": "bar_chart"},
            {"id": TAB_MEDITATION, "label": "Meditation", "icon": "spa"},
        ]
        self.selected_tab: RxStr = RxStr(TAB_TRACKER)

        # Journal
        self.records: RxList[Dict[str, Any]] = RxList([])
        self.journal: RxList[Dict[str, Any]] = RxList([])
        self.total_count: RxInt = RxInt(0)
        self.draft: RxStr = RxStr("")

        # Status
        self.status_text: RxStr = RxStr("Loading...")

        self._started = False
        self._sync_from_store()

    @property
    def progress(self) -> float:
        return self.record_store.progress

    async def initialize(self) -> None:
        """Subscribe the status line to store events and announce the loaded journal.

        Safe to call more than once; only the first call subscribes.
        """
        if self._started:
            return

        await self.bus.subscribe(events.TOPIC_STORE_LOADED, self._handle_store_loaded)
        await self.bus.subscribe(events.TOPIC_RECORD_ADDED, self._handle_record_added)

        self._started = True
        self._sync_from_store()

        await self.bus.publish(
            events.TOPIC_STORE_LOADED,
            events.create_store_loaded_event(len(self.record_store), self.record_store.total_count),
        )

    # --- Public Actions ---

    async def log_anger(self, text: str) -> bool:
        """Journal ``text`` as a new record.

        Blank input is ignored and never reaches the store.

        Returns:
            True if a record was added
        """
        if not text or not text.strip():
            logger.debug("Ignoring empty anger reason")
            return False

        record = self.record_store.add_record(text)
        self.draft.value = ""
        self._sync_from_store()

        await self.bus.publish(
            events.TOPIC_RECORD_ADDED,
            events.create_record_added_event(_record_row(record), self.record_store.total_count),
        )
        return True

    def set_draft(self, text: str) -> None:
        self.draft.value = text

    def set_tab(self, tab_id: str) -> None:
        """Change the selected tab.

        Args:
            tab_id: One of the ids in ``nav_items``
        """
        if tab_id not in self.tab_ids:
            logger.warning(f"Unknown tab '{tab_id}'")
            return
        self.selected_tab.value = tab_id

    @property
    def tab_ids(self) -> List[str]:
        return [item["id"] for item in self.nav_items]

    # --- Sync ---

    def _sync_from_store(self) -> None:
        rows = [_record_row(r) for r in self.record_store.records]
        self.records.value = rows
        self.journal.value = list(reversed(rows))
        self.total_count.value = self.record_store.total_count

    # --- Event Handlers ---

    async def _handle_store_loaded(self, payload: EventPayload) -> None:
        count = payload.get("record_count", 0)
        self.status_text.value = "No entries yet" if not count else f"Loaded {count} entries"

    async def _handle_record_added(self, payload: EventPayload) -> None:
        record = payload.get("record") or {}
        reason = str(record.get("reason", "")).strip()
        if len(reason) > 40:
            reason = reason[:37] + "..."
        self.status_text.value = f"Logged: {reason}"
