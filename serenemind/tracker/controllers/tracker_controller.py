"""
Tracker Controller - counter ring, reason input and journal list.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List

import flet as ft

from serenemind.tracker.ui.theme import (
    TEXT_TITLE, TEXT_SECTION_HEADER, TEXT_CAPTION, TEXT_PLACEHOLDER, TEXT_ENTRY,
    BUTTON_BG, BUTTON_TEXT,
    RING_TRACK, RING_VALUE, RING_SIZE, RING_STROKE,
    BG_PAGE, BG_CARD, CORNER_RADIUS, SHADOW_BLUR,
)

if TYPE_CHECKING:
    from serenemind.tracker.state.app_state import AppState

logger = logging.getLogger(__name__)


class TrackerController:
    """Builds the Anger Tracker tab and keeps it bound to AppState."""

    def __init__(self, app_state: AppState, page: ft.Page):
        self.app_state = app_state
        self.page = page

        self._count_text = ft.Text(
            str(app_state.total_count.value),
            size=32, weight=ft.FontWeight.BOLD, color=TEXT_TITLE,
        )
        self._ring = ft.ProgressRing(
            value=app_state.progress,
            width=RING_SIZE,
            height=RING_SIZE,
            stroke_width=RING_STROKE,
            stroke_cap=ft.StrokeCap.ROUND,
            color=RING_VALUE,
            bgcolor=RING_TRACK,
        )
        self._reason_field = ft.TextField(
            hint_text="Why did you get angry?",
            value=app_state.draft.value,
            bgcolor=BG_CARD,
            border_radius=CORNER_RADIUS,
            on_change=self._on_draft_change,
            on_submit=self._on_submit,
        )
        self._journal_column = ft.Column(spacing=10, horizontal_alignment=ft.CrossAxisAlignment.START)

        app_state.total_count.listen(self._sync_counter)
        app_state.journal.listen(self._sync_journal)
        app_state.draft.listen(self._sync_draft)
        self._sync_journal(update=False)

    def _safe_update(self) -> None:
        try:
            self.page.update()
        except RuntimeError:
            # Session destroyed, ignore update
            pass

    # --- Bindings ---

    def _sync_counter(self, update: bool = True) -> None:
        self._count_text.value = str(self.app_state.total_count.value)
        self._ring.value = self.app_state.progress
        if update:
            self._safe_update()

    def _sync_draft(self, update: bool = True) -> None:
        self._reason_field.value = self.app_state.draft.value
        if update:
            self._safe_update()

    def _sync_journal(self, update: bool = True) -> None:
        entries: List[Dict[str, Any]] = list(self.app_state.journal.value)
        if not entries:
            self._journal_column.controls = [
                ft.Text("No reasons logged yet.", color=TEXT_PLACEHOLDER)
            ]
        else:
            self._journal_column.controls = [self._journal_card(entry) for entry in entries]
        if update:
            self._safe_update()

    def _journal_card(self, entry: Dict[str, Any]) -> ft.Control:
        return ft.Container(
            key=entry.get("id"),
            padding=16,
            bgcolor=BG_CARD,
            border_radius=CORNER_RADIUS,
            shadow=ft.BoxShadow(blur_radius=3, color="rgba(0,0,0,0.15)"),
            content=ft.Text(entry.get("reason", ""), color=TEXT_ENTRY),
        )

    # --- Events ---

    def _on_draft_change(self, e: ft.ControlEvent) -> None:
        self.app_state.set_draft(e.control.value or "")

    async def _on_submit(self, e: ft.ControlEvent) -> None:
        added = await self.app_state.log_anger(self._reason_field.value or "")
        if not added:
            logger.debug("Log Anger pressed with empty input")

    # --- View ---

    def build_view(self) -> ft.Control:
        counter = ft.Container(
            width=RING_SIZE,
            height=RING_SIZE,
            shadow=ft.BoxShadow(blur_radius=SHADOW_BLUR * 2, color="rgba(0,0,0,0.1)"),
            border_radius=RING_SIZE,
            content=ft.Stack(
                [
                    self._ring,
                    ft.Container(
                        width=RING_SIZE,
                        height=RING_SIZE,
                        alignment=ft.Alignment(0, 0),
                        content=ft.Column(
                            [
                                self._count_text,
                                ft.Text("Total Anger Count", size=12, color=TEXT_CAPTION),
                            ],
                            spacing=0,
                            tight=True,
                            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                        ),
                    ),
                ],
            ),
        )

        log_button = ft.Row(
            [
                ft.ElevatedButton(
                    "Log Anger",
                    bgcolor=BUTTON_BG,
                    color=BUTTON_TEXT,
                    expand=True,
                    on_click=self._on_submit,
                ),
            ],
        )

        return ft.Container(
            expand=True,
            bgcolor=BG_PAGE,
            padding=20,
            content=ft.Column(
                [
                    ft.Text("Anger Tracker", size=32, weight=ft.FontWeight.BOLD, color=TEXT_TITLE),
                    counter,
                    self._reason_field,
                    log_button,
                    ft.Container(
                        padding=ft.padding.only(top=10),
                        content=ft.Column(
                            [
                                ft.Text("Journaled Reasons", size=22, weight=ft.FontWeight.BOLD,
                                        color=TEXT_SECTION_HEADER),
                                self._journal_column,
                            ],
                            spacing=10,
                        ),
                    ),
                ],
                spacing=20,
                scroll=ft.ScrollMode.AUTO,
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            ),
        )
