"""Meditation Controller - looping breathing circle."""

from __future__ import annotations

import logging

import flet as ft

from serenemind.shared.core.configuration import MeditationConfig
from serenemind.shared.domain.meditation import BreathingCycle
from serenemind.tracker.ui.theme import (
    TEXT_TITLE, TEXT_CAPTION, BG_PAGE, BREATH_HALO, BREATH_CORE,
)

logger = logging.getLogger(__name__)


class MeditationController:
    """Builds the Relax & Breathe tab.

    The inner circle animates toward ``cycle.size``; each time an animation
    finishes the cycle flips phase and the next one starts.
    """

    def __init__(self, config: MeditationConfig, page: ft.Page):
        self.page = page
        self.cycle = BreathingCycle.from_config(config)
        self._running = False

        self._core = ft.Container(
            width=self.cycle.size,
            height=self.cycle.size,
            shape=ft.BoxShape.CIRCLE,
            bgcolor=BREATH_CORE,
            animate=ft.Animation(self.cycle.duration_ms, ft.AnimationCurve.EASE_IN_OUT),
            on_animation_end=self._on_breath_end,
        )

    def _safe_update(self) -> None:
        try:
            self.page.update()
        except RuntimeError:
            pass

    def _apply_size(self) -> None:
        self._core.width = self.cycle.size
        self._core.height = self.cycle.size
        self._safe_update()

    def start(self) -> None:
        """Begin breathing when the tab becomes visible."""
        if self._running:
            return
        self._running = True
        self.cycle.toggle()
        self._apply_size()
        logger.debug("Breathing animation started")

    def stop(self) -> None:
        self._running = False

    def _on_breath_end(self, e=None) -> None:
        if not self._running:
            return
        self.cycle.toggle()
        self._apply_size()

    def build_view(self) -> ft.Control:
        halo = ft.Container(
            width=self.cycle.halo_size,
            height=self.cycle.halo_size,
            shape=ft.BoxShape.CIRCLE,
            bgcolor=BREATH_HALO,
            alignment=ft.Alignment(0, 0),
            content=self._core,
        )

        return ft.Container(
            expand=True,
            bgcolor=BG_PAGE,
            padding=20,
            content=ft.Column(
                [
                    ft.Container(
                        padding=16,
                        content=ft.Text("Relax & Breathe", size=32, weight=ft.FontWeight.BOLD, color=TEXT_TITLE),
                    ),
                    ft.Container(expand=True),
                    halo,
                    ft.Container(
                        padding=16,
                        content=ft.Text("Breathe in... Breathe out...", size=22, color=TEXT_CAPTION),
                    ),
                    ft.Container(expand=True),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            ),
        )
