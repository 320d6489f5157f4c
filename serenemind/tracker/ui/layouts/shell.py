from __future__ import annotations

from typing import List

import flet as ft

from serenemind.tracker.state import Store
from serenemind.tracker.state.app_state import TAB_MEDITATION, TAB_TRACKER
from serenemind.tracker.controllers import MeditationController, TrackerController
from serenemind.tracker.ui.theme import PURPLE_PRIMARY, BG_NAV, TEXT_CAPTION


def apply_shell_theme(page: ft.Page, store: Store) -> None:
    """Apply the light purple baseline theme."""
    ui = store.config.ui
    page.theme = ft.Theme(
        color_scheme_seed=ui.primary_color or PURPLE_PRIMARY,
        use_material3=True,
    )
    page.theme_mode = ft.ThemeMode.DARK if ui.theme_mode == "dark" else ft.ThemeMode.LIGHT
    page.title = "Serenemind"
    page.padding = 0


def _nav_destinations(items: List[dict]) -> List[ft.NavigationBarDestination]:
    destinations: List[ft.NavigationBarDestination] = []
    for item in items:
        icon_name = str(item.get("icon", "circle")).upper()
        icon = getattr(ft.Icons, icon_name, ft.Icons.CIRCLE)
        destinations.append(
            ft.NavigationBarDestination(icon=icon, label=item.get("label", ""))
        )
    return destinations


def build_shell(page: ft.Page, store: Store) -> ft.View:
    apply_shell_theme(page, store)

    tracker_controller = TrackerController(store.app, page)
    meditation_controller = MeditationController(store.config.meditation, page)

    views = {
        TAB_TRACKER: tracker_controller.build_view(),
        TAB_MEDITATION: meditation_controller.build_view(),
    }

    content_container = ft.Container(expand=True, content=views[TAB_TRACKER])

    nav_bar = ft.NavigationBar(destinations=_nav_destinations(store.app.nav_items))
    nav_bar.bgcolor = BG_NAV
    nav_bar.selected_index = 0

    status_text = ft.Text(store.app.status_text.value, color=TEXT_CAPTION, size=12)
    status_bar = ft.Container(
        padding=ft.padding.symmetric(horizontal=20, vertical=6),
        content=status_text,
    )

    def _sync_tab() -> None:
        tab_id = store.app.selected_tab.value
        ids = store.app.tab_ids
        if tab_id in ids:
            nav_bar.selected_index = ids.index(tab_id)
        content_container.content = views.get(tab_id, views[TAB_TRACKER])
        try:
            page.update()
        except RuntimeError:
            # Session destroyed, ignore update
            return
        # Only animate while the meditation tab is on screen
        if tab_id == TAB_MEDITATION:
            meditation_controller.start()
        else:
            meditation_controller.stop()

    def _sync_status() -> None:
        status_text.value = store.app.status_text.value
        try:
            page.update()
        except RuntimeError:
            # Session destroyed, ignore update
            pass

    def _on_nav_change(e: ft.ControlEvent) -> None:
        idx = e.control.selected_index
        ids = store.app.tab_ids
        if idx is not None and 0 <= idx < len(ids):
            store.app.set_tab(ids[idx])

    nav_bar.on_change = _on_nav_change  # type: ignore[assignment]

    # --- Listener Bindings ---
    store.app.selected_tab.listen(_sync_tab)
    store.app.status_text.listen(_sync_status)

    return ft.View(
        route="/",
        controls=[content_container, status_bar],
        navigation_bar=nav_bar,
        padding=0,
    )
