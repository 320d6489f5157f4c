"""FletXr Reactive State Management for the tracker app.

Architecture:
- AppState: journal, counter and navigation state bound by the UI
- Store: per-session container passed explicitly to the UI
"""

from .app_state import AppState
from .store import Store

__all__ = ["AppState", "Store"]
