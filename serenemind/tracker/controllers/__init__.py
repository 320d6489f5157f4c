"""Tab controllers: each builds one screen and binds it to state."""

from .meditation_controller import MeditationController
from .tracker_controller import TrackerController

__all__ = ["MeditationController", "TrackerController"]
