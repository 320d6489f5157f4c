"""Breathing animation cycle.

The meditation screen grows and shrinks a circle forever. This holds the
phase so the view only has to ask for the next target size.
"""

from __future__ import annotations

from dataclasses import dataclass

from serenemind.shared.core.configuration import MeditationConfig


@dataclass
class BreathingCycle:
    """Alternates an inner circle between its exhaled and inhaled size."""

    min_size: int = 120
    max_size: int = 180
    halo_size: int = 200
    breath_seconds: float = 4.0
    inhaling: bool = False

    @classmethod
    def from_config(cls, config: MeditationConfig) -> "BreathingCycle":
        return cls(
            min_size=config.min_size,
            max_size=config.max_size,
            halo_size=config.halo_size,
            breath_seconds=config.breath_seconds,
        )

    @property
    def size(self) -> int:
        """Target size for the current phase."""
        return self.max_size if self.inhaling else self.min_size

    @property
    def duration_ms(self) -> int:
        return int(round(self.breath_seconds * 1000))

    def toggle(self) -> int:
        """Flip between inhale and exhale and return the new target size."""
        self.inhaling = not self.inhaling
        return self.size
