from .breathing import BreathingCycle

__all__ = ["BreathingCycle"]
