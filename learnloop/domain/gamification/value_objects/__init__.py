"""Gamification value objects."""

from .hearts import Hearts
from .streak import Streak
from .xp import XP

__all__ = ["XP", "Hearts", "Streak"]
