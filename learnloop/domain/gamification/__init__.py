"""Gamification module domain layer: XP, hearts, streaks and learner progress."""

from .aggregates import UserProgress, UserProgressSnapshot
from .services import HeartRefillService
from .value_objects import XP, Hearts, Streak

__all__ = [
    "XP",
    "HeartRefillService",
    "Hearts",
    "Streak",
    "UserProgress",
    "UserProgressSnapshot",
]
