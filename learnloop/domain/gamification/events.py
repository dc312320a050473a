"""
Domain events raised by the UserProgress aggregate.

Every event identifies the learner and the learning path it applies to.
"""

from dataclasses import dataclass
from typing import Literal

from learnloop.domain.common.domain_event import DomainEvent
from learnloop.domain.common.value_objects import LessonId, PathId, UserId

HeartRefillReason = Literal["daily", "time", "purchase", "reward"]


@dataclass(frozen=True)
class XPEarned(DomainEvent):
    user_id: UserId
    path_id: PathId
    xp_amount: int
    new_total: int
    source: str


@dataclass(frozen=True)
class LevelUp(DomainEvent):
    user_id: UserId
    path_id: PathId
    new_level: int


@dataclass(frozen=True)
class StreakUpdated(DomainEvent):
    user_id: UserId
    path_id: PathId
    new_streak: int


@dataclass(frozen=True)
class StreakBroken(DomainEvent):
    user_id: UserId
    path_id: PathId
    previous_streak: int


@dataclass(frozen=True)
class HeartsRefilled(DomainEvent):
    user_id: UserId
    path_id: PathId
    hearts_restored: int
    reason: HeartRefillReason


@dataclass(frozen=True)
class HeartsDepleted(DomainEvent):
    """The learner ran out of hearts; use cases treat it as a failed lesson."""

    user_id: UserId
    path_id: PathId
    lesson_id: LessonId | None


@dataclass(frozen=True)
class PathCompleted(DomainEvent):
    user_id: UserId
    path_id: PathId
    total_xp: int
    time_spent_seconds: int
