"""
LessonCompletion entity.

Historical record of a finished lesson, kept for statistics and XP history.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Self

from learnloop.domain.common.calendar import utc_now
from learnloop.domain.common.entity import Entity
from learnloop.domain.common.exceptions import DomainError
from learnloop.domain.common.value_objects import LessonCompletionId, LessonId, UserId
from learnloop.domain.gamification.value_objects import XP, Hearts
from learnloop.domain.learning_path.value_objects import Accuracy

HIGH_SCORE_THRESHOLD = 90


@dataclass(eq=False)
class LessonCompletion(Entity[LessonCompletionId]):
    """
    A completed lesson.

    Business Rules:
    - Time spent cannot be negative
    """

    id: LessonCompletionId
    user_id: UserId
    lesson_id: LessonId
    completed_at: datetime
    xp_earned: XP
    accuracy: Accuracy
    time_spent_seconds: int
    hearts_remaining: Hearts
    is_perfect: bool

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.time_spent_seconds < 0:
            raise DomainError("Time spent cannot be negative", "INVALID_TIME_SPENT")

    @classmethod
    def create(
        cls,
        user_id: UserId,
        lesson_id: LessonId,
        accuracy: Accuracy,
        xp_earned: XP,
        time_spent_seconds: int,
        hearts_remaining: Hearts,
        is_perfect: bool,
        now: datetime | None = None,
    ) -> Self:
        """Create a new completion record (ID will be 0 until persisted)."""
        return cls(
            id=LessonCompletionId.generate(),
            user_id=user_id,
            lesson_id=lesson_id,
            completed_at=now or utc_now(),
            xp_earned=xp_earned,
            accuracy=accuracy,
            time_spent_seconds=time_spent_seconds,
            hearts_remaining=hearts_remaining,
            is_perfect=is_perfect,
        )

    @property
    def is_new(self) -> bool:
        return self.id.is_placeholder

    @property
    def is_high_score(self) -> bool:
        return self.accuracy.is_above(HIGH_SCORE_THRESHOLD)

    @property
    def formatted_time_spent(self) -> str:
        """Time spent as ``m:ss``."""
        minutes, seconds = divmod(self.time_spent_seconds, 60)
        return f"{minutes}:{seconds:02d}"

    def with_id(self, completion_id: LessonCompletionId) -> "LessonCompletion":
        return LessonCompletion(
            id=completion_id,
            user_id=self.user_id,
            lesson_id=self.lesson_id,
            completed_at=self.completed_at,
            xp_earned=self.xp_earned,
            accuracy=self.accuracy,
            time_spent_seconds=self.time_spent_seconds,
            hearts_remaining=self.hearts_remaining,
            is_perfect=self.is_perfect,
        )
