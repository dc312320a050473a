"""
Plain records exchanged between the review module and its repositories.

They are read-only inputs to the scheduling policy; persistence belongs
to whoever supplies them.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Self

from learnloop.domain.common.types import Difficulty, ReviewMode
from learnloop.domain.common.value_objects import FlashcardId, ReviewHistoryId, UserId


@dataclass(frozen=True)
class ReviewHistoryRecord:
    """One past review of a flashcard by a learner."""

    user_id: UserId
    flashcard_id: FlashcardId
    review_mode: ReviewMode
    is_correct: bool
    review_date: datetime
    next_review_date: datetime
    interval_days: int
    id: ReviewHistoryId | None = None


@dataclass(frozen=True)
class ReviewFlashcard:
    """A due flashcard together with its review history, oldest review first."""

    id: FlashcardId
    question: str
    answer: str
    difficulty: Difficulty = "medium"
    last_review_date: datetime | None = None
    interval_days: int = 1
    review_history: tuple[ReviewHistoryRecord, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ReviewResult:
    """Outcome of reviewing one card within a session."""

    flashcard_id: FlashcardId
    is_correct: bool
    review_mode: ReviewMode
    reviewed_at: datetime


@dataclass(frozen=True)
class StrugglingCard:
    """A learner's entry in the struggling queue: a card that keeps being missed."""

    user_id: UserId
    flashcard_id: FlashcardId
    times_failed: int
    last_failed_at: datetime
    added_at: datetime

    @classmethod
    def first_failure(cls, user_id: UserId, flashcard_id: FlashcardId, now: datetime) -> Self:
        return cls(
            user_id=user_id,
            flashcard_id=flashcard_id,
            times_failed=1,
            last_failed_at=now,
            added_at=now,
        )

    def record_failure(self, now: datetime) -> "StrugglingCard":
        return replace(self, times_failed=self.times_failed + 1, last_failed_at=now)
