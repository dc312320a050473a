"""DTOs for lesson use cases."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from learnloop.domain.common.types import ReviewMode
from learnloop.domain.learning_path.aggregates import SessionFlashcard
from learnloop.domain.learning_path.entities import Lesson, LessonCompletion

AnswerOutcome = Literal["advanced", "completed", "failed"]


@dataclass(frozen=True)
class LessonStartResult:
    """A freshly started lesson and the first card to show."""

    session_id: str
    lesson: Lesson
    flashcards: list[SessionFlashcard]
    current_card: SessionFlashcard
    hearts_available: int
    review_mode: ReviewMode


@dataclass(frozen=True)
class AnswerProgress:
    current: int
    total: int
    percent: int


@dataclass(frozen=True)
class LessonOutcome:
    """Summary attached to an answer that ended the lesson."""

    accuracy: int
    xp_earned: int
    is_perfect: bool
    cards_reviewed: int


@dataclass(frozen=True)
class AnswerResult:
    """What happened after one answer."""

    result: AnswerOutcome
    accuracy: int
    hearts_remaining: int
    progress: AnswerProgress
    next_card: SessionFlashcard | None = None
    lesson_result: LessonOutcome | None = None
    events: list[dict[str, object]] = field(default_factory=list)


@dataclass(frozen=True)
class LessonRewards:
    base_xp: int
    accuracy_bonus: int
    perfect_bonus: int
    total_xp: int


@dataclass(frozen=True)
class ProgressSummary:
    total_xp: int
    level: int
    hearts: int
    streak: int
    hearts_refilled: bool


@dataclass(frozen=True)
class LessonCompletionResult:
    """Rewards and updated progress after a lesson was completed."""

    completion: LessonCompletion
    accuracy: int
    xp_earned: int
    hearts_remaining: int
    is_perfect: bool
    cards_reviewed: int
    time_spent_seconds: int
    rewards: LessonRewards
    user_progress: ProgressSummary


@dataclass(frozen=True)
class LessonAbandonResult:
    lesson_id: int
    abandoned_at: datetime
    cards_reviewed: int
    total_cards: int
    accuracy: int
