"""DTOs for review use cases."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from learnloop.domain.common.types import Difficulty, ReviewMode
from learnloop.domain.review.aggregates import ReviewProgress
from learnloop.domain.review.review_records import ReviewFlashcard

ReviewOutcome = Literal["mastered", "struggled", "marked_struggling"]


@dataclass(frozen=True)
class DueCard:
    id: int
    question: str
    answer: str
    difficulty: Difficulty
    last_review_date: datetime | None
    next_review_date: datetime | None
    interval_days: int


@dataclass(frozen=True)
class DueCardsResult:
    cards: list[DueCard]
    total_due: int


@dataclass(frozen=True)
class ReviewSessionStartResult:
    session_id: str
    mode: ReviewMode
    total_cards: int
    current_card: ReviewFlashcard
    progress: ReviewProgress


@dataclass(frozen=True)
class ReviewSessionSummary:
    total_reviewed: int
    correct_count: int
    accuracy_percent: int


@dataclass(frozen=True)
class ReviewSubmitResult:
    """Scheduling outcome of one review and where the session stands."""

    result: Literal["advanced", "completed"]
    event: ReviewOutcome
    next_review_date: datetime
    interval_days: int
    progress: ReviewProgress
    next_card: ReviewFlashcard | None = None
    session_complete: ReviewSessionSummary | None = None
    events: list[dict[str, object]] = field(default_factory=list)


@dataclass(frozen=True)
class StrugglingCardView:
    id: int
    question: str
    answer: str
    difficulty: Difficulty
    times_failed: int
    last_failed_at: datetime
    added_at: datetime


@dataclass(frozen=True)
class StrugglingCardsResult:
    cards: list[StrugglingCardView]
    total: int
