"""Domain events raised while reviewing due flashcards."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

from learnloop.domain.common.domain_event import DomainEvent
from learnloop.domain.common.value_objects import FlashcardId, ReviewSessionId, UserId
from learnloop.domain.review.value_objects import ReviewInterval


@dataclass(frozen=True)
class ReviewSessionStarted(DomainEvent):
    session_id: ReviewSessionId
    user_id: UserId
    card_count: int


@dataclass(frozen=True)
class ReviewSessionCompleted(DomainEvent):
    session_id: ReviewSessionId
    user_id: UserId
    total_reviewed: int
    correct_count: int
    accuracy_percent: int


@dataclass(frozen=True)
class ReviewEvent(DomainEvent):
    """Base for events about a single flashcard."""

    user_id: UserId
    flashcard_id: FlashcardId


@dataclass(frozen=True)
class CardMastered(ReviewEvent):
    next_review_interval: ReviewInterval
    next_review_date: datetime


@dataclass(frozen=True)
class CardStruggled(ReviewEvent):
    failure_count: int
    should_mark_as_struggling: bool


@dataclass(frozen=True)
class CardMarkedAsStruggling(ReviewEvent):
    total_failures: int


@dataclass(frozen=True)
class StrugglingCardRemoved(ReviewEvent):
    reason: Literal["mastered", "deleted"]
