"""
ReviewSession aggregate root.

One batch review of due flashcards. Each card is answered once, in order;
the spaced-repetition policy turns every answer into a scheduling outcome.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Self

from learnloop.domain.common.aggregate_root import AggregateRoot
from learnloop.domain.common.calendar import utc_now
from learnloop.domain.common.exceptions import DomainError, ValidationError
from learnloop.domain.common.rounding import percent
from learnloop.domain.common.types import ReviewMode
from learnloop.domain.common.value_objects import FlashcardId, ReviewSessionId, UserId
from learnloop.domain.review.events import (
    CardMarkedAsStruggling,
    CardMastered,
    CardStruggled,
    ReviewEvent,
    ReviewSessionCompleted,
    ReviewSessionStarted,
)
from learnloop.domain.review.review_records import ReviewFlashcard, ReviewResult
from learnloop.domain.review.services import SpacedRepetitionService


@dataclass(frozen=True)
class ReviewProgress:
    reviewed: int
    total: int
    percent: int


@dataclass(frozen=True)
class ReviewSessionSnapshot:
    session_id: str
    user_id: str
    mode: ReviewMode
    progress: ReviewProgress
    accuracy: int
    correct_count: int
    incorrect_count: int
    is_complete: bool
    started_at: datetime
    current_card_id: int | None


@dataclass(eq=False)
class ReviewSession(AggregateRoot[ReviewSessionId]):
    """
    Batch review of due flashcards.

    Business Rules:
    - A session needs at least one due card
    - The cursor only moves forward, so each card is reviewed once
    - No answers are accepted once every card has been reviewed
    - Accuracy covers the cards reviewed so far, not the whole batch
    """

    id: ReviewSessionId
    user_id: UserId
    due_cards: tuple[ReviewFlashcard, ...]
    started_at: datetime
    mode: ReviewMode = "flashcard"
    current_index: int = 0
    _reviewed: dict[FlashcardId, ReviewResult] = field(default_factory=dict, repr=False)
    _scheduler: SpacedRepetitionService = field(
        default_factory=SpacedRepetitionService, repr=False
    )

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.due_cards:
            raise DomainError("Review session must have at least one card", "REVIEW_NO_CARDS")
        if len({card.id for card in self.due_cards}) != len(self.due_cards):
            raise ValidationError("Review session cannot contain the same card twice", "due_cards")
        if not 0 <= self.current_index < len(self.due_cards):
            raise DomainError("Current index out of bounds", "REVIEW_INVALID_INDEX")

    @classmethod
    def start(
        cls,
        user_id: UserId,
        due_cards: list[ReviewFlashcard],
        mode: ReviewMode = "flashcard",
        now: datetime | None = None,
        scheduler: SpacedRepetitionService | None = None,
    ) -> Self:
        """
        Open a review session over ``due_cards``.

        Raises:
            DomainError: ``REVIEW_NO_DUE_CARDS`` if nothing is due
        """
        if not due_cards:
            raise DomainError("No cards due for review", "REVIEW_NO_DUE_CARDS")
        now = now or utc_now()
        session = cls(
            id=ReviewSessionId.generate(),
            user_id=user_id,
            due_cards=tuple(due_cards),
            mode=mode,
            started_at=now,
            _scheduler=scheduler or SpacedRepetitionService(),
        )
        session._record_event(
            ReviewSessionStarted(
                session.id, user_id, card_count=len(due_cards), occurred_at=now
            )
        )
        return session

    def submit_review(self, is_correct: bool, now: datetime | None = None) -> ReviewEvent:
        """
        Review the current card.

        Returns:
            CardMastered with the next interval for a correct answer,
            CardStruggled for an incorrect one. A CardMarkedAsStruggling
            event precedes it when the card crosses the struggling
            threshold; ReviewSessionCompleted follows the last card.

        Raises:
            DomainError: ``REVIEW_SESSION_COMPLETE`` once every card was reviewed
        """
        if self.is_complete:
            raise DomainError(
                "Cannot submit review - session already complete", "REVIEW_SESSION_COMPLETE"
            )
        now = now or utc_now()
        card = self.current_card
        self._reviewed[card.id] = ReviewResult(
            flashcard_id=card.id, is_correct=is_correct, review_mode=self.mode, reviewed_at=now
        )

        outcome: ReviewEvent
        if is_correct:
            interval = self._scheduler.calculate_next_interval(card.review_history, True)
            outcome = CardMastered(
                self.user_id,
                card.id,
                next_review_interval=interval,
                next_review_date=interval.calculate_next_review_date(now),
                occurred_at=now,
            )
        else:
            failure_count = self._scheduler.count_consecutive_failures(card.review_history) + 1
            total_attempts = len(card.review_history) + 1
            struggling = self._scheduler.should_mark_as_struggling(failure_count, total_attempts)
            if struggling:
                self._record_event(
                    CardMarkedAsStruggling(
                        self.user_id, card.id, total_failures=failure_count, occurred_at=now
                    )
                )
            outcome = CardStruggled(
                self.user_id,
                card.id,
                failure_count=failure_count,
                should_mark_as_struggling=struggling,
                occurred_at=now,
            )
        self._record_event(outcome)

        if self.has_more_cards:
            self.current_index += 1
        else:
            self._record_event(
                ReviewSessionCompleted(
                    self.id,
                    self.user_id,
                    total_reviewed=len(self._reviewed),
                    correct_count=self.correct_count,
                    accuracy_percent=self.accuracy_percent,
                    occurred_at=now,
                )
            )
        return outcome

    @property
    def current_card(self) -> ReviewFlashcard:
        return self.due_cards[self.current_index]

    @property
    def has_more_cards(self) -> bool:
        return self.current_index < len(self.due_cards) - 1

    def progress(self) -> ReviewProgress:
        reviewed = len(self._reviewed)
        total = len(self.due_cards)
        return ReviewProgress(reviewed=reviewed, total=total, percent=percent(reviewed, total))

    @property
    def is_complete(self) -> bool:
        return len(self._reviewed) == len(self.due_cards)

    @property
    def correct_count(self) -> int:
        return sum(1 for result in self._reviewed.values() if result.is_correct)

    @property
    def incorrect_count(self) -> int:
        return len(self._reviewed) - self.correct_count

    @property
    def accuracy_percent(self) -> int:
        return percent(self.correct_count, len(self._reviewed))

    @property
    def reviewed_cards(self) -> dict[FlashcardId, ReviewResult]:
        return dict(self._reviewed)

    def to_snapshot(self) -> ReviewSessionSnapshot:
        return ReviewSessionSnapshot(
            session_id=self.id.value,
            user_id=self.user_id.value,
            mode=self.mode,
            progress=self.progress(),
            accuracy=self.accuracy_percent,
            correct_count=self.correct_count,
            incorrect_count=self.incorrect_count,
            is_complete=self.is_complete,
            started_at=self.started_at,
            current_card_id=None if self.is_complete else int(self.current_card.id),
        )
