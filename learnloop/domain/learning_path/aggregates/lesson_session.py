"""
LessonSession aggregate root.

A single attempt at a lesson: an ordered deck of flashcards answered one
at a time, paid for with hearts. Incorrect answers cost a heart; running
out of hearts fails the lesson, answering the last card completes it.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Self

from learnloop.domain.common.aggregate_root import AggregateRoot
from learnloop.domain.common.calendar import utc_now
from learnloop.domain.common.exceptions import DomainError
from learnloop.domain.common.types import Difficulty, ReviewMode
from learnloop.domain.common.value_objects import FlashcardId, LessonId, LessonSessionId, UserId
from learnloop.domain.gamification.value_objects import Hearts
from learnloop.domain.learning_path.events import (
    CardAdvanced,
    HeartLost,
    LessonAbandoned,
    LessonCompleted,
    LessonEvent,
    LessonFailed,
    LessonStarted,
)
from learnloop.domain.learning_path.value_objects import Accuracy, Answer, Progress


@dataclass(frozen=True)
class SessionFlashcard:
    """A card as presented inside a lesson."""

    id: FlashcardId
    question: str
    answer: str
    difficulty: Difficulty = "medium"


@dataclass(frozen=True)
class LessonSessionSnapshot:
    session_id: str
    lesson_id: int
    user_id: str
    review_mode: ReviewMode
    current_index: int
    total_cards: int
    hearts: int
    answers: tuple[dict[str, object], ...]
    accuracy: int
    progress: int
    time_spent_seconds: int
    is_complete: bool
    is_failed: bool
    is_perfect: bool
    started_at: datetime


@dataclass(eq=False)
class LessonSession(AggregateRoot[LessonSessionId]):
    """
    Per-answer state machine of an active lesson.

    States: in progress, completed (every card answered) or failed
    (hearts ran out). Both end states reject further answers.

    Business Rules:
    - A lesson needs at least one flashcard
    - The cursor always points at an existing card
    - Hearts never drop below zero; an incorrect answer with no hearts
      left fails the lesson
    """

    id: LessonSessionId
    lesson_id: LessonId
    user_id: UserId
    flashcards: tuple[SessionFlashcard, ...]
    hearts: Hearts
    started_at: datetime
    review_mode: ReviewMode = "flashcard"
    current_index: int = 0
    _answers: list[Answer] = field(default_factory=list, repr=False)
    _failed: bool = field(default=False, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.flashcards:
            raise DomainError(
                "Lesson session must have at least one flashcard", "LESSON_NO_FLASHCARDS"
            )
        if not 0 <= self.current_index < len(self.flashcards):
            raise DomainError("Current index out of bounds", "LESSON_INVALID_INDEX")

    @classmethod
    def start(
        cls,
        lesson_id: LessonId,
        user_id: UserId,
        flashcards: list[SessionFlashcard],
        available_hearts: int,
        review_mode: ReviewMode = "flashcard",
        now: datetime | None = None,
    ) -> Self:
        """
        Open a lesson attempt.

        Raises:
            DomainError: ``LESSON_NO_FLASHCARDS`` for an empty deck
            ValidationError: If ``available_hearts`` is outside 0..5
        """
        if not flashcards:
            raise DomainError("Cannot start lesson with no flashcards", "LESSON_NO_FLASHCARDS")
        now = now or utc_now()
        session = cls(
            id=LessonSessionId.for_lesson(user_id, lesson_id),
            lesson_id=lesson_id,
            user_id=user_id,
            flashcards=tuple(flashcards),
            hearts=Hearts.create(available_hearts),
            review_mode=review_mode,
            started_at=now,
        )
        session._record_event(
            LessonStarted(lesson_id, user_id, flashcard_count=len(flashcards), occurred_at=now)
        )
        return session

    def submit_answer(
        self,
        is_correct: bool,
        time_spent_seconds: int | None = None,
        now: datetime | None = None,
    ) -> LessonEvent:
        """
        Answer the current card.

        Returns:
            The transition event: CardAdvanced, LessonCompleted or LessonFailed.
            A HeartLost event may be recorded before it.

        Raises:
            DomainError: ``LESSON_ALREADY_FAILED`` or ``LESSON_ALREADY_COMPLETE``
                once the lesson has ended
        """
        if self._failed:
            raise DomainError(
                "Cannot submit answer - lesson already failed", "LESSON_ALREADY_FAILED"
            )
        if self.is_complete:
            raise DomainError(
                "Cannot submit answer - lesson already complete", "LESSON_ALREADY_COMPLETE"
            )
        now = now or utc_now()

        self._answers.append(
            Answer(
                flashcard_id=self.current_flashcard.id,
                is_correct=is_correct,
                answered_at=now,
                time_spent_seconds=time_spent_seconds,
            )
        )

        if not is_correct:
            if not self.hearts.is_empty:
                self.hearts = self.hearts.deduct()
                self._record_event(
                    HeartLost(
                        self.lesson_id,
                        self.user_id,
                        hearts_remaining=self.hearts.remaining,
                        occurred_at=now,
                    )
                )
            if self.hearts.is_empty:
                self._failed = True
                return self._record_event(
                    LessonFailed(
                        self.lesson_id,
                        self.user_id,
                        accuracy=self.accuracy,
                        cards_reviewed=len(self._answers),
                        occurred_at=now,
                    )
                )

        if self._is_last_flashcard:
            return self._record_event(
                LessonCompleted(
                    self.lesson_id,
                    self.user_id,
                    accuracy=self.accuracy,
                    hearts_remaining=self.hearts.remaining,
                    cards_reviewed=len(self._answers),
                    occurred_at=now,
                )
            )

        self.current_index += 1
        return self._record_event(
            CardAdvanced(
                self.lesson_id,
                self.user_id,
                current_index=self.current_index,
                total_cards=len(self.flashcards),
                occurred_at=now,
            )
        )

    def abandon(self, reason: str | None = None, now: datetime | None = None) -> LessonAbandoned:
        """
        Quit the lesson without finishing it.

        Raises:
            DomainError: ``LESSON_ALREADY_COMPLETE`` for a completed lesson
        """
        if self.is_complete:
            raise DomainError("Cannot abandon a completed lesson", "LESSON_ALREADY_COMPLETE")
        return self._record_event(
            LessonAbandoned(
                self.lesson_id,
                self.user_id,
                cards_reviewed=len(self._answers),
                total_cards=len(self.flashcards),
                accuracy=self.accuracy,
                reason=reason,
                occurred_at=now or utc_now(),
            )
        )

    @property
    def current_flashcard(self) -> SessionFlashcard:
        return self.flashcards[self.current_index]

    @property
    def _is_last_flashcard(self) -> bool:
        return self.current_index >= len(self.flashcards) - 1

    def progress(self) -> Progress:
        """Position of the card being shown, counted from one."""
        return Progress.from_ratio(self.current_index + 1, len(self.flashcards))

    @property
    def accuracy(self) -> Accuracy:
        return Accuracy.from_ratio(self.correct_count, len(self._answers))

    @property
    def answers(self) -> tuple[Answer, ...]:
        return tuple(self._answers)

    @property
    def is_complete(self) -> bool:
        return not self._failed and len(self._answers) == len(self.flashcards)

    @property
    def is_failed(self) -> bool:
        return self._failed

    @property
    def is_perfect(self) -> bool:
        return bool(self._answers) and all(answer.is_correct for answer in self._answers)

    @property
    def correct_count(self) -> int:
        return sum(1 for answer in self._answers if answer.is_correct)

    @property
    def incorrect_count(self) -> int:
        return len(self._answers) - self.correct_count

    def time_spent_seconds(self, now: datetime | None = None) -> int:
        elapsed = (now or utc_now()) - self.started_at
        return max(0, math.floor(elapsed.total_seconds()))

    def to_snapshot(self, now: datetime | None = None) -> LessonSessionSnapshot:
        return LessonSessionSnapshot(
            session_id=self.id.value,
            lesson_id=int(self.lesson_id),
            user_id=self.user_id.value,
            review_mode=self.review_mode,
            current_index=self.current_index,
            total_cards=len(self.flashcards),
            hearts=self.hearts.remaining,
            answers=tuple(answer.to_primitive() for answer in self._answers),
            accuracy=self.accuracy.percent,
            progress=self.progress().percentage,
            time_spent_seconds=self.time_spent_seconds(now),
            is_complete=self.is_complete,
            is_failed=self.is_failed,
            is_perfect=self.is_perfect,
            started_at=self.started_at,
        )
