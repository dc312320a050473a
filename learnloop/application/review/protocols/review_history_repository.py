"""Protocol for review history repository."""

from datetime import datetime
from typing import Protocol

from learnloop.domain.common.value_objects import FlashcardId, UserId
from learnloop.domain.review.review_records import ReviewHistoryRecord


class ReviewHistoryRepositoryProtocol(Protocol):
    """Protocol for the append-only log of past reviews."""

    def find_by_user_and_flashcard(
        self, user_id: UserId, flashcard_id: FlashcardId
    ) -> list[ReviewHistoryRecord]:
        """
        Get a learner's reviews of one card.

        Args:
            user_id: The learner
            flashcard_id: The flashcard

        Returns:
            List of records ordered by review_date ASC (most recent last)
        """
        ...

    def find_last_review(
        self, user_id: UserId, flashcard_id: FlashcardId
    ) -> ReviewHistoryRecord | None:
        """
        Get the most recent review of a card.

        Args:
            user_id: The learner
            flashcard_id: The flashcard

        Returns:
            The latest record, None if the card was never reviewed
        """
        ...

    def find_due_flashcards(
        self, user_id: UserId, limit: int | None = None, now: datetime | None = None
    ) -> list[FlashcardId]:
        """
        Get cards whose latest review is due.

        A card is due when the next review date of its most recent review
        is not after ``now``.

        Args:
            user_id: The learner
            limit: Maximum number of ids to return
            now: Evaluation time

        Returns:
            Flashcard ids, most overdue first
        """
        ...

    def count_due_flashcards(self, user_id: UserId, now: datetime | None = None) -> int:
        """
        Count cards whose latest review is due.

        Args:
            user_id: The learner
            now: Evaluation time

        Returns:
            Number of due cards
        """
        ...

    def save(self, record: ReviewHistoryRecord) -> ReviewHistoryRecord:
        """
        Append a review record.

        Args:
            record: The record to store

        Returns:
            The stored record with its assigned ID
        """
        ...
