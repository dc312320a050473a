"""Protocol for the struggling cards queue."""

from typing import Protocol

from learnloop.domain.common.value_objects import FlashcardId, UserId
from learnloop.domain.review.review_records import StrugglingCard


class StrugglingQueueRepositoryProtocol(Protocol):
    """Protocol for the per-learner queue of cards that keep being missed."""

    def find_by_user_and_flashcard(
        self, user_id: UserId, flashcard_id: FlashcardId
    ) -> StrugglingCard | None:
        """
        Find a card's queue entry.

        Args:
            user_id: The learner
            flashcard_id: The flashcard

        Returns:
            The entry if the card is queued, None otherwise
        """
        ...

    def find_by_user(self, user_id: UserId, limit: int | None = None) -> list[StrugglingCard]:
        """
        Get a learner's queue.

        Args:
            user_id: The learner
            limit: Maximum number of entries to return

        Returns:
            Entries ordered by times_failed DESC, then last_failed_at DESC
        """
        ...

    def count_by_user(self, user_id: UserId) -> int:
        """
        Count a learner's queued cards.

        Args:
            user_id: The learner

        Returns:
            Number of entries
        """
        ...

    def save(self, entry: StrugglingCard) -> None:
        """
        Save (create or replace) a queue entry.

        Args:
            entry: The entry to save
        """
        ...

    def delete(self, user_id: UserId, flashcard_id: FlashcardId) -> bool:
        """
        Remove a card from the queue.

        Args:
            user_id: The learner
            flashcard_id: The flashcard

        Returns:
            True if removed, False if the card was not queued
        """
        ...
