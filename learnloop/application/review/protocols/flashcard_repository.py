"""Protocol for Flashcard repository in review context."""

from typing import Protocol

from learnloop.domain.common.value_objects import FlashcardId
from learnloop.domain.learning_path.entities import Flashcard


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for read access to flashcard content."""

    def find_by_id(self, flashcard_id: FlashcardId) -> Flashcard | None:
        """
        Find a flashcard by ID.

        Args:
            flashcard_id: The flashcard ID

        Returns:
            Flashcard entity if found, None otherwise
        """
        ...
