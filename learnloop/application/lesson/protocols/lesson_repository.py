"""Protocol for the lesson catalogue."""

from typing import Protocol

from learnloop.domain.common.value_objects import LessonId
from learnloop.domain.learning_path.entities import Flashcard, Lesson


class LessonRepositoryProtocol(Protocol):
    """Protocol for read access to lessons and their flashcards."""

    def find_by_id(self, lesson_id: LessonId) -> Lesson | None:
        """
        Find a lesson by ID.

        Args:
            lesson_id: The lesson ID

        Returns:
            Lesson entity if found, None otherwise
        """
        ...

    def find_flashcards_for_lesson(self, lesson_id: LessonId) -> list[Flashcard]:
        """
        Get the lesson's flashcards in presentation order.

        Args:
            lesson_id: The lesson ID

        Returns:
            List of flashcards, empty if the lesson has none
        """
        ...
