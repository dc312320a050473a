"""Protocol for LessonCompletion repository."""

from typing import Protocol

from learnloop.domain.common.value_objects import LessonId, UserId
from learnloop.domain.learning_path.entities import LessonCompletion


class LessonCompletionRepositoryProtocol(Protocol):
    """Protocol for lesson completion history."""

    def save(self, completion: LessonCompletion) -> LessonCompletion:
        """
        Save a completion record.

        Args:
            completion: The completion to save

        Returns:
            Saved completion with its assigned ID
        """
        ...

    def find_by_user_and_lesson(
        self, user_id: UserId, lesson_id: LessonId
    ) -> list[LessonCompletion]:
        """
        Get every completion of a lesson by a learner.

        Args:
            user_id: The learner
            lesson_id: The lesson

        Returns:
            List of completions ordered by completed_at DESC
        """
        ...
