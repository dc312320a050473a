"""Protocol for storing in-flight lesson sessions."""

from typing import Protocol

from learnloop.domain.common.value_objects import LessonId, UserId
from learnloop.domain.learning_path.aggregates import LessonSession


class LessonSessionRepositoryProtocol(Protocol):
    """Protocol for lesson session storage. At most one session per (user, lesson)."""

    def find_by_user_and_lesson(self, user_id: UserId, lesson_id: LessonId) -> LessonSession | None:
        """
        Find the learner's active session for a lesson.

        Args:
            user_id: The learner
            lesson_id: The lesson

        Returns:
            LessonSession aggregate if one is active, None otherwise
        """
        ...

    def save(self, session: LessonSession) -> None:
        """
        Save a session, replacing any previous session for the same (user, lesson).

        Args:
            session: The session to save
        """
        ...

    def delete(self, user_id: UserId, lesson_id: LessonId) -> bool:
        """
        Delete the learner's session for a lesson.

        Args:
            user_id: The learner
            lesson_id: The lesson

        Returns:
            True if deleted, False if not found
        """
        ...
