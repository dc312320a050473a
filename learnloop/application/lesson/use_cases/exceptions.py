"""Exceptions for lesson use cases."""

from learnloop.domain.common.exceptions import EntityNotFoundError


class LessonNotFoundError(EntityNotFoundError):
    """Lesson not found error."""

    def __init__(self, lesson_id: int) -> None:
        super().__init__("Lesson", lesson_id, "LESSON_NOT_FOUND")
        self.lesson_id = lesson_id


class LessonSessionNotFoundError(EntityNotFoundError):
    """No active session for the lesson; it has to be started first."""

    def __init__(self, user_id: str, lesson_id: int) -> None:
        super().__init__("LessonSession", f"{user_id}:{lesson_id}", "SESSION_NOT_FOUND")
        self.user_id = user_id
        self.lesson_id = lesson_id
