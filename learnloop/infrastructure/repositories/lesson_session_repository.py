"""In-memory store for active lesson sessions."""

import copy

from learnloop.domain.common.value_objects import LessonId, UserId
from learnloop.domain.learning_path.aggregates import LessonSession


class InMemoryLessonSessionRepository:
    """
    Active lesson sessions keyed by (user, lesson).

    Sessions are copied in and out so a loaded session only changes the
    stored one when it is saved again.
    """

    def __init__(self) -> None:
        self._sessions: dict[tuple[str, int], LessonSession] = {}

    def find_by_user_and_lesson(self, user_id: UserId, lesson_id: LessonId) -> LessonSession | None:
        session = self._sessions.get(self._key(user_id, lesson_id))
        return copy.deepcopy(session) if session is not None else None

    def save(self, session: LessonSession) -> None:
        stored = copy.deepcopy(session)
        stored.clear_events()
        self._sessions[self._key(session.user_id, session.lesson_id)] = stored

    def delete(self, user_id: UserId, lesson_id: LessonId) -> bool:
        return self._sessions.pop(self._key(user_id, lesson_id), None) is not None

    @staticmethod
    def _key(user_id: UserId, lesson_id: LessonId) -> tuple[str, int]:
        return (user_id.value, int(lesson_id))
