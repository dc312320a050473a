"""In-memory lesson completion history."""

import itertools

from learnloop.domain.common.value_objects import LessonCompletionId, LessonId, UserId
from learnloop.domain.learning_path.entities import LessonCompletion


class InMemoryLessonCompletionRepository:
    def __init__(self) -> None:
        self._completions: list[LessonCompletion] = []
        self._ids = itertools.count(1)

    def save(self, completion: LessonCompletion) -> LessonCompletion:
        if completion.is_new:
            completion = completion.with_id(LessonCompletionId(next(self._ids)))
        self._completions = [c for c in self._completions if c.id != completion.id]
        self._completions.append(completion)
        return completion

    def find_by_user_and_lesson(
        self, user_id: UserId, lesson_id: LessonId
    ) -> list[LessonCompletion]:
        matches = [
            c for c in self._completions if c.user_id == user_id and c.lesson_id == lesson_id
        ]
        return sorted(matches, key=lambda c: c.completed_at, reverse=True)
