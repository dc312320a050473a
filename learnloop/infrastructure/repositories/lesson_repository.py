"""In-memory lesson catalogue."""

from learnloop.domain.common.value_objects import LessonId
from learnloop.domain.learning_path.entities import Flashcard, Lesson


class InMemoryLessonRepository:
    """Lessons and their decks, seeded through ``add``."""

    def __init__(self) -> None:
        self._lessons: dict[LessonId, Lesson] = {}
        self._flashcards: dict[LessonId, list[Flashcard]] = {}

    def add(self, lesson: Lesson, flashcards: list[Flashcard]) -> None:
        self._lessons[lesson.id] = lesson
        self._flashcards[lesson.id] = list(flashcards)

    def find_by_id(self, lesson_id: LessonId) -> Lesson | None:
        return self._lessons.get(lesson_id)

    def find_flashcards_for_lesson(self, lesson_id: LessonId) -> list[Flashcard]:
        return list(self._flashcards.get(lesson_id, []))
