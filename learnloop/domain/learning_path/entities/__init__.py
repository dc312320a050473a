from .flashcard import Flashcard
from .lesson import Lesson
from .lesson_completion import LessonCompletion

__all__ = ["Flashcard", "Lesson", "LessonCompletion"]
