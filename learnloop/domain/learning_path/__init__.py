"""Learning path module domain layer: lesson sessions, completions and XP rewards."""

from .aggregates import LessonSession, SessionFlashcard
from .entities import Flashcard, Lesson, LessonCompletion
from .services import XPCalculationService
from .value_objects import Accuracy, Answer, Progress

__all__ = [
    "Accuracy",
    "Answer",
    "Flashcard",
    "Lesson",
    "LessonCompletion",
    "LessonSession",
    "Progress",
    "SessionFlashcard",
    "XPCalculationService",
]
