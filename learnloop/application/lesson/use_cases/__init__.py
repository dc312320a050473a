from .abandon_lesson_use_case import AbandonLessonUseCase
from .complete_lesson_use_case import CompleteLessonUseCase
from .start_lesson_use_case import StartLessonUseCase
from .submit_answer_use_case import SubmitAnswerUseCase

__all__ = [
    "AbandonLessonUseCase",
    "CompleteLessonUseCase",
    "StartLessonUseCase",
    "SubmitAnswerUseCase",
]
