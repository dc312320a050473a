"""DTOs for lesson use cases."""

from learnloop.application.lesson.use_cases.dtos.lesson_dtos import (
    AnswerProgress,
    AnswerResult,
    LessonAbandonResult,
    LessonCompletionResult,
    LessonOutcome,
    LessonRewards,
    LessonStartResult,
    ProgressSummary,
)

__all__ = [
    "AnswerProgress",
    "AnswerResult",
    "LessonAbandonResult",
    "LessonCompletionResult",
    "LessonOutcome",
    "LessonRewards",
    "LessonStartResult",
    "ProgressSummary",
]
