"""Common value objects shared across all domain modules."""

from .ids import (
    FlashcardId,
    GroupId,
    LessonCompletionId,
    LessonId,
    LessonSessionId,
    PathId,
    ReviewHistoryId,
    ReviewSessionId,
    UnitId,
    UserId,
    UserProgressId,
)

__all__ = [
    "FlashcardId",
    "GroupId",
    "LessonCompletionId",
    "LessonId",
    "LessonSessionId",
    "PathId",
    "ReviewHistoryId",
    "ReviewSessionId",
    "UnitId",
    "UserId",
    "UserProgressId",
]
