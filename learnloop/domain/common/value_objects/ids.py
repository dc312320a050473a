from dataclasses import dataclass
from typing import Self
from uuid import uuid4

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier (opaque string issued by the auth provider)."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("UserId must be a non-empty string")


@dataclass(frozen=True)
class PathId(EntityId):
    """Strongly-typed learning path identifier."""

    value: int


@dataclass(frozen=True)
class UnitId(EntityId):
    """Strongly-typed unit identifier."""

    value: int


@dataclass(frozen=True)
class LessonId(EntityId):
    """Strongly-typed lesson identifier."""

    value: int


@dataclass(frozen=True)
class FlashcardId(EntityId):
    """Strongly-typed flashcard identifier."""

    value: int


@dataclass(frozen=True)
class GroupId(EntityId):
    """Strongly-typed study group identifier."""

    value: int


@dataclass(frozen=True)
class UserProgressId(EntityId):
    """Strongly-typed user progress identifier."""

    value: int


@dataclass(frozen=True)
class LessonCompletionId(EntityId):
    """Strongly-typed lesson completion identifier."""

    value: int


@dataclass(frozen=True)
class ReviewHistoryId(EntityId):
    """Strongly-typed review history record identifier."""

    value: int


@dataclass(frozen=True)
class LessonSessionId(EntityId):
    """Identifier of an active lesson attempt: one per (user, lesson)."""

    value: str

    @classmethod
    def for_lesson(cls, user_id: UserId, lesson_id: LessonId) -> Self:
        return cls(f"{user_id.value}:{lesson_id.value}")


@dataclass(frozen=True)
class ReviewSessionId(EntityId):
    """Identifier of an ephemeral review batch."""

    value: str

    @classmethod
    def generate(cls) -> Self:
        return cls(f"review-{uuid4().hex}")
