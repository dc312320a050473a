"""Answer value object: one response given during a lesson."""

from dataclasses import dataclass
from datetime import datetime

from learnloop.domain.common.exceptions import ValidationError
from learnloop.domain.common.value_object import ValueObject
from learnloop.domain.common.value_objects import FlashcardId


@dataclass(frozen=True)
class Answer(ValueObject):
    flashcard_id: FlashcardId
    is_correct: bool
    answered_at: datetime
    time_spent_seconds: int | None = None

    def __post_init__(self) -> None:
        if self.time_spent_seconds is not None and self.time_spent_seconds < 0:
            raise ValidationError(
                "Time spent cannot be negative", "time_spent_seconds", self.time_spent_seconds
            )

    @property
    def is_incorrect(self) -> bool:
        return not self.is_correct

    def is_fast(self, threshold_seconds: int) -> bool:
        """Answered in under ``threshold_seconds``; unknown timing is never fast."""
        if self.time_spent_seconds is None:
            return False
        return self.time_spent_seconds < threshold_seconds

    def is_slow(self, threshold_seconds: int) -> bool:
        if self.time_spent_seconds is None:
            return False
        return self.time_spent_seconds > threshold_seconds

    def to_primitive(self) -> dict[str, object]:
        return {
            "flashcard_id": self.flashcard_id.value,
            "correct": self.is_correct,
            "answered_at": self.answered_at.isoformat(),
            "time_spent_seconds": self.time_spent_seconds,
        }
