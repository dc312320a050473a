"""Flashcard entity as seen by the learning engine: a question, its answer and a difficulty."""

from dataclasses import dataclass

from learnloop.domain.common.entity import Entity
from learnloop.domain.common.exceptions import ValidationError
from learnloop.domain.common.types import Difficulty
from learnloop.domain.common.value_objects import FlashcardId


@dataclass(eq=False)
class Flashcard(Entity[FlashcardId]):
    id: FlashcardId
    question: str
    answer: str
    difficulty: Difficulty = "medium"

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.question.strip():
            raise ValidationError("Question cannot be empty", "question")
        if not self.answer.strip():
            raise ValidationError("Answer cannot be empty", "answer")
