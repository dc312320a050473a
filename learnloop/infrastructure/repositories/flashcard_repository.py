"""In-memory flashcard content."""

from learnloop.domain.common.value_objects import FlashcardId
from learnloop.domain.learning_path.entities import Flashcard


class InMemoryFlashcardRepository:
    def __init__(self) -> None:
        self._flashcards: dict[FlashcardId, Flashcard] = {}

    def add(self, flashcard: Flashcard) -> None:
        self._flashcards[flashcard.id] = flashcard

    def find_by_id(self, flashcard_id: FlashcardId) -> Flashcard | None:
        return self._flashcards.get(flashcard_id)

    def remove(self, flashcard_id: FlashcardId) -> bool:
        return self._flashcards.pop(flashcard_id, None) is not None
