"""In-memory struggling cards queue."""

from learnloop.domain.common.value_objects import FlashcardId, UserId
from learnloop.domain.review.review_records import StrugglingCard


class InMemoryStrugglingQueueRepository:
    def __init__(self) -> None:
        self._entries: dict[tuple[UserId, FlashcardId], StrugglingCard] = {}

    def find_by_user_and_flashcard(
        self, user_id: UserId, flashcard_id: FlashcardId
    ) -> StrugglingCard | None:
        return self._entries.get((user_id, flashcard_id))

    def find_by_user(self, user_id: UserId, limit: int | None = None) -> list[StrugglingCard]:
        entries = sorted(
            (entry for entry in self._entries.values() if entry.user_id == user_id),
            key=lambda entry: (entry.times_failed, entry.last_failed_at),
            reverse=True,
        )
        return entries[:limit] if limit is not None else entries

    def count_by_user(self, user_id: UserId) -> int:
        return sum(1 for entry in self._entries.values() if entry.user_id == user_id)

    def save(self, entry: StrugglingCard) -> None:
        self._entries[(entry.user_id, entry.flashcard_id)] = entry

    def delete(self, user_id: UserId, flashcard_id: FlashcardId) -> bool:
        return self._entries.pop((user_id, flashcard_id), None) is not None
