"""In-memory review history log."""

import itertools
from dataclasses import replace
from datetime import datetime

from learnloop.domain.common.calendar import utc_now
from learnloop.domain.common.value_objects import FlashcardId, ReviewHistoryId, UserId
from learnloop.domain.review.review_records import ReviewHistoryRecord


class InMemoryReviewHistoryRepository:
    """
    Append-only review log.

    A card's scheduling is decided by its most recent review: the card is
    due once that review's next review date has passed.
    """

    def __init__(self) -> None:
        self._records: list[ReviewHistoryRecord] = []
        self._ids = itertools.count(1)

    def find_by_user_and_flashcard(
        self, user_id: UserId, flashcard_id: FlashcardId
    ) -> list[ReviewHistoryRecord]:
        records = [
            r for r in self._records if r.user_id == user_id and r.flashcard_id == flashcard_id
        ]
        # sorted() is stable, so same-instant reviews keep insertion order
        return sorted(records, key=lambda r: r.review_date)

    def find_last_review(
        self, user_id: UserId, flashcard_id: FlashcardId
    ) -> ReviewHistoryRecord | None:
        history = self.find_by_user_and_flashcard(user_id, flashcard_id)
        return history[-1] if history else None

    def find_due_flashcards(
        self, user_id: UserId, limit: int | None = None, now: datetime | None = None
    ) -> list[FlashcardId]:
        due = self._due_reviews(user_id, now or utc_now())
        due.sort(key=lambda r: r.next_review_date)
        ids = [record.flashcard_id for record in due]
        return ids[:limit] if limit is not None else ids

    def count_due_flashcards(self, user_id: UserId, now: datetime | None = None) -> int:
        return len(self._due_reviews(user_id, now or utc_now()))

    def save(self, record: ReviewHistoryRecord) -> ReviewHistoryRecord:
        if record.id is None:
            record = replace(record, id=ReviewHistoryId(next(self._ids)))
        self._records.append(record)
        return record

    def _due_reviews(self, user_id: UserId, now: datetime) -> list[ReviewHistoryRecord]:
        latest: dict[FlashcardId, ReviewHistoryRecord] = {}
        for record in sorted(
            (r for r in self._records if r.user_id == user_id), key=lambda r: r.review_date
        ):
            latest[record.flashcard_id] = record
        return [record for record in latest.values() if record.next_review_date <= now]
