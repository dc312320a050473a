"""Tests for the ReviewSession aggregate."""

from datetime import UTC, datetime, timedelta

import pytest

from learnloop.domain.common.exceptions import DomainError, ValidationError
from learnloop.domain.common.value_objects import FlashcardId, UserId
from learnloop.domain.review import ReviewFlashcard, ReviewHistoryRecord, ReviewSession
from learnloop.domain.review.events import (
    CardMarkedAsStruggling,
    CardMastered,
    CardStruggled,
    ReviewSessionCompleted,
    ReviewSessionStarted,
)

NOW = datetime(2024, 3, 15, 12, 0, tzinfo=UTC)
USER = UserId("learner-1")


def _make_record(flashcard_id: int, is_correct: bool, days_ago: int) -> ReviewHistoryRecord:
    reviewed = NOW - timedelta(days=days_ago)
    return ReviewHistoryRecord(
        user_id=USER,
        flashcard_id=FlashcardId(flashcard_id),
        review_mode="flashcard",
        is_correct=is_correct,
        review_date=reviewed,
        next_review_date=reviewed + timedelta(days=1),
        interval_days=1,
    )


def _make_card(flashcard_id: int, *history: bool) -> ReviewFlashcard:
    records = tuple(
        _make_record(flashcard_id, outcome, days_ago=len(history) - index)
        for index, outcome in enumerate(history)
    )
    return ReviewFlashcard(
        id=FlashcardId(flashcard_id),
        question=f"Question {flashcard_id}",
        answer=f"Answer {flashcard_id}",
        review_history=records,
    )


def _start(*cards: ReviewFlashcard) -> ReviewSession:
    return ReviewSession.start(USER, list(cards), now=NOW)


class TestStart:
    def test_records_started_event(self) -> None:
        session = _start(_make_card(1), _make_card(2))

        events = session.collect_events()

        assert len(events) == 1
        assert isinstance(events[0], ReviewSessionStarted)
        assert events[0].card_count == 2
        assert session.current_card.id == FlashcardId(1)

    def test_no_due_cards_fails(self) -> None:
        with pytest.raises(DomainError) as exc_info:
            ReviewSession.start(USER, [], now=NOW)
        assert exc_info.value.code == "REVIEW_NO_DUE_CARDS"

    def test_duplicate_cards_are_rejected(self) -> None:
        with pytest.raises(ValidationError, match="same card twice"):
            _start(_make_card(1), _make_card(1))


class TestSubmitReview:
    def test_correct_answer_masters_card_with_ladder_interval(self) -> None:
        session = _start(_make_card(1, True, True), _make_card(2))

        outcome = session.submit_review(True, now=NOW)

        assert isinstance(outcome, CardMastered)
        assert outcome.next_review_interval.days == 7
        assert outcome.next_review_date == NOW + timedelta(days=7)
        assert session.current_card.id == FlashcardId(2)

    def test_incorrect_answer_struggles(self) -> None:
        session = _start(_make_card(1, True), _make_card(2))

        outcome = session.submit_review(False, now=NOW)

        assert isinstance(outcome, CardStruggled)
        assert outcome.failure_count == 1
        assert not outcome.should_mark_as_struggling

    def test_third_failure_in_a_row_marks_card_as_struggling(self) -> None:
        session = _start(_make_card(1, False, False), _make_card(2))
        session.collect_events()

        outcome = session.submit_review(False, now=NOW)
        events = session.collect_events()

        assert isinstance(outcome, CardStruggled)
        assert outcome.should_mark_as_struggling
        assert [type(e) for e in events] == [CardMarkedAsStruggling, CardStruggled]
        assert events[0].total_failures == 3

    def test_reviewing_every_card_completes_session_once(self) -> None:
        session = _start(_make_card(1), _make_card(2), _make_card(3))
        session.collect_events()

        session.submit_review(True, now=NOW)
        session.submit_review(False, now=NOW)
        session.submit_review(True, now=NOW)
        events = session.collect_events()

        completed = [e for e in events if isinstance(e, ReviewSessionCompleted)]
        assert session.is_complete
        assert len(completed) == 1
        assert completed[0].total_reviewed == 3
        assert completed[0].correct_count == 2
        assert completed[0].accuracy_percent == 67

    def test_accuracy_covers_reviewed_cards_only(self) -> None:
        session = _start(_make_card(1), _make_card(2), _make_card(3), _make_card(4))

        session.submit_review(True, now=NOW)
        session.submit_review(False, now=NOW)

        assert session.accuracy_percent == 50
        progress = session.progress()
        assert (progress.reviewed, progress.total, progress.percent) == (2, 4, 50)

    def test_submitting_after_completion_fails(self) -> None:
        session = _start(_make_card(1))
        session.submit_review(True, now=NOW)

        with pytest.raises(DomainError) as exc_info:
            session.submit_review(True, now=NOW)
        assert exc_info.value.code == "REVIEW_SESSION_COMPLETE"

    def test_snapshot_reports_cursor(self) -> None:
        session = _start(_make_card(1), _make_card(2))
        session.submit_review(True, now=NOW)

        snapshot = session.to_snapshot()

        assert snapshot.current_card_id == 2
        assert snapshot.correct_count == 1
        assert not snapshot.is_complete
