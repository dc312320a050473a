"""Tests for the LessonSession aggregate."""

from datetime import UTC, datetime, timedelta

import pytest

from learnloop.domain.common.exceptions import DomainError, ValidationError
from learnloop.domain.common.value_objects import FlashcardId, LessonId, UserId
from learnloop.domain.learning_path.aggregates import LessonSession, SessionFlashcard
from learnloop.domain.learning_path.events import (
    CardAdvanced,
    HeartLost,
    LessonAbandoned,
    LessonCompleted,
    LessonFailed,
    LessonStarted,
)

NOW = datetime(2024, 3, 15, 12, 0, tzinfo=UTC)


def _make_cards(count: int) -> list[SessionFlashcard]:
    return [
        SessionFlashcard(id=FlashcardId(i), question=f"Q{i}", answer=f"A{i}")
        for i in range(1, count + 1)
    ]


def _start(cards: int = 3, hearts: int = 5) -> LessonSession:
    return LessonSession.start(
        LessonId(10), UserId("learner-1"), _make_cards(cards), hearts, now=NOW
    )


class TestStart:
    def test_session_id_is_per_user_and_lesson(self) -> None:
        session = _start()

        assert session.id.value == "learner-1:10"
        assert session.current_flashcard.id == FlashcardId(1)
        events = session.collect_events()
        assert isinstance(events[0], LessonStarted)
        assert events[0].flashcard_count == 3

    def test_empty_deck_fails(self) -> None:
        with pytest.raises(DomainError) as exc_info:
            LessonSession.start(LessonId(10), UserId("learner-1"), [], 5, now=NOW)
        assert exc_info.value.code == "LESSON_NO_FLASHCARDS"

    def test_hearts_out_of_range_are_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _start(hearts=6)


class TestSubmitAnswer:
    def test_correct_answer_advances(self) -> None:
        session = _start()

        event = session.submit_answer(True, now=NOW)

        assert isinstance(event, CardAdvanced)
        assert event.current_index == 1
        assert session.progress().percentage == 67

    def test_incorrect_answer_costs_a_heart(self) -> None:
        session = _start()
        session.collect_events()

        event = session.submit_answer(False, now=NOW)

        assert isinstance(event, CardAdvanced)
        assert session.hearts.remaining == 4
        assert [type(e) for e in session.collect_events()] == [HeartLost, CardAdvanced]

    def test_losing_the_last_heart_fails_the_lesson(self) -> None:
        session = _start(hearts=1)

        event = session.submit_answer(False, now=NOW)

        assert isinstance(event, LessonFailed)
        assert session.hearts.remaining == 0
        assert session.is_failed
        assert not session.is_complete
        assert event.cards_reviewed == 1

    def test_answering_after_failure_is_rejected(self) -> None:
        session = _start(hearts=1)
        session.submit_answer(False, now=NOW)

        with pytest.raises(DomainError) as exc_info:
            session.submit_answer(True, now=NOW)
        assert exc_info.value.code == "LESSON_ALREADY_FAILED"

    def test_last_card_completes_the_lesson(self) -> None:
        session = _start(cards=2)
        session.submit_answer(True, now=NOW)

        event = session.submit_answer(False, now=NOW)

        assert isinstance(event, LessonCompleted)
        assert event.accuracy.percent == 50
        assert event.hearts_remaining == 4
        assert session.is_complete
        assert not session.is_perfect
        assert session.current_flashcard.id == FlashcardId(2)

    def test_answering_after_completion_is_rejected(self) -> None:
        session = _start(cards=1)
        session.submit_answer(True, now=NOW)

        with pytest.raises(DomainError) as exc_info:
            session.submit_answer(True, now=NOW)
        assert exc_info.value.code == "LESSON_ALREADY_COMPLETE"

    def test_perfect_lesson(self) -> None:
        session = _start(cards=2)
        session.submit_answer(True, now=NOW)
        session.submit_answer(True, now=NOW)

        assert session.is_perfect
        assert session.accuracy.is_perfect
        assert session.correct_count == 2


class TestAbandon:
    def test_abandon_reports_partial_progress(self) -> None:
        session = _start(cards=4)
        session.submit_answer(True, now=NOW)
        session.submit_answer(False, now=NOW)

        event = session.abandon(reason="bored", now=NOW)

        assert isinstance(event, LessonAbandoned)
        assert event.cards_reviewed == 2
        assert event.total_cards == 4
        assert event.accuracy.percent == 50
        assert event.reason == "bored"

    def test_completed_lesson_cannot_be_abandoned(self) -> None:
        session = _start(cards=1)
        session.submit_answer(True, now=NOW)

        with pytest.raises(DomainError) as exc_info:
            session.abandon(now=NOW)
        assert exc_info.value.code == "LESSON_ALREADY_COMPLETE"


def test_time_spent_counts_whole_seconds() -> None:
    session = _start()

    assert session.time_spent_seconds(NOW + timedelta(seconds=95.7)) == 95
    assert session.time_spent_seconds(NOW - timedelta(seconds=5)) == 0


def test_snapshot() -> None:
    session = _start(cards=2)
    session.submit_answer(True, time_spent_seconds=3, now=NOW)

    snapshot = session.to_snapshot(NOW + timedelta(seconds=30))

    assert snapshot.current_index == 1
    assert snapshot.accuracy == 100
    assert snapshot.progress == 100
    assert snapshot.time_spent_seconds == 30
    assert snapshot.answers[0]["flashcard_id"] == 1
