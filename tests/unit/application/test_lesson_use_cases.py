"""Tests for the lesson use cases."""

from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

import pytest

from learnloop.application.lesson.use_cases import (
    AbandonLessonUseCase,
    CompleteLessonUseCase,
    StartLessonUseCase,
    SubmitAnswerUseCase,
)
from learnloop.application.lesson.use_cases.exceptions import (
    LessonNotFoundError,
    LessonSessionNotFoundError,
)
from learnloop.domain.common.domain_event import DomainEvent
from learnloop.domain.common.exceptions import (
    BusinessRuleViolationError,
    ConcurrencyError,
    DomainError,
)
from learnloop.domain.common.value_objects import FlashcardId, LessonId, PathId, UnitId, UserId
from learnloop.domain.gamification.aggregates import UserProgress
from learnloop.domain.gamification.events import HeartsDepleted, LevelUp, XPEarned
from learnloop.domain.gamification.value_objects import XP, Hearts
from learnloop.domain.learning_path.entities import Flashcard, Lesson
from learnloop.domain.learning_path.events import LessonAbandoned, LessonStarted
from learnloop.domain.learning_path.services import XPCalculationService
from learnloop.infrastructure.repositories import (
    InMemoryLessonCompletionRepository,
    InMemoryLessonRepository,
    InMemoryLessonSessionRepository,
    InMemoryUserProgressRepository,
)

NOW = datetime(2024, 3, 15, 12, 0, tzinfo=UTC)
USER = "learner-1"
LESSON = 10
PATH = 1


class _RecordingPublisher:
    def __init__(self) -> None:
        self.events: list[DomainEvent] = []

    def publish_all(self, events: Sequence[DomainEvent]) -> None:
        self.events.extend(events)

    def types(self) -> list[type[DomainEvent]]:
        return [type(event) for event in self.events]


class _Lessons:
    """Wires the lesson use cases against shared in-memory repositories."""

    def __init__(self, cards: int = 3) -> None:
        self.lessons = InMemoryLessonRepository()
        self.sessions = InMemoryLessonSessionRepository()
        self.completions = InMemoryLessonCompletionRepository()
        self.progress = InMemoryUserProgressRepository()
        self.publisher = _RecordingPublisher()
        xp_service = XPCalculationService()

        if cards:
            self.lessons.add(
                Lesson(id=LessonId(LESSON), unit_id=UnitId(1), name="Greetings"),
                [
                    Flashcard(id=FlashcardId(i), question=f"Q{i}", answer=f"A{i}")
                    for i in range(1, cards + 1)
                ],
            )

        self.start = StartLessonUseCase(self.lessons, self.sessions, self.progress, self.publisher)
        self.submit = SubmitAnswerUseCase(
            self.sessions, self.progress, xp_service, self.publisher, base_lesson_xp=10
        )
        self.complete = CompleteLessonUseCase(
            self.sessions,
            self.completions,
            self.progress,
            xp_service,
            self.publisher,
            base_lesson_xp=10,
            minimum_accuracy=60,
        )
        self.abandon = AbandonLessonUseCase(self.sessions, self.publisher)

    def seed_progress(self, **overrides: object) -> UserProgress:
        progress = UserProgress.start(UserId(USER), PathId(PATH), now=NOW - timedelta(days=1))
        for name, value in overrides.items():
            setattr(progress, name, value)
        return self.progress.save(progress)

    def answer_all(self, *answers: bool) -> None:
        for is_correct in answers:
            self.submit.submit_answer(USER, LESSON, PATH, is_correct, now=NOW)

    def stored_progress(self) -> UserProgress:
        progress = self.progress.find_by_user_and_path(UserId(USER), PathId(PATH))
        assert progress is not None
        return progress


class TestStartLesson:
    def test_starts_with_full_hearts_for_a_new_learner(self) -> None:
        lessons = _Lessons()

        result = lessons.start.start_lesson(USER, LESSON, PATH, now=NOW)

        assert result.session_id == f"{USER}:{LESSON}"
        assert result.hearts_available == 5
        assert result.current_card.id == FlashcardId(1)
        assert len(result.flashcards) == 3
        assert lessons.publisher.types() == [LessonStarted]

    def test_uses_hearts_from_progress(self) -> None:
        lessons = _Lessons()
        lessons.seed_progress(hearts=Hearts.create(2))

        result = lessons.start.start_lesson(USER, LESSON, PATH, now=NOW)

        assert result.hearts_available == 2

    def test_unknown_lesson(self) -> None:
        lessons = _Lessons()

        with pytest.raises(LessonNotFoundError) as exc_info:
            lessons.start.start_lesson(USER, 99, PATH, now=NOW)
        assert exc_info.value.code == "LESSON_NOT_FOUND"

    def test_lesson_without_cards(self) -> None:
        lessons = _Lessons(cards=0)
        lessons.lessons.add(Lesson(id=LessonId(LESSON), unit_id=UnitId(1), name="Empty"), [])

        with pytest.raises(DomainError) as exc_info:
            lessons.start.start_lesson(USER, LESSON, PATH, now=NOW)
        assert exc_info.value.code == "LESSON_NO_FLASHCARDS"


class TestSubmitAnswer:
    def test_answer_without_session(self) -> None:
        lessons = _Lessons()

        with pytest.raises(LessonSessionNotFoundError):
            lessons.submit.submit_answer(USER, LESSON, PATH, True, now=NOW)

    def test_advances_to_next_card(self) -> None:
        lessons = _Lessons()
        lessons.start.start_lesson(USER, LESSON, PATH, now=NOW)

        result = lessons.submit.submit_answer(USER, LESSON, PATH, False, now=NOW)

        assert result.result == "advanced"
        assert result.hearts_remaining == 4
        assert result.next_card is not None
        assert result.next_card.id == FlashcardId(2)
        assert (result.progress.current, result.progress.total) == (2, 3)
        assert [event["type"] for event in result.events] == ["HeartLost", "CardAdvanced"]

    def test_last_answer_previews_rewards(self) -> None:
        lessons = _Lessons(cards=2)
        lessons.start.start_lesson(USER, LESSON, PATH, now=NOW)
        lessons.answer_all(True)

        result = lessons.submit.submit_answer(USER, LESSON, PATH, True, now=NOW)

        assert result.result == "completed"
        assert result.next_card is None
        assert result.lesson_result is not None
        assert result.lesson_result.xp_earned == 35
        assert result.lesson_result.is_perfect

    def test_running_out_of_hearts_fails_the_lesson(self) -> None:
        lessons = _Lessons()
        lessons.seed_progress(hearts=Hearts.create(1))
        lessons.start.start_lesson(USER, LESSON, PATH, now=NOW)

        result = lessons.submit.submit_answer(USER, LESSON, PATH, False, now=NOW)

        assert result.result == "failed"
        assert result.hearts_remaining == 0
        assert result.lesson_result is not None
        assert result.lesson_result.xp_earned == 0
        assert HeartsDepleted in lessons.publisher.types()
        assert lessons.sessions.find_by_user_and_lesson(UserId(USER), LessonId(LESSON)) is None
        assert lessons.stored_progress().hearts.is_empty

    def test_rejected_progress_save_keeps_the_failed_session(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        lessons = _Lessons()
        lessons.seed_progress(hearts=Hearts.create(1))
        lessons.start.start_lesson(USER, LESSON, PATH, now=NOW)
        lessons.publisher.events.clear()

        def _stale_save(progress: UserProgress) -> UserProgress:
            raise ConcurrencyError("UserProgress", progress.version, progress.version + 1)

        monkeypatch.setattr(lessons.progress, "save", _stale_save)

        with pytest.raises(ConcurrencyError):
            lessons.submit.submit_answer(USER, LESSON, PATH, False, now=NOW)

        assert lessons.sessions.find_by_user_and_lesson(UserId(USER), LessonId(LESSON)) is not None
        assert lessons.stored_progress().hearts == Hearts.create(1)
        assert lessons.publisher.events == []


class TestCompleteLesson:
    def test_awards_xp_and_records_completion(self) -> None:
        lessons = _Lessons(cards=2)
        lessons.seed_progress(xp=XP(80))
        lessons.start.start_lesson(USER, LESSON, PATH, now=NOW)
        lessons.answer_all(True, True)

        result = lessons.complete.complete_lesson(
            USER, LESSON, PATH, time_spent_seconds=90, now=NOW
        )

        assert result.xp_earned == 35
        assert result.rewards.base_xp == 10
        assert result.rewards.accuracy_bonus == 15
        assert result.rewards.perfect_bonus == 10
        assert result.user_progress.total_xp == 115
        assert result.user_progress.level == 1
        assert result.user_progress.streak == 1
        assert not result.completion.is_new

        progress = lessons.stored_progress()
        assert progress.xp == XP(115)
        assert progress.time_spent_total == 90
        assert progress.current_lesson_id == LessonId(LESSON)
        assert lessons.sessions.find_by_user_and_lesson(UserId(USER), LessonId(LESSON)) is None
        assert len(lessons.completions.find_by_user_and_lesson(UserId(USER), LessonId(LESSON))) == 1
        assert XPEarned in lessons.publisher.types()
        assert LevelUp in lessons.publisher.types()

    def test_time_spent_defaults_to_session_duration(self) -> None:
        lessons = _Lessons(cards=1)
        lessons.start.start_lesson(USER, LESSON, PATH, now=NOW)
        lessons.answer_all(True)

        result = lessons.complete.complete_lesson(
            USER, LESSON, PATH, now=NOW + timedelta(minutes=2)
        )

        assert result.time_spent_seconds == 120

    def test_unfinished_lesson_cannot_be_completed(self) -> None:
        lessons = _Lessons()
        lessons.start.start_lesson(USER, LESSON, PATH, now=NOW)
        lessons.answer_all(True)

        with pytest.raises(DomainError) as exc_info:
            lessons.complete.complete_lesson(USER, LESSON, PATH, now=NOW)
        assert exc_info.value.code == "LESSON_NOT_COMPLETE"

    def test_low_accuracy_does_not_pass(self) -> None:
        lessons = _Lessons(cards=3)
        lessons.start.start_lesson(USER, LESSON, PATH, now=NOW)
        lessons.answer_all(True, False, False)

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            lessons.complete.complete_lesson(USER, LESSON, PATH, now=NOW)
        assert exc_info.value.code == "LESSON_MINIMUM_ACCURACY_NOT_MET"


class TestAbandonLesson:
    def test_abandon_discards_session(self) -> None:
        lessons = _Lessons(cards=4)
        lessons.start.start_lesson(USER, LESSON, PATH, now=NOW)
        lessons.answer_all(True)

        result = lessons.abandon.abandon_lesson(USER, LESSON, reason="later", now=NOW)

        assert result.cards_reviewed == 1
        assert result.total_cards == 4
        assert result.accuracy == 100
        assert result.abandoned_at == NOW
        assert LessonAbandoned in lessons.publisher.types()
        assert lessons.sessions.find_by_user_and_lesson(UserId(USER), LessonId(LESSON)) is None

    def test_abandon_without_session(self) -> None:
        lessons = _Lessons()

        with pytest.raises(LessonSessionNotFoundError):
            lessons.abandon.abandon_lesson(USER, LESSON, now=NOW)
