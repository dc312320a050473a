"""Tests for the dependency injection container."""

from typing import Any

from dependency_injector import providers

from learnloop.application.lesson.use_cases import CompleteLessonUseCase, StartLessonUseCase
from learnloop.application.review.use_cases import StartReviewSessionUseCase
from learnloop.config import Settings
from learnloop.domain.common.value_objects import FlashcardId, LessonId, UnitId
from learnloop.domain.learning_path.entities import Flashcard, Lesson
from learnloop.infrastructure.container import Container, create_container


def _make_container(**settings: Any) -> Container:
    return create_container(Settings(ENVIRONMENT="test", **settings))


def test_use_cases_receive_configured_rewards() -> None:
    container = _make_container(BASE_LESSON_XP=20, MINIMUM_LESSON_ACCURACY=75)

    use_case = container.complete_lesson_use_case()

    assert isinstance(use_case, CompleteLessonUseCase)
    assert use_case.base_lesson_xp == 20
    assert use_case.minimum_accuracy == 75


def test_review_defaults_come_from_settings() -> None:
    container = _make_container(DUE_CARDS_DEFAULT_LIMIT=5, REVIEW_DEFAULT_MODE="quiz")

    use_case = container.start_review_session_use_case()

    assert isinstance(use_case, StartReviewSessionUseCase)
    assert use_case.default_limit == 5
    assert use_case.default_mode == "quiz"


def test_repositories_are_shared_between_use_cases() -> None:
    container = _make_container()

    start = container.start_lesson_use_case()
    complete = container.complete_lesson_use_case()

    assert isinstance(start, StartLessonUseCase)
    assert start.lesson_session_repository is complete.lesson_session_repository
    assert start.event_publisher is complete.event_publisher


def test_events_reach_the_broadcaster() -> None:
    sent: list[tuple[str, dict[str, Any]]] = []
    container = _make_container()
    container.broadcaster.override(
        providers.Object(lambda channel, payload: sent.append((channel, payload)))
    )
    container.lesson_repository().add(
        Lesson(id=LessonId(1), unit_id=UnitId(1), name="Basics"),
        [Flashcard(id=FlashcardId(1), question="Q", answer="A")],
    )

    container.start_lesson_use_case().start_lesson("learner-1", 1, 1)

    assert [(channel, payload["event_type"]) for channel, payload in sent] == [
        ("user:learner-1", "LessonStarted")
    ]
