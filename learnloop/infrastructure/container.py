"""Dependency injection container."""

from typing import Any

from dependency_injector import containers, providers

from learnloop.application.gamification.use_cases import (
    GetOrStartProgressUseCase,
    RefillHeartsUseCase,
    UpdateStreakUseCase,
)
from learnloop.application.lesson.use_cases import (
    AbandonLessonUseCase,
    CompleteLessonUseCase,
    StartLessonUseCase,
    SubmitAnswerUseCase,
)
from learnloop.application.review.use_cases import (
    GetDueCardsUseCase,
    GetStrugglingCardsUseCase,
    StartReviewSessionUseCase,
    SubmitReviewUseCase,
)
from learnloop.config import Settings, configure_logging, get_settings
from learnloop.domain.gamification.services import HeartRefillService
from learnloop.domain.learning_path.services import XPCalculationService
from learnloop.domain.review.services import SpacedRepetitionService
from learnloop.infrastructure.events import (
    BroadcastEventPublisher,
    CompositeEventPublisher,
    LoggingEventPublisher,
)
from learnloop.infrastructure.repositories import (
    InMemoryFlashcardRepository,
    InMemoryLessonCompletionRepository,
    InMemoryLessonRepository,
    InMemoryLessonSessionRepository,
    InMemoryReviewHistoryRepository,
    InMemoryReviewSessionRepository,
    InMemoryStrugglingQueueRepository,
    InMemoryUserProgressRepository,
)


def _no_broadcast(channel: str, payload: dict[str, Any]) -> None:
    """Broadcaster used when no realtime server is attached."""


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # Realtime server hook, overridden at runtime
    broadcaster = providers.Object(_no_broadcast)

    # Repositories (in-memory state lives as long as the container)
    user_progress_repository = providers.Singleton(InMemoryUserProgressRepository)
    lesson_repository = providers.Singleton(InMemoryLessonRepository)
    lesson_session_repository = providers.Singleton(InMemoryLessonSessionRepository)
    lesson_completion_repository = providers.Singleton(InMemoryLessonCompletionRepository)
    flashcard_repository = providers.Singleton(InMemoryFlashcardRepository)
    review_history_repository = providers.Singleton(InMemoryReviewHistoryRepository)
    review_session_repository = providers.Singleton(InMemoryReviewSessionRepository)
    struggling_queue_repository = providers.Singleton(InMemoryStrugglingQueueRepository)

    # Domain services (pure domain logic, no state)
    xp_calculation_service = providers.Factory(XPCalculationService)
    heart_refill_service = providers.Factory(HeartRefillService)
    spaced_repetition_service = providers.Factory(SpacedRepetitionService)

    # Event publishing
    logging_event_publisher = providers.Singleton(LoggingEventPublisher)
    broadcast_event_publisher = providers.Singleton(
        BroadcastEventPublisher, broadcaster=broadcaster
    )
    event_publisher = providers.Singleton(
        CompositeEventPublisher, logging_event_publisher, broadcast_event_publisher
    )

    # Gamification module, application use cases
    get_or_start_progress_use_case = providers.Factory(
        GetOrStartProgressUseCase,
        user_progress_repository=user_progress_repository,
        event_publisher=event_publisher,
    )
    refill_hearts_use_case = providers.Factory(
        RefillHeartsUseCase,
        user_progress_repository=user_progress_repository,
        heart_refill_service=heart_refill_service,
        event_publisher=event_publisher,
    )
    update_streak_use_case = providers.Factory(
        UpdateStreakUseCase,
        user_progress_repository=user_progress_repository,
        event_publisher=event_publisher,
    )

    # Lesson module, application use cases
    start_lesson_use_case = providers.Factory(
        StartLessonUseCase,
        lesson_repository=lesson_repository,
        lesson_session_repository=lesson_session_repository,
        user_progress_repository=user_progress_repository,
        event_publisher=event_publisher,
    )
    submit_answer_use_case = providers.Factory(
        SubmitAnswerUseCase,
        lesson_session_repository=lesson_session_repository,
        user_progress_repository=user_progress_repository,
        xp_calculation_service=xp_calculation_service,
        event_publisher=event_publisher,
        base_lesson_xp=settings.provided.BASE_LESSON_XP,
    )
    complete_lesson_use_case = providers.Factory(
        CompleteLessonUseCase,
        lesson_session_repository=lesson_session_repository,
        lesson_completion_repository=lesson_completion_repository,
        user_progress_repository=user_progress_repository,
        xp_calculation_service=xp_calculation_service,
        event_publisher=event_publisher,
        base_lesson_xp=settings.provided.BASE_LESSON_XP,
        minimum_accuracy=settings.provided.MINIMUM_LESSON_ACCURACY,
    )
    abandon_lesson_use_case = providers.Factory(
        AbandonLessonUseCase,
        lesson_session_repository=lesson_session_repository,
        event_publisher=event_publisher,
    )

    # Review module, application use cases
    get_due_cards_use_case = providers.Factory(
        GetDueCardsUseCase,
        review_history_repository=review_history_repository,
        flashcard_repository=flashcard_repository,
        default_limit=settings.provided.DUE_CARDS_DEFAULT_LIMIT,
    )
    start_review_session_use_case = providers.Factory(
        StartReviewSessionUseCase,
        review_history_repository=review_history_repository,
        flashcard_repository=flashcard_repository,
        review_session_repository=review_session_repository,
        spaced_repetition_service=spaced_repetition_service,
        event_publisher=event_publisher,
        default_limit=settings.provided.DUE_CARDS_DEFAULT_LIMIT,
        default_mode=settings.provided.REVIEW_DEFAULT_MODE,
    )
    submit_review_use_case = providers.Factory(
        SubmitReviewUseCase,
        review_session_repository=review_session_repository,
        review_history_repository=review_history_repository,
        struggling_queue_repository=struggling_queue_repository,
        event_publisher=event_publisher,
    )
    get_struggling_cards_use_case = providers.Factory(
        GetStrugglingCardsUseCase,
        struggling_queue_repository=struggling_queue_repository,
        flashcard_repository=flashcard_repository,
    )


def create_container(settings: Settings | None = None) -> Container:
    """Configure logging for the environment and build the container."""
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)
    container = Container()
    container.settings.override(providers.Object(settings))
    return container
