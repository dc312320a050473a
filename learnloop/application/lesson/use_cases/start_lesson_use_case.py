"""Use case for starting a lesson attempt."""

from datetime import datetime

import structlog

from learnloop.application.common.event_publisher import EventPublisherProtocol
from learnloop.application.gamification.protocols.user_progress_repository import (
    UserProgressRepositoryProtocol,
)
from learnloop.application.lesson.protocols.lesson_repository import LessonRepositoryProtocol
from learnloop.application.lesson.protocols.lesson_session_repository import (
    LessonSessionRepositoryProtocol,
)
from learnloop.application.lesson.use_cases.dtos.lesson_dtos import LessonStartResult
from learnloop.application.lesson.use_cases.exceptions import LessonNotFoundError
from learnloop.domain.common.exceptions import DomainError
from learnloop.domain.common.types import ReviewMode
from learnloop.domain.common.value_objects import LessonId, PathId, UserId
from learnloop.domain.gamification.value_objects import Hearts
from learnloop.domain.learning_path.aggregates import LessonSession, SessionFlashcard

logger = structlog.get_logger(__name__)


class StartLessonUseCase:
    """Use case for opening a lesson session."""

    def __init__(
        self,
        lesson_repository: LessonRepositoryProtocol,
        lesson_session_repository: LessonSessionRepositoryProtocol,
        user_progress_repository: UserProgressRepositoryProtocol,
        event_publisher: EventPublisherProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.lesson_repository = lesson_repository
        self.lesson_session_repository = lesson_session_repository
        self.user_progress_repository = user_progress_repository
        self.event_publisher = event_publisher

    def start_lesson(
        self,
        user_id: str,
        lesson_id: int,
        path_id: int,
        review_mode: ReviewMode = "flashcard",
        now: datetime | None = None,
    ) -> LessonStartResult:
        """
        Start (or restart) a lesson for a learner.

        The session gets the learner's current hearts in the path, or a full
        set when the learner has not started the path yet. Any previous
        session for the same lesson is replaced.

        Args:
            user_id: ID of the learner
            lesson_id: ID of the lesson
            path_id: ID of the learning path the lesson belongs to
            review_mode: How cards are presented
            now: Current time

        Returns:
            The new session's id, the lesson and its deck

        Raises:
            LessonNotFoundError: If the lesson does not exist
            DomainError: ``LESSON_NO_FLASHCARDS`` if the lesson has no cards
        """
        user_id_vo = UserId(user_id)
        lesson_id_vo = LessonId(lesson_id)

        lesson = self.lesson_repository.find_by_id(lesson_id_vo)
        if lesson is None:
            raise LessonNotFoundError(lesson_id)

        flashcards = self.lesson_repository.find_flashcards_for_lesson(lesson_id_vo)
        if not flashcards:
            raise DomainError("Lesson has no flashcards", "LESSON_NO_FLASHCARDS")

        progress = self.user_progress_repository.find_by_user_and_path(
            user_id_vo, PathId(path_id)
        )
        available_hearts = progress.hearts.remaining if progress is not None else Hearts.MAX

        session_flashcards = [
            SessionFlashcard(
                id=card.id, question=card.question, answer=card.answer, difficulty=card.difficulty
            )
            for card in flashcards
        ]
        session = LessonSession.start(
            lesson_id_vo,
            user_id_vo,
            session_flashcards,
            available_hearts,
            review_mode=review_mode,
            now=now,
        )
        self.lesson_session_repository.save(session)
        self.event_publisher.publish_all(session.collect_events())

        logger.info(
            "started_lesson",
            user_id=user_id,
            lesson_id=lesson_id,
            flashcard_count=len(flashcards),
            hearts=available_hearts,
        )
        return LessonStartResult(
            session_id=session.id.value,
            lesson=lesson,
            flashcards=list(session.flashcards),
            current_card=session.current_flashcard,
            hearts_available=session.hearts.remaining,
            review_mode=session.review_mode,
        )
