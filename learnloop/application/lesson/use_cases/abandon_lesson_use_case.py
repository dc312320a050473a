"""Use case for quitting a lesson without finishing it."""

from datetime import datetime

import structlog

from learnloop.application.common.event_publisher import EventPublisherProtocol
from learnloop.application.lesson.protocols.lesson_session_repository import (
    LessonSessionRepositoryProtocol,
)
from learnloop.application.lesson.use_cases.dtos.lesson_dtos import LessonAbandonResult
from learnloop.application.lesson.use_cases.exceptions import LessonSessionNotFoundError
from learnloop.domain.common.value_objects import LessonId, UserId

logger = structlog.get_logger(__name__)


class AbandonLessonUseCase:
    """
    Use case for abandoning an active lesson.

    No XP is awarded and hearts spent in the lesson stay spent. The streak
    is left alone and the lesson can be restarted fresh.
    """

    def __init__(
        self,
        lesson_session_repository: LessonSessionRepositoryProtocol,
        event_publisher: EventPublisherProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.lesson_session_repository = lesson_session_repository
        self.event_publisher = event_publisher

    def abandon_lesson(
        self,
        user_id: str,
        lesson_id: int,
        reason: str | None = None,
        now: datetime | None = None,
    ) -> LessonAbandonResult:
        """
        Abandon the learner's active session for a lesson.

        Args:
            user_id: ID of the learner
            lesson_id: ID of the lesson
            reason: Optional reason, kept for analytics
            now: Current time

        Returns:
            How far the learner got before quitting

        Raises:
            LessonSessionNotFoundError: If the lesson was not started
            DomainError: ``LESSON_ALREADY_COMPLETE`` for a completed lesson
        """
        user_id_vo = UserId(user_id)
        lesson_id_vo = LessonId(lesson_id)

        session = self.lesson_session_repository.find_by_user_and_lesson(user_id_vo, lesson_id_vo)
        if session is None:
            raise LessonSessionNotFoundError(user_id, lesson_id)

        event = session.abandon(reason, now=now)
        self.lesson_session_repository.delete(user_id_vo, lesson_id_vo)
        self.event_publisher.publish_all(session.collect_events())

        logger.info(
            "abandoned_lesson",
            user_id=user_id,
            lesson_id=lesson_id,
            cards_reviewed=event.cards_reviewed,
            reason=reason,
        )
        return LessonAbandonResult(
            lesson_id=lesson_id,
            abandoned_at=event.occurred_at,
            cards_reviewed=event.cards_reviewed,
            total_cards=event.total_cards,
            accuracy=event.accuracy.percent,
        )
