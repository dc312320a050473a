"""Use case for answering the current card of a lesson."""

from datetime import datetime

import structlog

from learnloop.application.common.event_publisher import EventPublisherProtocol, serialize_events
from learnloop.application.gamification.protocols.user_progress_repository import (
    UserProgressRepositoryProtocol,
)
from learnloop.application.gamification.use_cases.get_or_start_progress_use_case import (
    load_or_start_progress,
)
from learnloop.application.lesson.protocols.lesson_session_repository import (
    LessonSessionRepositoryProtocol,
)
from learnloop.application.lesson.use_cases.dtos.lesson_dtos import (
    AnswerOutcome,
    AnswerProgress,
    AnswerResult,
    LessonOutcome,
)
from learnloop.application.lesson.use_cases.exceptions import LessonSessionNotFoundError
from learnloop.domain.common.calendar import utc_now
from learnloop.domain.common.domain_event import DomainEvent
from learnloop.domain.common.value_objects import LessonId, PathId, UserId
from learnloop.domain.learning_path.aggregates import LessonSession
from learnloop.domain.learning_path.events import LessonCompleted, LessonFailed
from learnloop.domain.learning_path.services import XPCalculationService

logger = structlog.get_logger(__name__)


class SubmitAnswerUseCase:
    """Use case for submitting an answer within an active lesson."""

    def __init__(
        self,
        lesson_session_repository: LessonSessionRepositoryProtocol,
        user_progress_repository: UserProgressRepositoryProtocol,
        xp_calculation_service: XPCalculationService,
        event_publisher: EventPublisherProtocol,
        base_lesson_xp: int,
    ) -> None:
        """Initialize use case with repository protocols and domain services."""
        self.lesson_session_repository = lesson_session_repository
        self.user_progress_repository = user_progress_repository
        self.xp_calculation_service = xp_calculation_service
        self.event_publisher = event_publisher
        self.base_lesson_xp = base_lesson_xp

    def submit_answer(
        self,
        user_id: str,
        lesson_id: int,
        path_id: int,
        is_correct: bool,
        time_spent_seconds: int | None = None,
        now: datetime | None = None,
    ) -> AnswerResult:
        """
        Answer the lesson's current card.

        A completed session stays stored until the lesson is completed.
        A failed session is discarded and the learner's progress records
        the heart depletion.

        Args:
            user_id: ID of the learner
            lesson_id: ID of the lesson
            path_id: ID of the learning path
            is_correct: Whether the answer was right
            time_spent_seconds: Time spent on the card, if measured
            now: Current time

        Returns:
            ``advanced`` with the next card, ``completed`` with an XP preview,
            or ``failed``; plus every event the answer produced

        Raises:
            LessonSessionNotFoundError: If the lesson was not started
            DomainError: If the lesson already ended
        """
        now = now or utc_now()
        user_id_vo = UserId(user_id)
        lesson_id_vo = LessonId(lesson_id)

        session = self.lesson_session_repository.find_by_user_and_lesson(user_id_vo, lesson_id_vo)
        if session is None:
            raise LessonSessionNotFoundError(user_id, lesson_id)

        outcome = session.submit_answer(is_correct, time_spent_seconds, now=now)
        events: list[DomainEvent] = session.collect_events()

        if isinstance(outcome, LessonFailed):
            progress = load_or_start_progress(
                self.user_progress_repository, user_id_vo, PathId(path_id), now=now
            )
            progress.fail_lesson(lesson_id_vo, now=now)
            self.user_progress_repository.save(progress)
            # The session outlives a rejected progress save
            self.lesson_session_repository.delete(user_id_vo, lesson_id_vo)
            events.extend(progress.collect_events())
            logger.info(
                "failed_lesson",
                user_id=user_id,
                lesson_id=lesson_id,
                accuracy=outcome.accuracy.percent,
            )
        else:
            self.lesson_session_repository.save(session)

        self.event_publisher.publish_all(events)

        if isinstance(outcome, LessonCompleted):
            return self._build_result("completed", session, events, self._preview(session))
        if isinstance(outcome, LessonFailed):
            lesson_result = LessonOutcome(
                accuracy=session.accuracy.percent,
                xp_earned=0,
                is_perfect=False,
                cards_reviewed=len(session.answers),
            )
            return self._build_result("failed", session, events, lesson_result)
        return self._build_result("advanced", session, events)

    def _preview(self, session: LessonSession) -> LessonOutcome:
        xp = self.xp_calculation_service.calculate_lesson_xp(
            self.base_lesson_xp, session.accuracy, session.is_perfect
        )
        return LessonOutcome(
            accuracy=session.accuracy.percent,
            xp_earned=xp.amount,
            is_perfect=session.is_perfect,
            cards_reviewed=len(session.answers),
        )

    def _build_result(
        self,
        result: AnswerOutcome,
        session: LessonSession,
        events: list[DomainEvent],
        lesson_result: LessonOutcome | None = None,
    ) -> AnswerResult:
        progress = session.progress()
        return AnswerResult(
            result=result,
            accuracy=session.accuracy.percent,
            hearts_remaining=session.hearts.remaining,
            progress=AnswerProgress(
                current=progress.completed, total=progress.total, percent=progress.percentage
            ),
            next_card=session.current_flashcard if result == "advanced" else None,
            lesson_result=lesson_result,
            events=serialize_events(events),
        )
