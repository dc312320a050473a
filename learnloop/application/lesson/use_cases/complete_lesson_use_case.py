"""Use case for completing a lesson and collecting its rewards."""

from datetime import datetime

import structlog

from learnloop.application.common.event_publisher import EventPublisherProtocol
from learnloop.application.gamification.protocols.user_progress_repository import (
    UserProgressRepositoryProtocol,
)
from learnloop.application.gamification.use_cases.get_or_start_progress_use_case import (
    load_or_start_progress,
)
from learnloop.application.lesson.protocols.lesson_completion_repository import (
    LessonCompletionRepositoryProtocol,
)
from learnloop.application.lesson.protocols.lesson_session_repository import (
    LessonSessionRepositoryProtocol,
)
from learnloop.application.lesson.use_cases.dtos.lesson_dtos import (
    LessonCompletionResult,
    LessonRewards,
    ProgressSummary,
)
from learnloop.application.lesson.use_cases.exceptions import LessonSessionNotFoundError
from learnloop.domain.common.calendar import utc_now
from learnloop.domain.common.exceptions import BusinessRuleViolationError, DomainError
from learnloop.domain.common.value_objects import LessonId, PathId, UserId
from learnloop.domain.learning_path.entities import LessonCompletion
from learnloop.domain.learning_path.services import XPCalculationService

logger = structlog.get_logger(__name__)


class CompleteLessonUseCase:
    """Use case for turning a finished lesson session into XP and progress."""

    def __init__(
        self,
        lesson_session_repository: LessonSessionRepositoryProtocol,
        lesson_completion_repository: LessonCompletionRepositoryProtocol,
        user_progress_repository: UserProgressRepositoryProtocol,
        xp_calculation_service: XPCalculationService,
        event_publisher: EventPublisherProtocol,
        base_lesson_xp: int,
        minimum_accuracy: int,
    ) -> None:
        """Initialize use case with repository protocols, domain services and reward settings."""
        self.lesson_session_repository = lesson_session_repository
        self.lesson_completion_repository = lesson_completion_repository
        self.user_progress_repository = user_progress_repository
        self.xp_calculation_service = xp_calculation_service
        self.event_publisher = event_publisher
        self.base_lesson_xp = base_lesson_xp
        self.minimum_accuracy = minimum_accuracy

    def complete_lesson(
        self,
        user_id: str,
        lesson_id: int,
        path_id: int,
        time_spent_seconds: int | None = None,
        now: datetime | None = None,
    ) -> LessonCompletionResult:
        """
        Complete a lesson whose every card has been answered.

        Awards XP to the learner's progress, carries the session's hearts
        over, extends the streak, applies any due heart refill and records
        the completion. The session is then discarded.

        Args:
            user_id: ID of the learner
            lesson_id: ID of the lesson
            path_id: ID of the learning path
            time_spent_seconds: Time spent on the lesson; measured from the
                session start when omitted
            now: Current time

        Returns:
            Reward breakdown and the learner's updated totals

        Raises:
            LessonSessionNotFoundError: If the lesson was not started
            DomainError: ``LESSON_NOT_COMPLETE`` if cards are still unanswered
            BusinessRuleViolationError: ``LESSON_MINIMUM_ACCURACY_NOT_MET``
                if accuracy is below the passing threshold
        """
        now = now or utc_now()
        user_id_vo = UserId(user_id)
        lesson_id_vo = LessonId(lesson_id)

        session = self.lesson_session_repository.find_by_user_and_lesson(user_id_vo, lesson_id_vo)
        if session is None:
            raise LessonSessionNotFoundError(user_id, lesson_id)
        if not session.is_complete:
            raise DomainError("Lesson is not complete", "LESSON_NOT_COMPLETE")

        accuracy = session.accuracy
        if accuracy.is_below(self.minimum_accuracy):
            logger.warning(
                "lesson_below_minimum_accuracy",
                user_id=user_id,
                lesson_id=lesson_id,
                accuracy=accuracy.percent,
                minimum_accuracy=self.minimum_accuracy,
            )
            raise BusinessRuleViolationError(
                "LESSON_MINIMUM_ACCURACY_NOT_MET",
                f"Lesson requires minimum {self.minimum_accuracy}% accuracy to pass",
            )

        is_perfect = session.is_perfect
        xp_earned = self.xp_calculation_service.calculate_lesson_xp(
            self.base_lesson_xp, accuracy, is_perfect
        )
        rewards = LessonRewards(
            base_xp=self.base_lesson_xp,
            accuracy_bonus=self.xp_calculation_service.calculate_accuracy_bonus(accuracy),
            perfect_bonus=self.xp_calculation_service.calculate_flawless_bonus(
                accuracy, is_perfect
            ),
            total_xp=xp_earned.amount,
        )
        if time_spent_seconds is None:
            time_spent_seconds = session.time_spent_seconds(now)

        progress = load_or_start_progress(
            self.user_progress_repository, user_id_vo, PathId(path_id), now=now
        )
        progress.complete_lesson(lesson_id_vo, accuracy, xp_earned, session.hearts, now=now)
        hearts_before_refill = progress.hearts.remaining
        progress.refill_hearts(now=now)
        progress.add_time_spent(time_spent_seconds, now=now)
        self.user_progress_repository.save(progress)

        completion = self.lesson_completion_repository.save(
            LessonCompletion.create(
                user_id=user_id_vo,
                lesson_id=lesson_id_vo,
                accuracy=accuracy,
                xp_earned=xp_earned,
                time_spent_seconds=time_spent_seconds,
                hearts_remaining=session.hearts,
                is_perfect=is_perfect,
                now=now,
            )
        )
        self.lesson_session_repository.delete(user_id_vo, lesson_id_vo)
        self.event_publisher.publish_all(progress.collect_events())

        logger.info(
            "completed_lesson",
            user_id=user_id,
            lesson_id=lesson_id,
            accuracy=accuracy.percent,
            xp_earned=xp_earned.amount,
            total_xp=progress.xp.amount,
        )
        return LessonCompletionResult(
            completion=completion,
            accuracy=accuracy.percent,
            xp_earned=xp_earned.amount,
            hearts_remaining=session.hearts.remaining,
            is_perfect=is_perfect,
            cards_reviewed=len(session.answers),
            time_spent_seconds=time_spent_seconds,
            rewards=rewards,
            user_progress=ProgressSummary(
                total_xp=progress.xp.amount,
                level=progress.level,
                hearts=progress.hearts.remaining,
                streak=progress.streak.count,
                hearts_refilled=progress.hearts.remaining > hearts_before_refill,
            ),
        )
