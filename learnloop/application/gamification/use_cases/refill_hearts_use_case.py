"""Use case for regenerating a learner's hearts."""

from datetime import datetime

import structlog

from learnloop.application.common.event_publisher import EventPublisherProtocol
from learnloop.application.gamification.protocols.user_progress_repository import (
    UserProgressRepositoryProtocol,
)
from learnloop.application.gamification.use_cases.dtos.progress_dtos import HeartRefillResult
from learnloop.application.gamification.use_cases.get_or_start_progress_use_case import (
    load_or_start_progress,
)
from learnloop.domain.common.calendar import utc_now
from learnloop.domain.common.value_objects import PathId, UserId
from learnloop.domain.gamification.services import HeartRefillService

logger = structlog.get_logger(__name__)


class RefillHeartsUseCase:
    """Use case for applying time-based heart regeneration."""

    def __init__(
        self,
        user_progress_repository: UserProgressRepositoryProtocol,
        heart_refill_service: HeartRefillService,
        event_publisher: EventPublisherProtocol,
    ) -> None:
        """Initialize use case with repository protocols and domain services."""
        self.user_progress_repository = user_progress_repository
        self.heart_refill_service = heart_refill_service
        self.event_publisher = event_publisher

    def refill_hearts(
        self, user_id: str, path_id: int, now: datetime | None = None
    ) -> HeartRefillResult:
        """
        Regenerate hearts for the time elapsed since the last refill.

        Args:
            user_id: ID of the learner
            path_id: ID of the learning path
            now: Current time

        Returns:
            Heart counts before and after, and the state of the refill clock
            after the refill was applied
        """
        now = now or utc_now()
        progress = load_or_start_progress(
            self.user_progress_repository, UserId(user_id), PathId(path_id), now=now
        )

        hearts_before = progress.hearts.remaining
        progress.refill_hearts(now=now)
        hearts_after = progress.hearts.remaining

        self.user_progress_repository.save(progress)
        self.event_publisher.publish_all(progress.collect_events())

        logger.info(
            "refilled_hearts",
            user_id=user_id,
            path_id=path_id,
            hearts_before=hearts_before,
            hearts_after=hearts_after,
        )
        return HeartRefillResult(
            hearts_before=hearts_before,
            hearts_after=hearts_after,
            hearts_restored=hearts_after - hearts_before,
            next_refill_time=self.heart_refill_service.next_refill_time(
                progress.last_heart_refill
            ),
            refill_progress=self.heart_refill_service.refill_progress(
                progress.last_heart_refill, now
            ),
        )
