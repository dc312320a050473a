"""Use case for registering daily activity against a learner's streak."""

from datetime import datetime

import structlog

from learnloop.application.common.event_publisher import EventPublisherProtocol
from learnloop.application.gamification.protocols.user_progress_repository import (
    UserProgressRepositoryProtocol,
)
from learnloop.application.gamification.use_cases.dtos.progress_dtos import StreakUpdateResult
from learnloop.application.gamification.use_cases.get_or_start_progress_use_case import (
    load_or_start_progress,
)
from learnloop.domain.common.calendar import utc_now
from learnloop.domain.common.value_objects import PathId, UserId

logger = structlog.get_logger(__name__)


class UpdateStreakUseCase:
    """Use case for updating the daily streak."""

    def __init__(
        self,
        user_progress_repository: UserProgressRepositoryProtocol,
        event_publisher: EventPublisherProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.user_progress_repository = user_progress_repository
        self.event_publisher = event_publisher

    def update_streak(
        self, user_id: str, path_id: int, now: datetime | None = None
    ) -> StreakUpdateResult:
        """
        Count today's activity towards the streak.

        Args:
            user_id: ID of the learner
            path_id: ID of the learning path
            now: Current time

        Returns:
            New and previous streak counts; ``streak_broken`` is set when
            the count went down
        """
        now = now or utc_now()
        progress = load_or_start_progress(
            self.user_progress_repository, UserId(user_id), PathId(path_id), now=now
        )

        previous_streak_count = progress.streak.count
        progress.update_streak(now=now)
        streak_count = progress.streak.count

        self.user_progress_repository.save(progress)
        self.event_publisher.publish_all(progress.collect_events())

        logger.info(
            "updated_streak",
            user_id=user_id,
            path_id=path_id,
            streak=streak_count,
            previous_streak=previous_streak_count,
        )
        return StreakUpdateResult(
            streak_count=streak_count,
            previous_streak_count=previous_streak_count,
            streak_broken=streak_count < previous_streak_count,
            last_activity_date=progress.last_activity_date,
        )
