"""Use case for loading a learner's progress, starting the path on first access."""

from datetime import datetime

import structlog

from learnloop.application.common.event_publisher import EventPublisherProtocol
from learnloop.application.gamification.protocols.user_progress_repository import (
    UserProgressRepositoryProtocol,
)
from learnloop.domain.common.value_objects import GroupId, PathId, UserId
from learnloop.domain.gamification.aggregates import UserProgress

logger = structlog.get_logger(__name__)


def load_or_start_progress(
    repository: UserProgressRepositoryProtocol,
    user_id: UserId,
    path_id: PathId,
    group_id: GroupId | None = None,
    now: datetime | None = None,
) -> UserProgress:
    """Stored progress for (user, path), or a new unsaved one."""
    progress = repository.find_by_user_and_path(user_id, path_id)
    if progress is None:
        progress = UserProgress.start(user_id, path_id, group_id=group_id, now=now)
    return progress


class GetOrStartProgressUseCase:
    """Use case for fetching progress, creating it the first time a path is opened."""

    def __init__(
        self,
        user_progress_repository: UserProgressRepositoryProtocol,
        event_publisher: EventPublisherProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.user_progress_repository = user_progress_repository
        self.event_publisher = event_publisher

    def get_or_start(
        self,
        user_id: str,
        path_id: int,
        group_id: int | None = None,
        now: datetime | None = None,
    ) -> UserProgress:
        """
        Get the learner's progress in a path, starting it if needed.

        Args:
            user_id: ID of the learner
            path_id: ID of the learning path
            group_id: Optional study group the learner joined the path with
            now: Current time

        Returns:
            The stored (or newly started and saved) UserProgress
        """
        user_id_vo = UserId(user_id)
        path_id_vo = PathId(path_id)

        progress = self.user_progress_repository.find_by_user_and_path(user_id_vo, path_id_vo)
        if progress is not None:
            return progress

        progress = UserProgress.start(
            user_id_vo,
            path_id_vo,
            group_id=GroupId(group_id) if group_id is not None else None,
            now=now,
        )
        saved = self.user_progress_repository.save(progress)
        self.event_publisher.publish_all(progress.collect_events())

        logger.info(
            "started_learning_path",
            user_id=user_id,
            path_id=path_id,
            progress_id=saved.id.value,
        )
        return saved
