"""Protocol for UserProgress repository."""

from typing import Protocol

from learnloop.domain.common.value_objects import PathId, UserId, UserProgressId
from learnloop.domain.gamification.aggregates import UserProgress


class UserProgressRepositoryProtocol(Protocol):
    """Protocol for UserProgress repository operations."""

    def find_by_user_and_path(self, user_id: UserId, path_id: PathId) -> UserProgress | None:
        """
        Find a learner's progress in a learning path.

        Args:
            user_id: The learner
            path_id: The learning path

        Returns:
            UserProgress aggregate if the learner started the path, None otherwise
        """
        ...

    def find_by_id(self, progress_id: UserProgressId) -> UserProgress | None:
        """
        Find progress by ID.

        Args:
            progress_id: The progress ID

        Returns:
            UserProgress aggregate if found, None otherwise
        """
        ...

    def save(self, progress: UserProgress) -> UserProgress:
        """
        Save progress (create or update).

        Args:
            progress: The aggregate to save

        Returns:
            The saved aggregate with its assigned ID and bumped version

        Raises:
            ConcurrencyError: If the stored version differs from ``progress.version``
        """
        ...

    def delete(self, progress_id: UserProgressId) -> bool:
        """
        Delete progress.

        Args:
            progress_id: The progress ID

        Returns:
            True if deleted, False if not found
        """
        ...
