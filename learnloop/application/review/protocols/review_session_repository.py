"""Protocol for storing in-flight review sessions."""

from typing import Protocol

from learnloop.domain.common.value_objects import ReviewSessionId
from learnloop.domain.review.aggregates import ReviewSession


class ReviewSessionRepositoryProtocol(Protocol):
    """Protocol for review session storage, keyed by session id."""

    def find_by_id(self, session_id: ReviewSessionId) -> ReviewSession | None:
        """
        Find a review session.

        Args:
            session_id: The session ID

        Returns:
            ReviewSession aggregate if active, None otherwise
        """
        ...

    def save(self, session: ReviewSession) -> None:
        """
        Save (create or replace) a review session.

        Args:
            session: The session to save
        """
        ...

    def delete(self, session_id: ReviewSessionId) -> bool:
        """
        Delete a review session.

        Args:
            session_id: The session ID

        Returns:
            True if deleted, False if not found
        """
        ...
