"""Exceptions for review use cases."""

from learnloop.domain.common.exceptions import EntityNotFoundError


class ReviewSessionNotFoundError(EntityNotFoundError):
    """Review session not found (never started, already finished, or owned by someone else)."""

    def __init__(self, session_id: str) -> None:
        super().__init__("ReviewSession", session_id, "SESSION_NOT_FOUND")
        self.session_id = session_id
