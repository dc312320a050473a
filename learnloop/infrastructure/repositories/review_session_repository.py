"""In-memory store for active review sessions."""

import copy

from learnloop.domain.common.value_objects import ReviewSessionId
from learnloop.domain.review.aggregates import ReviewSession


class InMemoryReviewSessionRepository:
    """Active review sessions keyed by session id, copied in and out."""

    def __init__(self) -> None:
        self._sessions: dict[ReviewSessionId, ReviewSession] = {}

    def find_by_id(self, session_id: ReviewSessionId) -> ReviewSession | None:
        session = self._sessions.get(session_id)
        return copy.deepcopy(session) if session is not None else None

    def save(self, session: ReviewSession) -> None:
        stored = copy.deepcopy(session)
        stored.clear_events()
        self._sessions[session.id] = stored

    def delete(self, session_id: ReviewSessionId) -> bool:
        return self._sessions.pop(session_id, None) is not None
