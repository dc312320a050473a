"""Use case for reviewing the current card of a review session."""

from datetime import datetime

import structlog

from learnloop.application.common.event_publisher import EventPublisherProtocol, serialize_events
from learnloop.application.review.protocols.review_history_repository import (
    ReviewHistoryRepositoryProtocol,
)
from learnloop.application.review.protocols.review_session_repository import (
    ReviewSessionRepositoryProtocol,
)
from learnloop.application.review.protocols.struggling_queue_repository import (
    StrugglingQueueRepositoryProtocol,
)
from learnloop.application.review.use_cases.dtos.review_dtos import (
    ReviewOutcome,
    ReviewSessionSummary,
    ReviewSubmitResult,
)
from learnloop.application.review.use_cases.exceptions import ReviewSessionNotFoundError
from learnloop.domain.common.calendar import utc_now
from learnloop.domain.common.domain_event import DomainEvent
from learnloop.domain.common.value_objects import FlashcardId, ReviewSessionId, UserId
from learnloop.domain.review.events import CardMastered, CardStruggled, StrugglingCardRemoved
from learnloop.domain.review.review_records import ReviewHistoryRecord, StrugglingCard
from learnloop.domain.review.value_objects import ReviewInterval

logger = structlog.get_logger(__name__)


class SubmitReviewUseCase:
    """Use case for submitting one review within a review session."""

    def __init__(
        self,
        review_session_repository: ReviewSessionRepositoryProtocol,
        review_history_repository: ReviewHistoryRepositoryProtocol,
        struggling_queue_repository: StrugglingQueueRepositoryProtocol,
        event_publisher: EventPublisherProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.review_session_repository = review_session_repository
        self.review_history_repository = review_history_repository
        self.struggling_queue_repository = struggling_queue_repository
        self.event_publisher = event_publisher

    def submit_review(
        self,
        user_id: str,
        session_id: str,
        is_correct: bool,
        now: datetime | None = None,
    ) -> ReviewSubmitResult:
        """
        Review the session's current card and schedule its next review.

        A correct answer takes the card out of the struggling queue; an
        incorrect answer that crosses the struggling threshold puts it in
        (or bumps its failure count). The session is discarded once every
        card has been reviewed.

        Args:
            user_id: ID of the learner
            session_id: ID returned when the session was started
            is_correct: Whether the card was recalled
            now: Current time

        Returns:
            The card's next review date and interval, and the session progress

        Raises:
            ReviewSessionNotFoundError: If the session does not exist or
                belongs to another learner
            DomainError: ``REVIEW_SESSION_COMPLETE`` if every card was reviewed
        """
        now = now or utc_now()
        user_id_vo = UserId(user_id)

        session = self.review_session_repository.find_by_id(ReviewSessionId(session_id))
        if session is None or session.user_id != user_id_vo:
            raise ReviewSessionNotFoundError(session_id)

        card = session.current_card
        outcome = session.submit_review(is_correct, now=now)
        events: list[DomainEvent] = session.collect_events()

        interval = (
            outcome.next_review_interval
            if isinstance(outcome, CardMastered)
            else ReviewInterval.first_review()
        )
        next_review_date = interval.calculate_next_review_date(now)
        self.review_history_repository.save(
            ReviewHistoryRecord(
                user_id=user_id_vo,
                flashcard_id=card.id,
                review_mode=session.mode,
                is_correct=is_correct,
                review_date=now,
                next_review_date=next_review_date,
                interval_days=interval.days,
            )
        )

        event: ReviewOutcome = "mastered" if is_correct else "struggled"
        if isinstance(outcome, CardStruggled) and outcome.should_mark_as_struggling:
            event = "marked_struggling"
            self._add_to_struggling_queue(user_id_vo, card.id, now)
        elif is_correct and self.struggling_queue_repository.delete(user_id_vo, card.id):
            events.append(
                StrugglingCardRemoved(user_id_vo, card.id, reason="mastered", occurred_at=now)
            )

        if session.is_complete:
            self.review_session_repository.delete(session.id)
        else:
            self.review_session_repository.save(session)
        self.event_publisher.publish_all(events)

        logger.info(
            "submitted_review",
            user_id=user_id,
            session_id=session_id,
            flashcard_id=card.id.value,
            outcome=event,
            interval_days=interval.days,
        )
        return ReviewSubmitResult(
            result="completed" if session.is_complete else "advanced",
            event=event,
            next_review_date=next_review_date,
            interval_days=interval.days,
            progress=session.progress(),
            next_card=None if session.is_complete else session.current_card,
            session_complete=(
                ReviewSessionSummary(
                    total_reviewed=session.progress().reviewed,
                    correct_count=session.correct_count,
                    accuracy_percent=session.accuracy_percent,
                )
                if session.is_complete
                else None
            ),
            events=serialize_events(events),
        )

    def _add_to_struggling_queue(
        self, user_id: UserId, flashcard_id: FlashcardId, now: datetime
    ) -> None:
        existing = self.struggling_queue_repository.find_by_user_and_flashcard(
            user_id, flashcard_id
        )
        if existing is None:
            entry = StrugglingCard.first_failure(user_id, flashcard_id, now)
        else:
            entry = existing.record_failure(now)
        self.struggling_queue_repository.save(entry)
