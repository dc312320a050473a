"""Use case for starting a batch review of due cards."""

from datetime import datetime

import structlog

from learnloop.application.common.event_publisher import EventPublisherProtocol
from learnloop.application.review.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from learnloop.application.review.protocols.review_history_repository import (
    ReviewHistoryRepositoryProtocol,
)
from learnloop.application.review.protocols.review_session_repository import (
    ReviewSessionRepositoryProtocol,
)
from learnloop.application.review.use_cases.dtos.review_dtos import ReviewSessionStartResult
from learnloop.domain.common.calendar import utc_now
from learnloop.domain.common.types import ReviewMode
from learnloop.domain.common.value_objects import UserId
from learnloop.domain.review.aggregates import ReviewSession
from learnloop.domain.review.review_records import ReviewFlashcard
from learnloop.domain.review.services import SpacedRepetitionService

logger = structlog.get_logger(__name__)


class StartReviewSessionUseCase:
    """Use case for opening a review session over the learner's due cards."""

    def __init__(
        self,
        review_history_repository: ReviewHistoryRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
        review_session_repository: ReviewSessionRepositoryProtocol,
        spaced_repetition_service: SpacedRepetitionService,
        event_publisher: EventPublisherProtocol,
        default_limit: int,
        default_mode: ReviewMode,
    ) -> None:
        """Initialize use case with repository protocols and domain services."""
        self.review_history_repository = review_history_repository
        self.flashcard_repository = flashcard_repository
        self.review_session_repository = review_session_repository
        self.spaced_repetition_service = spaced_repetition_service
        self.event_publisher = event_publisher
        self.default_limit = default_limit
        self.default_mode = default_mode

    def start_review(
        self,
        user_id: str,
        mode: ReviewMode | None = None,
        limit: int | None = None,
        now: datetime | None = None,
    ) -> ReviewSessionStartResult:
        """
        Start reviewing the learner's due cards.

        Args:
            user_id: ID of the learner
            mode: How cards are presented; the configured default when omitted
            limit: Maximum number of cards; the configured default when omitted
            now: Current time

        Returns:
            The session id to submit reviews against and the first card

        Raises:
            DomainError: ``REVIEW_NO_DUE_CARDS`` if nothing is due
        """
        now = now or utc_now()
        user_id_vo = UserId(user_id)

        due_ids = self.review_history_repository.find_due_flashcards(
            user_id_vo, limit or self.default_limit, now
        )

        due_cards: list[ReviewFlashcard] = []
        for flashcard_id in due_ids:
            flashcard = self.flashcard_repository.find_by_id(flashcard_id)
            if flashcard is None:
                continue
            history = self.review_history_repository.find_by_user_and_flashcard(
                user_id_vo, flashcard_id
            )
            last_review = history[-1] if history else None
            due_cards.append(
                ReviewFlashcard(
                    id=flashcard_id,
                    question=flashcard.question,
                    answer=flashcard.answer,
                    difficulty=flashcard.difficulty,
                    last_review_date=last_review.review_date if last_review else None,
                    interval_days=last_review.interval_days if last_review else 1,
                    review_history=tuple(history),
                )
            )

        session = ReviewSession.start(
            user_id_vo,
            due_cards,
            mode=mode or self.default_mode,
            now=now,
            scheduler=self.spaced_repetition_service,
        )
        self.review_session_repository.save(session)
        self.event_publisher.publish_all(session.collect_events())

        logger.info(
            "started_review_session",
            user_id=user_id,
            session_id=session.id.value,
            card_count=len(due_cards),
        )
        return ReviewSessionStartResult(
            session_id=session.id.value,
            mode=session.mode,
            total_cards=len(due_cards),
            current_card=session.current_card,
            progress=session.progress(),
        )
