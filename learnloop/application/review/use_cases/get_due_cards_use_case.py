"""Use case for listing the cards a learner should review now."""

from datetime import datetime

import structlog

from learnloop.application.review.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from learnloop.application.review.protocols.review_history_repository import (
    ReviewHistoryRepositoryProtocol,
)
from learnloop.application.review.use_cases.dtos.review_dtos import DueCard, DueCardsResult
from learnloop.domain.common.calendar import utc_now
from learnloop.domain.common.value_objects import UserId

logger = structlog.get_logger(__name__)


class GetDueCardsUseCase:
    """Use case for fetching due flashcards."""

    def __init__(
        self,
        review_history_repository: ReviewHistoryRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
        default_limit: int,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.review_history_repository = review_history_repository
        self.flashcard_repository = flashcard_repository
        self.default_limit = default_limit

    def get_due_cards(
        self, user_id: str, limit: int | None = None, now: datetime | None = None
    ) -> DueCardsResult:
        """
        Get the learner's due cards with their last scheduling.

        Args:
            user_id: ID of the learner
            limit: Maximum number of cards; the configured default when omitted
            now: Current time

        Returns:
            Due cards (cards deleted since their last review are skipped)
            and the total number of due cards
        """
        now = now or utc_now()
        user_id_vo = UserId(user_id)

        due_ids = self.review_history_repository.find_due_flashcards(
            user_id_vo, limit or self.default_limit, now
        )
        total_due = self.review_history_repository.count_due_flashcards(user_id_vo, now)

        cards: list[DueCard] = []
        for flashcard_id in due_ids:
            flashcard = self.flashcard_repository.find_by_id(flashcard_id)
            if flashcard is None:
                continue
            last_review = self.review_history_repository.find_last_review(user_id_vo, flashcard_id)
            cards.append(
                DueCard(
                    id=int(flashcard_id),
                    question=flashcard.question,
                    answer=flashcard.answer,
                    difficulty=flashcard.difficulty,
                    last_review_date=last_review.review_date if last_review else None,
                    next_review_date=last_review.next_review_date if last_review else None,
                    interval_days=last_review.interval_days if last_review else 1,
                )
            )

        logger.debug("fetched_due_cards", user_id=user_id, count=len(cards), total_due=total_due)
        return DueCardsResult(cards=cards, total_due=total_due)
