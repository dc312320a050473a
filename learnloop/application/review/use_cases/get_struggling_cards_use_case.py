"""Use case for listing the cards a learner keeps missing."""

import structlog

from learnloop.application.review.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from learnloop.application.review.protocols.struggling_queue_repository import (
    StrugglingQueueRepositoryProtocol,
)
from learnloop.application.review.use_cases.dtos.review_dtos import (
    StrugglingCardsResult,
    StrugglingCardView,
)
from learnloop.domain.common.value_objects import UserId

logger = structlog.get_logger(__name__)


class GetStrugglingCardsUseCase:
    """Use case for reading the struggling queue."""

    def __init__(
        self,
        struggling_queue_repository: StrugglingQueueRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.struggling_queue_repository = struggling_queue_repository
        self.flashcard_repository = flashcard_repository

    def get_struggling_cards(self, user_id: str, limit: int | None = None) -> StrugglingCardsResult:
        """
        Get the learner's struggling cards, most failed first.

        Args:
            user_id: ID of the learner
            limit: Maximum number of cards

        Returns:
            Cards ordered by times failed, then by last failure, both
            descending; and the size of the whole queue
        """
        user_id_vo = UserId(user_id)
        entries = self.struggling_queue_repository.find_by_user(user_id_vo, limit)

        cards: list[StrugglingCardView] = []
        for entry in entries:
            flashcard = self.flashcard_repository.find_by_id(entry.flashcard_id)
            if flashcard is None:
                continue
            cards.append(
                StrugglingCardView(
                    id=int(entry.flashcard_id),
                    question=flashcard.question,
                    answer=flashcard.answer,
                    difficulty=flashcard.difficulty,
                    times_failed=entry.times_failed,
                    last_failed_at=entry.last_failed_at,
                    added_at=entry.added_at,
                )
            )

        total = self.struggling_queue_repository.count_by_user(user_id_vo)
        logger.debug("fetched_struggling_cards", user_id=user_id, count=len(cards), total=total)
        return StrugglingCardsResult(cards=cards, total=total)
