"""DTOs for review use cases."""

from learnloop.application.review.use_cases.dtos.review_dtos import (
    DueCard,
    DueCardsResult,
    ReviewSessionStartResult,
    ReviewSessionSummary,
    ReviewSubmitResult,
    StrugglingCardView,
    StrugglingCardsResult,
)

__all__ = [
    "DueCard",
    "DueCardsResult",
    "ReviewSessionStartResult",
    "ReviewSessionSummary",
    "ReviewSubmitResult",
    "StrugglingCardView",
    "StrugglingCardsResult",
]
