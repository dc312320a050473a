"""Review module domain layer: spaced-repetition scheduling and review sessions."""

from .aggregates import ReviewSession
from .review_records import ReviewFlashcard, ReviewHistoryRecord, ReviewResult, StrugglingCard
from .services import SpacedRepetitionService
from .value_objects import ReviewInterval

__all__ = [
    "ReviewFlashcard",
    "ReviewHistoryRecord",
    "ReviewInterval",
    "ReviewResult",
    "ReviewSession",
    "SpacedRepetitionService",
    "StrugglingCard",
]
