from .get_due_cards_use_case import GetDueCardsUseCase
from .get_struggling_cards_use_case import GetStrugglingCardsUseCase
from .start_review_session_use_case import StartReviewSessionUseCase
from .submit_review_use_case import SubmitReviewUseCase

__all__ = [
    "GetDueCardsUseCase",
    "GetStrugglingCardsUseCase",
    "StartReviewSessionUseCase",
    "SubmitReviewUseCase",
]
