from .flashcard_repository import FlashcardRepositoryProtocol
from .review_history_repository import ReviewHistoryRepositoryProtocol
from .review_session_repository import ReviewSessionRepositoryProtocol
from .struggling_queue_repository import StrugglingQueueRepositoryProtocol

__all__ = [
    "FlashcardRepositoryProtocol",
    "ReviewHistoryRepositoryProtocol",
    "ReviewSessionRepositoryProtocol",
    "StrugglingQueueRepositoryProtocol",
]
