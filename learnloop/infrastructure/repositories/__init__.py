"""In-memory implementations of the application ports."""

from .flashcard_repository import InMemoryFlashcardRepository
from .lesson_completion_repository import InMemoryLessonCompletionRepository
from .lesson_repository import InMemoryLessonRepository
from .lesson_session_repository import InMemoryLessonSessionRepository
from .review_history_repository import InMemoryReviewHistoryRepository
from .review_session_repository import InMemoryReviewSessionRepository
from .struggling_queue_repository import InMemoryStrugglingQueueRepository
from .user_progress_repository import InMemoryUserProgressRepository

__all__ = [
    "InMemoryFlashcardRepository",
    "InMemoryLessonCompletionRepository",
    "InMemoryLessonRepository",
    "InMemoryLessonSessionRepository",
    "InMemoryReviewHistoryRepository",
    "InMemoryReviewSessionRepository",
    "InMemoryStrugglingQueueRepository",
    "InMemoryUserProgressRepository",
]
