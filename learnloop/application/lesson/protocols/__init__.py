from .lesson_completion_repository import LessonCompletionRepositoryProtocol
from .lesson_repository import LessonRepositoryProtocol
from .lesson_session_repository import LessonSessionRepositoryProtocol

__all__ = [
    "LessonCompletionRepositoryProtocol",
    "LessonRepositoryProtocol",
    "LessonSessionRepositoryProtocol",
]
