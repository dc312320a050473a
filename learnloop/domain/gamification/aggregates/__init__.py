from .user_progress import UserProgress, UserProgressSnapshot

__all__ = ["UserProgress", "UserProgressSnapshot"]
