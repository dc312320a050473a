from .user_progress_repository import UserProgressRepositoryProtocol

__all__ = ["UserProgressRepositoryProtocol"]
