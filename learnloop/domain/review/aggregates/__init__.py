from .review_session import ReviewProgress, ReviewSession, ReviewSessionSnapshot

__all__ = ["ReviewProgress", "ReviewSession", "ReviewSessionSnapshot"]
