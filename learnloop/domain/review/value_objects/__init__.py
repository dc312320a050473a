from .review_interval import ReviewInterval

__all__ = ["ReviewInterval"]
