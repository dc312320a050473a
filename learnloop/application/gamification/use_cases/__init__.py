from .get_or_start_progress_use_case import GetOrStartProgressUseCase, load_or_start_progress
from .refill_hearts_use_case import RefillHeartsUseCase
from .update_streak_use_case import UpdateStreakUseCase

__all__ = [
    "GetOrStartProgressUseCase",
    "RefillHeartsUseCase",
    "UpdateStreakUseCase",
    "load_or_start_progress",
]
