"""DTOs for gamification use cases."""

from learnloop.application.gamification.use_cases.dtos.progress_dtos import (
    HeartRefillResult,
    StreakUpdateResult,
)

__all__ = ["HeartRefillResult", "StreakUpdateResult"]
