"""DTOs for progress use cases."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class HeartRefillResult:
    """Hearts before and after a refill, plus where the refill clock stands."""

    hearts_before: int
    hearts_after: int
    hearts_restored: int
    next_refill_time: datetime
    refill_progress: float


@dataclass(frozen=True)
class StreakUpdateResult:
    streak_count: int
    previous_streak_count: int
    streak_broken: bool
    last_activity_date: datetime | None
