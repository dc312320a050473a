"""
Domain service for heart refill timing.

Answers the questions a client asks about the refill clock (when is the
next full refill, how far along is it) without mutating any aggregate.
"""

import math
from datetime import datetime

from learnloop.domain.common.calendar import hours_between, is_same_day, utc_now
from learnloop.domain.gamification.aggregates.user_progress import (
    HEARTS_FULL_REFILL_INTERVAL,
    HEARTS_REFILL_INTERVAL,
)
from learnloop.domain.gamification.value_objects import Hearts

_FULL_REFILL_HOURS = HEARTS_FULL_REFILL_INTERVAL.total_seconds() / 3600
_PARTIAL_REFILL_HOURS = HEARTS_REFILL_INTERVAL.total_seconds() / 3600


class HeartRefillService:
    """
    Stateless heart refill calculations.

    Business Rules:
    - A full refill becomes available 24 hours after the last one
    - One heart regenerates passively every 4 hours, capped at the maximum
    """

    def can_refill(self, last_refill: datetime, now: datetime | None = None) -> bool:
        now = now or utc_now()
        return hours_between(last_refill, now) >= _FULL_REFILL_HOURS

    def next_refill_time(self, last_refill: datetime) -> datetime:
        return last_refill + HEARTS_FULL_REFILL_INTERVAL

    def hours_until_refill(self, last_refill: datetime, now: datetime | None = None) -> int:
        """Whole hours until the next full refill, rounded up; 0 when available."""
        now = now or utc_now()
        remaining = _FULL_REFILL_HOURS - hours_between(last_refill, now)
        return max(0, math.ceil(remaining))

    def refill_progress(self, last_refill: datetime, now: datetime | None = None) -> float:
        """Percentage (0-100) of the way to the next full refill."""
        now = now or utc_now()
        progress = hours_between(last_refill, now) / _FULL_REFILL_HOURS * 100
        return min(100.0, max(0.0, progress))

    def passive_refill(
        self, hearts: Hearts, last_activity: datetime, now: datetime | None = None
    ) -> Hearts:
        """
        Hearts after passive regeneration since ``last_activity``.

        Args:
            hearts: Current hearts
            last_activity: When the learner was last active
            now: Evaluation time

        Returns:
            Hearts with one heart added per full 4 hours, capped at the maximum
        """
        if hearts.is_full:
            return hearts
        now = now or utc_now()
        regenerated = int(hours_between(last_activity, now) // _PARTIAL_REFILL_HOURS)
        if regenerated <= 0:
            return hearts
        return Hearts.create(min(hearts.remaining + regenerated, Hearts.MAX))

    def full_refill(self) -> Hearts:
        return Hearts.full()

    def should_perform_daily_refill(
        self, last_daily_refill: datetime | None, now: datetime | None = None
    ) -> bool:
        """A daily refill is due on the first activity of each calendar day."""
        if last_daily_refill is None:
            return True
        return not is_same_day(last_daily_refill, now or utc_now())
