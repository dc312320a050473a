"""
Streak value object.

Counts consecutive calendar days of activity. Day arithmetic compares
calendar dates, so two activities 30 hours apart on consecutive dates
still continue the streak.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Self

from learnloop.domain.common.calendar import is_previous_day, is_same_day
from learnloop.domain.common.exceptions import ValidationError
from learnloop.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class Streak(ValueObject):
    """
    Consecutive-day activity counter.

    ``last_activity_date`` is None for a streak that never had activity.

    Business Rules:
    - Count is never negative
    - Same-day activity never increments twice
    - Activity the day after the last one increments by one
    - Any larger gap restarts the count at one
    """

    MILESTONE_DAYS: ClassVar[int] = 7

    count: int
    last_activity_date: datetime | None = None

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise ValidationError("Streak count must be an integer", "count", self.count)
        if self.count < 0:
            raise ValidationError("Streak count cannot be negative", "count", self.count)

    @classmethod
    def start(cls) -> Self:
        """Fresh streak with no recorded activity."""
        return cls(0, None)

    @classmethod
    def from_count(cls, count: int, last_activity_date: datetime | None) -> Self:
        return cls(count, last_activity_date)

    def increment(self, now: datetime) -> "Streak":
        """Register activity at ``now``."""
        if self.last_activity_date is None:
            return Streak(1, now)
        if is_same_day(self.last_activity_date, now):
            return self
        if is_previous_day(self.last_activity_date, now):
            return Streak(self.count + 1, now)
        return Streak(1, now)

    def reset(self) -> "Streak":
        return Streak.start()

    def is_active(self, now: datetime) -> bool:
        """Activity today or yesterday keeps the streak alive."""
        if self.last_activity_date is None:
            return False
        return is_same_day(self.last_activity_date, now) or is_previous_day(
            self.last_activity_date, now
        )

    def breaks_on(self, now: datetime) -> bool:
        """True when activity at ``now`` would break a running streak."""
        return self.count > 0 and not self.is_active(now)

    def is_milestone(self) -> bool:
        return self.count > 0 and self.count % self.MILESTONE_DAYS == 0

    def days_until_next_milestone(self) -> int:
        return self.MILESTONE_DAYS - (self.count % self.MILESTONE_DAYS)

    def to_primitive(self) -> int:
        return self.count

    def __str__(self) -> str:
        if self.count == 0:
            return "No streak"
        return f"{self.count} day{'' if self.count == 1 else 's'}"
