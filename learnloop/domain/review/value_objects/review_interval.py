"""
ReviewInterval value object.

Whole number of days until a flashcard should be reviewed again. The
canonical ladder for consecutive correct reviews is 1, 3, 7, 14 and 30 days.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Self

from learnloop.domain.common.calendar import add_days, utc_now
from learnloop.domain.common.exceptions import ValidationError
from learnloop.domain.common.value_object import ValueObject


@dataclass(frozen=True, order=True)
class ReviewInterval(ValueObject):
    """
    Spaced-repetition interval in days.

    Business Rules:
    - At least one day
    - Whole days only
    - Doubling never exceeds one year
    """

    MAX_DAYS: ClassVar[int] = 365

    days: int

    def __post_init__(self) -> None:
        if isinstance(self.days, bool) or not isinstance(self.days, int):
            raise ValidationError(
                "Review interval must be a whole number of days", "days", self.days
            )
        if self.days < 1:
            raise ValidationError("Review interval must be at least 1 day", "days", self.days)

    @classmethod
    def from_days(cls, days: int) -> Self:
        return cls(days)

    @classmethod
    def first_review(cls) -> Self:
        return cls(1)

    @classmethod
    def second_review(cls) -> Self:
        return cls(3)

    @classmethod
    def third_review(cls) -> Self:
        return cls(7)

    @classmethod
    def fourth_review(cls) -> Self:
        return cls(14)

    @classmethod
    def mastered(cls) -> Self:
        return cls(30)

    def calculate_next_review_date(self, from_date: datetime | None = None) -> datetime:
        """Date of the next review, ``days`` calendar days after ``from_date``."""
        return add_days(from_date or utc_now(), self.days)

    def double(self) -> "ReviewInterval":
        return ReviewInterval(min(self.days * 2, self.MAX_DAYS))

    def halve(self) -> "ReviewInterval":
        return ReviewInterval(max(self.days // 2, 1))

    def reset(self) -> "ReviewInterval":
        return ReviewInterval.first_review()

    @property
    def is_short(self) -> bool:
        return self.days < 7

    @property
    def is_medium(self) -> bool:
        return 7 <= self.days < 30

    @property
    def is_long(self) -> bool:
        return self.days >= 30

    def is_longer_than(self, other: "ReviewInterval") -> bool:
        return self.days > other.days

    def is_shorter_than(self, other: "ReviewInterval") -> bool:
        return self.days < other.days

    def __str__(self) -> str:
        return "1 day" if self.days == 1 else f"{self.days} days"
