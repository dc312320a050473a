"""Accuracy value object: share of correct answers as a whole percentage."""

from dataclasses import dataclass
from typing import Self

from learnloop.domain.common.exceptions import ValidationError
from learnloop.domain.common.rounding import percent, round_half_up
from learnloop.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class Accuracy(ValueObject):
    """Whole-number percentage between 0 and 100."""

    percent: int

    def __post_init__(self) -> None:
        if not 0 <= self.percent <= 100:
            raise ValidationError("Accuracy must be between 0 and 100", "percent", self.percent)

    @classmethod
    def from_ratio(cls, correct: int, total: int) -> Self:
        """
        Build accuracy from answer counts, rounding to the nearest percent.

        Raises:
            ValidationError: If counts are negative or correct exceeds total
        """
        if total == 0:
            return cls(0)
        if correct < 0 or total < 0:
            raise ValidationError("Correct and total must be non-negative")
        if correct > total:
            raise ValidationError("Correct answers cannot exceed total answers")
        return cls(percent(correct, total))

    @classmethod
    def from_percent(cls, value: float) -> Self:
        return cls(round_half_up(value))

    @classmethod
    def zero(cls) -> Self:
        return cls(0)

    @classmethod
    def perfect(cls) -> Self:
        return cls(100)

    def is_above(self, threshold: float) -> bool:
        return self.percent > threshold

    def is_below(self, threshold: float) -> bool:
        return self.percent < threshold

    @property
    def is_perfect(self) -> bool:
        return self.percent == 100

    @property
    def is_zero(self) -> bool:
        return self.percent == 0

    @property
    def decimal(self) -> float:
        return self.percent / 100

    def __str__(self) -> str:
        return f"{self.percent}%"
