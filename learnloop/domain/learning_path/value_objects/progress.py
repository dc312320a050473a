"""Progress value object: how many of a fixed number of steps are done."""

from dataclasses import dataclass
from typing import Self

from learnloop.domain.common.exceptions import ValidationError
from learnloop.domain.common.rounding import percent
from learnloop.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class Progress(ValueObject):
    completed: int
    total: int

    def __post_init__(self) -> None:
        if self.completed < 0 or self.total < 0:
            raise ValidationError("Progress values cannot be negative")
        if self.completed > self.total:
            raise ValidationError("Completed cannot exceed total")

    @classmethod
    def from_ratio(cls, completed: int, total: int) -> Self:
        return cls(completed, total)

    @classmethod
    def zero(cls, total: int) -> Self:
        return cls(0, total)

    @classmethod
    def complete(cls, total: int) -> Self:
        return cls(total, total)

    @property
    def percentage(self) -> int:
        return percent(self.completed, self.total)

    @property
    def decimal(self) -> float:
        if self.total == 0:
            return 0.0
        return self.completed / self.total

    @property
    def remaining(self) -> int:
        return self.total - self.completed

    @property
    def is_complete(self) -> bool:
        return self.completed >= self.total

    @property
    def is_not_started(self) -> bool:
        return self.completed == 0

    def advance(self) -> "Progress":
        if self.is_complete:
            raise ValidationError("Progress is already complete")
        return Progress(self.completed + 1, self.total)

    def __str__(self) -> str:
        return f"{self.completed}/{self.total} ({self.percentage}%)"
