"""
XP (experience points) value object.

Represents earned experience points in the gamification system.
"""

import math
from dataclasses import dataclass
from typing import Self

from learnloop.domain.common.exceptions import ValidationError
from learnloop.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class XP(ValueObject):
    """
    Non-negative amount of experience points.

    Business Rules:
    - XP is a whole number and never negative
    - Subtracting more XP than available fails
    """

    amount: int

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValidationError("XP amount must be an integer", "amount", self.amount)
        if self.amount < 0:
            raise ValidationError("XP amount cannot be negative", "amount", self.amount)

    @classmethod
    def from_amount(cls, amount: int) -> Self:
        return cls(amount)

    @classmethod
    def zero(cls) -> Self:
        return cls(0)

    def add(self, other: "XP") -> "XP":
        return XP(self.amount + other.amount)

    def subtract(self, other: "XP") -> "XP":
        """
        Subtract XP, e.g. to spend it on a heart purchase.

        Raises:
            ValidationError: If more XP is subtracted than available
        """
        result = self.amount - other.amount
        if result < 0:
            raise ValidationError("Cannot subtract more XP than available", "amount", result)
        return XP(result)

    def multiply(self, factor: float) -> "XP":
        """Scale by ``factor``, rounding down to a whole amount."""
        if factor < 0:
            raise ValidationError("Cannot multiply XP by negative factor", "factor", factor)
        return XP(math.floor(self.amount * factor))

    def is_greater_than(self, other: "XP") -> bool:
        return self.amount > other.amount

    def is_less_than(self, other: "XP") -> bool:
        return self.amount < other.amount

    def __str__(self) -> str:
        return f"{self.amount} XP"
