"""
Hearts value object.

Hearts are the learner's lives: a lesson costs one heart per incorrect
answer and hearts regenerate over time.
"""

from dataclasses import dataclass
from typing import ClassVar, Self

from learnloop.domain.common.exceptions import DomainError, ValidationError
from learnloop.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class Hearts(ValueObject):
    """
    Remaining lives, between 0 and ``Hearts.MAX`` inclusive.

    Business Rules:
    - Never below zero, never above the maximum
    - Deducting from empty hearts is illegal (``NO_HEARTS``)
    - Refilling full hearts is a no-op
    """

    MAX: ClassVar[int] = 5
    MIN: ClassVar[int] = 0

    remaining: int

    def __post_init__(self) -> None:
        if isinstance(self.remaining, bool) or not isinstance(self.remaining, int):
            raise ValidationError("Hearts must be an integer", "remaining", self.remaining)
        if not self.MIN <= self.remaining <= self.MAX:
            raise ValidationError(
                f"Hearts must be between {self.MIN} and {self.MAX}", "remaining", self.remaining
            )

    @classmethod
    def full(cls) -> Self:
        return cls(cls.MAX)

    @classmethod
    def empty(cls) -> Self:
        return cls(cls.MIN)

    @classmethod
    def create(cls, count: int) -> Self:
        return cls(count)

    def deduct(self) -> "Hearts":
        """
        Lose one heart.

        Raises:
            DomainError: ``NO_HEARTS`` if no hearts are left
        """
        if self.is_empty:
            raise DomainError("No hearts remaining", "NO_HEARTS")
        return Hearts(self.remaining - 1)

    def refill_one(self) -> "Hearts":
        if self.is_full:
            return self
        return Hearts(self.remaining + 1)

    def refill(self) -> "Hearts":
        """Alias of :meth:`refill_one`."""
        return self.refill_one()

    def refill_all(self) -> "Hearts":
        return Hearts.full()

    @property
    def is_empty(self) -> bool:
        return self.remaining == self.MIN

    @property
    def is_full(self) -> bool:
        return self.remaining == self.MAX

    @property
    def is_low(self) -> bool:
        """Running low: one or two hearts left."""
        return 0 < self.remaining <= 2

    @property
    def missing(self) -> int:
        return self.MAX - self.remaining

    def __str__(self) -> str:
        return f"{self.remaining}/{self.MAX} hearts"
