"""Lesson entity: a step of a unit, taught through an ordered deck of flashcards."""

from dataclasses import dataclass

from learnloop.domain.common.entity import Entity
from learnloop.domain.common.exceptions import ValidationError
from learnloop.domain.common.value_objects import LessonId, UnitId


@dataclass(eq=False)
class Lesson(Entity[LessonId]):
    """Catalogue entry for a lesson. Content authoring lives outside this engine."""

    id: LessonId
    unit_id: UnitId
    name: str
    order_index: int = 0
    description: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name.strip():
            raise ValidationError("Lesson name cannot be empty", "name", self.name)
        if self.order_index < 0:
            raise ValidationError("Order index cannot be negative", "order_index", self.order_index)
