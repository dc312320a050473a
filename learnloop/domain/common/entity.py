"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Example:
    @dataclass
    class LessonCompletion(Entity[LessonCompletionId]):
        id: LessonCompletionId
        user_id: UserId
        lesson_id: LessonId
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects that wrap an integer or a string.
    They provide type safety to prevent mixing up IDs of different entities.

    Example:
        lesson_id = LessonId(42)
        path_id = PathId(42)
        assert lesson_id != path_id  # different types never compare equal
    """

    value: int | str

    def __post_init__(self) -> None:
        if isinstance(self.value, bool):
            raise ValueError(f"{self.__class__.__name__} cannot be a boolean")
        if isinstance(self.value, int) and self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")
        if isinstance(self.value, str) and not self.value.strip():
            raise ValueError(f"{self.__class__.__name__} cannot be empty")

    def __int__(self) -> int:
        if isinstance(self.value, int):
            return self.value
        raise TypeError(f"Cannot convert string-based {self.__class__.__name__} to int")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Placeholder id for unsaved entities. Repositories assign the real one."""
        return cls(0)

    @property
    def is_placeholder(self) -> bool:
        return self.value == 0

    def to_primitive(self) -> int | str:
        """Convert to primitive for serialization."""
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Have lifecycle (created, modified, archived)

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
