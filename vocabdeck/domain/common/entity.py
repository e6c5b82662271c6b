"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. A card keeps its id for its whole life, even when a
merge enriches its attributes.

Example:
    @dataclass
    class Lesson(Entity[LessonId]):
        id: LessonId
        name: str
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import uuid4

from .exceptions import ValidationError
from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Identifiers are opaque strings. Subclasses set ``prefix`` so generated
    ids read like ``card_3f2c...`` or ``u_91ab...``.

    Example:
        @dataclass(frozen=True)
        class CardId(EntityId):
            prefix = "card"

        card_id = CardId("card_1")
        lesson_id = LessonId("card_1")
        # These are different types, preventing accidental mixing
    """

    value: str

    prefix = "id"

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError(
                f"{self.__class__.__name__} must be a non-empty string",
                field=self.__class__.__name__,
                value=self.value,
            )

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> Self:
        """Create a fresh identifier."""
        return cls(f"{cls.prefix}_{uuid4().hex}")

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Have lifecycle (created, enriched, orphaned)

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
