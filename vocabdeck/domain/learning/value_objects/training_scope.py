"""TrainingScope value object - the lesson/class filter of a training setup."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Self

from vocabdeck.domain.common.value_object import ValueObject
from vocabdeck.domain.common.value_objects import LessonId

from .card_attributes import CardClass

if TYPE_CHECKING:
    from vocabdeck.domain.learning.entities.card import Card


@dataclass(frozen=True)
class TrainingScope(ValueObject):
    """
    Restricts which cards are considered for counting or training.

    An empty lesson selection means nothing is in scope. An empty class
    selection means every class is accepted.
    """

    lesson_ids: frozenset[LessonId] = field(default_factory=frozenset)
    card_classes: frozenset[CardClass] = field(default_factory=frozenset)

    @classmethod
    def of(
        cls,
        lesson_ids: Iterable[LessonId | str],
        card_classes: Iterable[CardClass] = (),
    ) -> Self:
        """Build a scope from loose identifiers."""
        return cls(
            lesson_ids=frozenset(
                lid if isinstance(lid, LessonId) else LessonId(lid) for lid in lesson_ids
            ),
            card_classes=frozenset(CardClass(c) for c in card_classes),
        )

    @property
    def is_empty(self) -> bool:
        return not self.lesson_ids

    def includes(self, card: "Card") -> bool:
        if card.lesson_id not in self.lesson_ids:
            return False
        return not self.card_classes or card.card_class in self.card_classes
