"""Protocol for the card collection store in learning context."""

from collections.abc import Sequence
from typing import Protocol

from vocabdeck.domain.learning.entities.card import Card


class CardRepositoryProtocol(Protocol):
    """Load/save capability for the whole card collection."""

    def load(self) -> list[Card]:
        """
        Load the card collection.

        Returns:
            Cards in their stored order, empty when nothing was saved yet
        """
        ...

    def save(self, cards: Sequence[Card]) -> None:
        """
        Replace the stored collection.

        Args:
            cards: The complete collection, in display order
        """
        ...
