from collections.abc import Sequence

from vocabdeck.domain.learning.entities.card import Card


class InMemoryCardRepository:
    """Keeps the card collection in process memory."""

    def __init__(self, cards: Sequence[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)

    def load(self) -> list[Card]:
        return list(self._cards)

    def save(self, cards: Sequence[Card]) -> None:
        self._cards = list(cards)
