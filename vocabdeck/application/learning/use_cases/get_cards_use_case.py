"""Use case for listing stored cards."""

from vocabdeck.application.learning.services.card_store import CardStore
from vocabdeck.domain.common.value_objects import LessonId
from vocabdeck.domain.learning.entities.card import Card
from vocabdeck.domain.learning.value_objects import Language


class GetCardsUseCase:
    """Use case for reading the card collection."""

    def __init__(self, card_store: CardStore) -> None:
        self.card_store = card_store

    def list_cards(
        self, lesson_id: str | None = None, language: Language | None = None
    ) -> list[Card]:
        """
        List cards in collection order.

        Args:
            lesson_id: Only cards whose home lesson is this one
            language: Only cards of this language
        """
        cards = (
            self.card_store.cards_in_lesson(LessonId(lesson_id))
            if lesson_id
            else list(self.card_store.snapshot())
        )
        if language is not None:
            cards = [card for card in cards if card.language == language]
        return cards
