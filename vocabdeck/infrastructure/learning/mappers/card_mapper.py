"""Mapper for Card record ↔ Domain conversion."""

from vocabdeck.application.learning.use_cases.dtos import ManualCardDraft
from vocabdeck.domain.common.value_objects import CardId, LessonId, UnitId
from vocabdeck.domain.learning.entities.card import Card
from vocabdeck.domain.learning.value_objects import Conjugations
from vocabdeck.infrastructure.learning.schemas.card_schemas import (
    CardRecord,
    ManualCardCreateRequest,
)


def _to_set(values: list[str] | None) -> frozenset[str] | None:
    return frozenset(values) if values is not None else None


def _to_list(values: frozenset[str] | None) -> list[str] | None:
    # Sets have no order; sort for stable output
    return sorted(values) if values is not None else None


class CardMapper:
    """Mapper for Card record ↔ Domain conversion."""

    def to_domain(self, record: CardRecord) -> Card:
        """Convert a card record to a domain entity."""
        return Card(
            id=CardId(record.id),
            word=record.word,
            article=record.article,
            translation=record.translation,
            card_class=record.card_class,
            gender=record.gender,
            infinitive=record.infinitive,
            verb_type=record.verb_type,
            conjugations=(
                Conjugations.from_slots(record.conjugations)
                if record.conjugations is not None
                else None
            ),
            synonyms=_to_set(record.synonyms),
            antonyms=_to_set(record.antonyms),
            language=record.language,
            unit_id=UnitId(record.unit_id),
            lesson_id=LessonId(record.lesson_id),
            created_at=record.created_at,
        )

    def to_record(self, card: Card) -> CardRecord:
        """Convert a domain entity to a card record."""
        return CardRecord(
            id=card.id.value,
            word=card.word,
            article=card.article,
            translation=card.translation,
            card_class=card.card_class,
            gender=card.gender,
            infinitive=card.infinitive,
            verb_type=card.verb_type,
            conjugations=card.conjugations.to_primitive() if card.conjugations else None,
            synonyms=_to_list(card.synonyms),
            antonyms=_to_list(card.antonyms),
            language=card.language,
            unit_id=card.unit_id.value,
            lesson_id=card.lesson_id.value,
            created_at=card.created_at,
        )

    def to_draft(self, request: ManualCardCreateRequest) -> ManualCardDraft:
        """Convert a manual entry request to the use case draft."""
        return ManualCardDraft(
            language=request.language,
            unit_id=request.unit_id,
            lesson_id=request.lesson_id,
            raw_word=request.word,
            translation=request.translation,
            card_class=request.card_class,
            gender=request.gender,
            verb_type=request.verb_type,
            conjugations=list(request.conjugations),
            synonyms=list(request.synonyms),
            antonyms=list(request.antonyms),
        )
