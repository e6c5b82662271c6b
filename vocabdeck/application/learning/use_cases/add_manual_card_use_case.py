"""Use case for adding a single manually entered card."""

import structlog

from vocabdeck.application.learning.protocols.unit_repository import UnitRepositoryProtocol
from vocabdeck.application.learning.services.card_store import CardStore
from vocabdeck.application.learning.use_cases.destination import resolve_destination
from vocabdeck.application.learning.use_cases.dtos import ManualCardDraft, ManualEntryResult
from vocabdeck.domain.learning.entities.card import Card
from vocabdeck.domain.learning.services.article_splitter import split_french_article
from vocabdeck.domain.learning.value_objects import (
    CardClass,
    Conjugations,
    Language,
    SplitWord,
)

logger = structlog.get_logger(__name__)


def _word_set(values: list[str]) -> frozenset[str] | None:
    cleaned = frozenset(v.strip() for v in values if v and v.strip())
    return cleaned or None


class AddManualCardUseCase:
    """Use case for the manual entry form."""

    def __init__(self, card_store: CardStore, unit_repository: UnitRepositoryProtocol) -> None:
        """Initialize use case with the store and the unit repository."""
        self.card_store = card_store
        self.unit_repository = unit_repository

    def build_card(self, draft: ManualCardDraft) -> Card:
        """
        Turn a form submission into a card.

        French input has its leading article split off. Verbs use the bare
        word as infinitive; conjugation slots may be partially filled.
        """
        if draft.language == Language.FRENCH:
            split = split_french_article(draft.raw_word)
        else:
            split = SplitWord(word=draft.raw_word.strip())

        infinitive = None
        conjugations = None
        if draft.card_class == CardClass.VERB:
            infinitive = split.word or None
            slots = Conjugations.from_slots(draft.conjugations)
            conjugations = None if slots.is_empty else slots

        is_english = draft.language == Language.ENGLISH

        unit, lesson = resolve_destination(self.unit_repository, draft.unit_id, draft.lesson_id)
        return Card.create(
            word=split.word,
            article=split.article,
            translation=draft.translation.strip(),
            card_class=draft.card_class,
            language=draft.language,
            unit_id=unit.id,
            lesson_id=lesson.id,
            gender=draft.gender,
            infinitive=infinitive,
            verb_type=draft.verb_type if draft.card_class == CardClass.VERB else None,
            conjugations=conjugations,
            synonyms=_word_set(draft.synonyms) if is_english else None,
            antonyms=_word_set(draft.antonyms) if is_english else None,
        )

    def add_card(self, draft: ManualCardDraft) -> ManualEntryResult:
        """
        Add a manually entered card, merging it with an existing duplicate.

        Args:
            draft: The submitted form

        Returns:
            ManualEntryResult with the stored card. When the card matched an
            existing entry, that (possibly enriched) entry is returned.

        Raises:
            UnitNotFoundError: If the unit does not exist
            LessonNotFoundError: If the lesson is not part of the unit
            ValidationError: If more than six conjugation slots are given
        """
        card = self.build_card(draft)
        result = self.card_store.merge([card])

        key = card.identity_key
        stored = next(c for c in result.cards if c.identity_key == key)

        logger.info(
            "manual_card_added",
            card_id=stored.id.value,
            inserted=bool(result.inserted),
            enriched=bool(result.enriched),
        )
        return ManualEntryResult(card=stored, inserted=bool(result.inserted))
