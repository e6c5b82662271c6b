"""
Card entity - one vocabulary entry.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from vocabdeck.domain.common.entity import Entity
from vocabdeck.domain.common.value_objects import CardId, LessonId, UnitId
from vocabdeck.domain.learning.value_objects import (
    CardClass,
    Conjugations,
    Gender,
    IdentityKey,
    Language,
    VerbType,
)


@dataclass
class Card(Entity[CardId]):
    """
    A vocabulary card.

    Business Rules:
    - The id, language and home lesson are fixed at creation
    - Incomplete cards are legal; eligibility decides what they can be asked
    - Conjugations, when present, always have six slots
    """

    id: CardId
    word: str
    translation: str
    card_class: CardClass
    language: Language
    unit_id: UnitId
    lesson_id: LessonId
    created_at: datetime
    gender: Gender = Gender.NONE
    article: str | None = None

    # Verb data
    infinitive: str | None = None
    verb_type: VerbType | None = None
    conjugations: Conjugations | None = None

    # English data
    synonyms: frozenset[str] | None = None
    antonyms: frozenset[str] | None = None

    @property
    def identity_key(self) -> IdentityKey:
        return IdentityKey.of(self.word, self.card_class)

    @property
    def has_conjugations(self) -> bool:
        """Whether at least one conjugated form is known."""
        return self.conjugations is not None and not self.conjugations.is_empty

    @classmethod
    def create(
        cls,
        word: str,
        translation: str,
        card_class: CardClass,
        language: Language,
        unit_id: UnitId,
        lesson_id: LessonId,
        gender: Gender = Gender.NONE,
        article: str | None = None,
        infinitive: str | None = None,
        verb_type: VerbType | None = None,
        conjugations: Conjugations | None = None,
        synonyms: frozenset[str] | None = None,
        antonyms: frozenset[str] | None = None,
    ) -> "Card":
        """Create a new card with a fresh id and creation time."""
        return cls(
            id=CardId.generate(),
            word=word,
            translation=translation,
            card_class=card_class,
            language=language,
            unit_id=unit_id,
            lesson_id=lesson_id,
            created_at=datetime.now(UTC),
            gender=gender,
            article=article,
            infinitive=infinitive,
            verb_type=verb_type,
            conjugations=conjugations,
            synonyms=synonyms,
            antonyms=antonyms,
        )
