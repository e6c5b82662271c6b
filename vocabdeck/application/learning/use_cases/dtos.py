"""DTOs for learning use cases."""

from dataclasses import dataclass, field

from vocabdeck.domain.learning.entities.card import Card
from vocabdeck.domain.learning.value_objects import (
    CardClass,
    Gender,
    Language,
    QuestionType,
    VerbType,
)


@dataclass(frozen=True)
class ManualCardDraft:
    """What the manual entry form collects for one card."""

    language: Language
    unit_id: str
    lesson_id: str
    raw_word: str
    translation: str
    card_class: CardClass
    gender: Gender = Gender.NONE
    verb_type: VerbType | None = None
    # Up to six slots, each independently optional
    conjugations: list[str | None] = field(default_factory=list)
    synonyms: list[str] = field(default_factory=list)
    antonyms: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ManualEntryResult:
    """The stored card and whether it was newly inserted."""

    card: Card
    inserted: bool


@dataclass(frozen=True)
class IngestResult:
    """Summary of an extraction run."""

    extracted: int
    inserted: int
    enriched: int


@dataclass(frozen=True)
class TrainingPlan:
    """A validated training session configuration."""

    language: Language
    lesson_ids: list[str]
    card_classes: list[CardClass]
    question_types: list[QuestionType]
    card_limit: int
    counts: dict[QuestionType, int]
    dropped_question_types: list[QuestionType]
    max_cards_available: int
