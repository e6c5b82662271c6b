"""
Simulated card extraction.

Stands in for an OCR + language model pipeline: it ignores the file
contents and returns a fixed word list for the requested language.
"""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from vocabdeck.application.learning.protocols.card_extraction_service import SourceFile
from vocabdeck.domain.common.value_objects import LessonId, UnitId
from vocabdeck.domain.learning.entities.card import Card
from vocabdeck.domain.learning.services.article_splitter import split_french_article
from vocabdeck.domain.learning.value_objects import (
    CardClass,
    Conjugations,
    Gender,
    Language,
    VerbType,
)

logger = structlog.get_logger(__name__)

_REGULAR_ER_ENDINGS = ("e", "es", "e", "ons", "ez", "ent")


@dataclass(frozen=True)
class _MockWord:
    raw: str
    translation: str
    card_class: CardClass
    gender: Gender = Gender.NONE


FRENCH_WORDS: tuple[_MockWord, ...] = (
    _MockWord("la table", "طاولة", CardClass.NOUN, Gender.FEM),
    _MockWord("le livre", "كتاب", CardClass.NOUN, Gender.MASC),
    _MockWord("manger", "يأكل", CardClass.VERB),
    _MockWord("grand", "كبير", CardClass.ADJECTIVE, Gender.MASC),
    _MockWord("parler", "يتحدث", CardClass.VERB),
)

ENGLISH_WORDS: tuple[_MockWord, ...] = (
    _MockWord("Happy", "سعيد", CardClass.ADJECTIVE),
    _MockWord("Run", "يجري", CardClass.VERB),
    _MockWord("Success", "نجاح", CardClass.NOUN),
)

_ENGLISH_ADJECTIVE_SYNONYMS = frozenset({"Joyful", "Cheerful"})
_ENGLISH_ADJECTIVE_ANTONYMS = frozenset({"Sad", "Depressed"})


def conjugate_regular_er(infinitive: str) -> Conjugations:
    """
    Conjugate a verb in the present tense as a regular -er verb.

    Verbs not ending in -er get a table of unknown forms.
    """
    if not infinitive.endswith("er"):
        return Conjugations.from_slots([None] * 6)
    stem = infinitive[:-2]
    return Conjugations.from_slots([f"{stem}{ending}" for ending in _REGULAR_ER_ENDINGS])


class SimulatedCardExtractionService:
    """Extraction collaborator returning canned cards after a delay."""

    def __init__(self, delay_seconds: float = 1.5) -> None:
        self.delay_seconds = delay_seconds

    async def extract_cards(
        self,
        files: Sequence[SourceFile],
        language: Language,
        unit_id: UnitId,
        lesson_id: LessonId,
    ) -> list[Card]:
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)

        if language == Language.FRENCH:
            cards = [self._french_card(word, unit_id, lesson_id) for word in FRENCH_WORDS]
        else:
            cards = [self._english_card(word, unit_id, lesson_id) for word in ENGLISH_WORDS]

        logger.debug(
            "simulated_extraction_finished",
            file_names=[f.filename for f in files],
            language=language.value,
            card_count=len(cards),
        )
        return cards

    @staticmethod
    def _french_card(item: _MockWord, unit_id: UnitId, lesson_id: LessonId) -> Card:
        split = split_french_article(item.raw)
        is_verb = item.card_class == CardClass.VERB
        return Card.create(
            word=split.word,
            article=split.article,
            translation=item.translation,
            card_class=item.card_class,
            gender=item.gender,
            language=Language.FRENCH,
            unit_id=unit_id,
            lesson_id=lesson_id,
            infinitive=split.word if is_verb else None,
            verb_type=VerbType.REGULAR if is_verb else None,
            conjugations=conjugate_regular_er(split.word) if is_verb else None,
        )

    @staticmethod
    def _english_card(item: _MockWord, unit_id: UnitId, lesson_id: LessonId) -> Card:
        is_adjective = item.card_class == CardClass.ADJECTIVE
        return Card.create(
            word=item.raw,
            translation=item.translation,
            card_class=item.card_class,
            language=Language.ENGLISH,
            unit_id=unit_id,
            lesson_id=lesson_id,
            synonyms=_ENGLISH_ADJECTIVE_SYNONYMS if is_adjective else None,
            antonyms=_ENGLISH_ADJECTIVE_ANTONYMS if is_adjective else None,
        )
