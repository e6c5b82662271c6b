"""
Card eligibility rules.

Decides whether a card holds enough data to be asked as a given question
type. Counting previews and question generation both go through
``is_card_eligible`` so a preview never promises more than can be played.
"""

from collections.abc import Callable

from vocabdeck.domain.learning.entities.card import Card
from vocabdeck.domain.learning.value_objects import CardClass, Gender, QuestionType


def _has_meaning(card: Card) -> bool:
    return bool(card.word and card.word.strip()) and bool(
        card.translation and card.translation.strip()
    )


def _has_gender(card: Card) -> bool:
    return card.card_class == CardClass.NOUN and card.gender in (Gender.MASC, Gender.FEM)


def _has_full_conjugations(card: Card) -> bool:
    # Any unknown slot excludes the verb entirely
    return (
        card.card_class == CardClass.VERB
        and bool(card.infinitive)
        and card.conjugations is not None
        and card.conjugations.is_complete
    )


def _has_synonyms(card: Card) -> bool:
    return bool(card.synonyms)


def _has_antonyms(card: Card) -> bool:
    return bool(card.antonyms)


_RULES: dict[QuestionType, Callable[[Card], bool]] = {
    QuestionType.MEANING: _has_meaning,
    QuestionType.GENDER: _has_gender,
    QuestionType.CONJUGATION: _has_full_conjugations,
    QuestionType.SYNONYMS: _has_synonyms,
    QuestionType.ANTONYMS: _has_antonyms,
}


def is_card_eligible(card: Card, question_type: QuestionType | str) -> bool:
    """
    Check whether a card can generate a question of the given type.

    Unknown question types are never eligible.
    """
    rule = _RULES.get(question_type)  # type: ignore[call-overload]
    if rule is None:
        return False
    return rule(card)
