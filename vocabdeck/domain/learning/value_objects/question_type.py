"""Question types a training session can ask."""

from enum import StrEnum

from .card_attributes import Language


class QuestionType(StrEnum):
    MEANING = "Meaning"  # Both languages
    GENDER = "Gender"  # French nouns
    CONJUGATION = "Conjugation"  # French verbs
    SYNONYMS = "Synonyms"  # English
    ANTONYMS = "Antonyms"  # English


LANGUAGE_QUESTION_TYPES: dict[Language, tuple[QuestionType, ...]] = {
    Language.FRENCH: (QuestionType.MEANING, QuestionType.GENDER, QuestionType.CONJUGATION),
    Language.ENGLISH: (QuestionType.MEANING, QuestionType.SYNONYMS, QuestionType.ANTONYMS),
}


def question_types_for(language: Language) -> tuple[QuestionType, ...]:
    """Return the question types that can be trained for a language, in display order."""
    return LANGUAGE_QUESTION_TYPES[language]
