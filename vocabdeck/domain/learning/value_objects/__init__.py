"""Value objects of the learning context."""

from .card_attributes import CardClass, Gender, Language, VerbType
from .conjugations import PERSONS, UNKNOWN_FORM_MARKER, Conjugations
from .identity_key import IdentityKey
from .question_type import LANGUAGE_QUESTION_TYPES, QuestionType, question_types_for
from .split_word import SplitWord
from .training_scope import TrainingScope

__all__ = [
    "LANGUAGE_QUESTION_TYPES",
    "PERSONS",
    "UNKNOWN_FORM_MARKER",
    "CardClass",
    "Conjugations",
    "Gender",
    "IdentityKey",
    "Language",
    "QuestionType",
    "SplitWord",
    "TrainingScope",
    "VerbType",
    "question_types_for",
]
