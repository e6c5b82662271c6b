"""Enumerations describing a card."""

from enum import StrEnum


class Language(StrEnum):
    FRENCH = "French"
    ENGLISH = "English"


class CardClass(StrEnum):
    NOUN = "Noun"
    VERB = "Verb"
    ADJECTIVE = "Adjective"
    ADVERB = "Adverb"
    EXPRESSION = "Expression"


class Gender(StrEnum):
    MASC = "Masc"
    FEM = "Fem"
    # Plural nouns or words where gender isn't the focus
    NONE = "None"


class VerbType(StrEnum):
    REGULAR = "Regular"
    IRREGULAR = "Irregular"
