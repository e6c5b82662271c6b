"""Identity key used to detect duplicate cards."""

from dataclasses import dataclass
from typing import Self

from vocabdeck.domain.common.value_object import ValueObject

from .card_attributes import CardClass


@dataclass(frozen=True)
class IdentityKey(ValueObject):
    """
    The (word, class) pair two cards must share to be the same lexical entry.

    The word is stored lower-cased so lookups are case-insensitive.
    Language, unit and lesson are not part of the key.
    """

    word: str
    card_class: CardClass

    @classmethod
    def of(cls, word: str, card_class: CardClass) -> Self:
        return cls(word=word.lower(), card_class=card_class)
