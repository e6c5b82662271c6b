from dataclasses import dataclass

from vocabdeck.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class SplitWord(ValueObject):
    """A word separated from its leading article."""

    word: str
    article: str | None = None
