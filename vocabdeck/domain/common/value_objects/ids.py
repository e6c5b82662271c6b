from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class CardId(EntityId):
    """Strongly-typed card identifier."""

    prefix = "card"


@dataclass(frozen=True)
class UnitId(EntityId):
    """Strongly-typed unit identifier."""

    prefix = "u"


@dataclass(frozen=True)
class LessonId(EntityId):
    """Strongly-typed lesson identifier."""

    prefix = "l"
