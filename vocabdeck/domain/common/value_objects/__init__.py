"""Common value objects shared across all domain modules."""

from .ids import CardId, LessonId, UnitId

__all__ = [
    # IDs
    "CardId",
    "LessonId",
    "UnitId",
]
