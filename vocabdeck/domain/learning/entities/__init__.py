from .card import Card
from .unit import Lesson, Unit

__all__ = ["Card", "Lesson", "Unit"]
