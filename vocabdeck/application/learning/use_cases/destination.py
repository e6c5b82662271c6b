"""Shared lookup of the unit/lesson new cards are filed under."""

from vocabdeck.application.learning.protocols.unit_repository import UnitRepositoryProtocol
from vocabdeck.domain.common.value_objects import LessonId, UnitId
from vocabdeck.domain.learning.entities.unit import Lesson, Unit
from vocabdeck.exceptions import LessonNotFoundError, UnitNotFoundError


def resolve_destination(
    unit_repository: UnitRepositoryProtocol, unit_id: str, lesson_id: str
) -> tuple[Unit, Lesson]:
    """
    Look up a destination unit and lesson.

    Raises:
        UnitNotFoundError: If the unit does not exist
        LessonNotFoundError: If the lesson is not part of the unit
    """
    unit = unit_repository.find_by_id(UnitId(unit_id))
    if unit is None:
        raise UnitNotFoundError(unit_id)

    lesson = unit.find_lesson(LessonId(lesson_id))
    if lesson is None:
        raise LessonNotFoundError(lesson_id, unit_id)

    return unit, lesson
