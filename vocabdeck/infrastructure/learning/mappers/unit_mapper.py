"""Mapper for Unit domain ↔ response conversion."""

from vocabdeck.domain.learning.entities.unit import Lesson, Unit
from vocabdeck.infrastructure.learning.schemas.unit_schemas import LessonResponse, UnitResponse


class UnitMapper:
    def to_lesson_response(self, lesson: Lesson) -> LessonResponse:
        return LessonResponse(id=lesson.id.value, name=lesson.name)

    def to_response(self, unit: Unit) -> UnitResponse:
        return UnitResponse(
            id=unit.id.value,
            name=unit.name,
            lessons=[self.to_lesson_response(lesson) for lesson in unit.lessons],
        )
