"""
Unit and Lesson entities - the grouping hierarchy cards are filed under.

Cards only reference units and lessons by id. Removing a unit or lesson
leaves its cards in place.
"""

from dataclasses import dataclass, field

from vocabdeck.domain.common.entity import Entity
from vocabdeck.domain.common.exceptions import DomainError, EntityNotFoundError
from vocabdeck.domain.common.value_objects import LessonId, UnitId


def _clean_name(name: str, kind: str) -> str:
    if not name or not name.strip():
        raise DomainError(f"{kind} name cannot be empty")
    return name.strip()


@dataclass
class Lesson(Entity[LessonId]):
    id: LessonId
    name: str


@dataclass
class Unit(Entity[UnitId]):
    """
    A named group of lessons.

    Business Rules:
    - Unit and lesson names cannot be empty
    - Lesson ids are unique within the unit
    """

    id: UnitId
    name: str
    lessons: list[Lesson] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.name = _clean_name(self.name, "Unit")

    @property
    def lesson_ids(self) -> list[LessonId]:
        return [lesson.id for lesson in self.lessons]

    def rename(self, name: str) -> None:
        """
        Rename the unit.

        Raises:
            DomainError: If name is empty
        """
        self.name = _clean_name(name, "Unit")

    def find_lesson(self, lesson_id: LessonId) -> Lesson | None:
        return next((lesson for lesson in self.lessons if lesson.id == lesson_id), None)

    def add_lesson(self, name: str) -> Lesson:
        """
        Append a new lesson to the unit.

        Raises:
            DomainError: If name is empty
        """
        lesson = Lesson(id=LessonId.generate(), name=_clean_name(name, "Lesson"))
        self.lessons.append(lesson)
        return lesson

    def rename_lesson(self, lesson_id: LessonId, name: str) -> Lesson:
        """
        Rename one of the unit's lessons.

        Raises:
            EntityNotFoundError: If the lesson is not part of this unit
            DomainError: If name is empty
        """
        lesson = self.find_lesson(lesson_id)
        if lesson is None:
            raise EntityNotFoundError("Lesson", lesson_id)
        lesson.name = _clean_name(name, "Lesson")
        return lesson

    def remove_lesson(self, lesson_id: LessonId) -> Lesson:
        """
        Remove one of the unit's lessons.

        Raises:
            EntityNotFoundError: If the lesson is not part of this unit
        """
        lesson = self.find_lesson(lesson_id)
        if lesson is None:
            raise EntityNotFoundError("Lesson", lesson_id)
        self.lessons.remove(lesson)
        return lesson

    @classmethod
    def create(cls, name: str) -> "Unit":
        """Create a new, empty unit."""
        return cls(id=UnitId.generate(), name=name)
