"""In-memory unit repository."""

from copy import deepcopy

from vocabdeck.domain.common.value_objects import LessonId, UnitId
from vocabdeck.domain.learning.entities.unit import Lesson, Unit

# Starter hierarchy shown on a fresh install
DEFAULT_UNITS: tuple[tuple[str, str, tuple[tuple[str, str], ...]], ...] = (
    ("u1", "Unit 1: Basics", (("l1_1", "Greetings"), ("l1_2", "Numbers"))),
    ("u2", "Unit 2: Travel", (("l2_1", "Airport"), ("l2_2", "Hotel"), ("l2_3", "Directions"))),
    ("u3", "Unit 3: Business", (("l3_1", "Meetings"),)),
    ("u4", "Unit 4: Literature", ()),
)


def _default_units() -> list[Unit]:
    return [
        Unit(
            id=UnitId(unit_id),
            name=name,
            lessons=[Lesson(id=LessonId(lid), name=lname) for lid, lname in lessons],
        )
        for unit_id, name, lessons in DEFAULT_UNITS
    ]


class InMemoryUnitRepository:
    """Keeps units in insertion order; hands out copies so callers save explicitly."""

    def __init__(self, seed_defaults: bool = False) -> None:
        self._units: dict[UnitId, Unit] = {}
        if seed_defaults:
            for unit in _default_units():
                self._units[unit.id] = unit

    def find_all(self) -> list[Unit]:
        return [deepcopy(unit) for unit in self._units.values()]

    def find_by_id(self, unit_id: UnitId) -> Unit | None:
        unit = self._units.get(unit_id)
        return deepcopy(unit) if unit else None

    def save(self, unit: Unit) -> Unit:
        self._units[unit.id] = deepcopy(unit)
        return unit

    def delete(self, unit_id: UnitId) -> bool:
        return self._units.pop(unit_id, None) is not None
