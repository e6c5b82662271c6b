"""Use case for managing units and their lessons."""

import structlog

from vocabdeck.application.learning.protocols.unit_repository import UnitRepositoryProtocol
from vocabdeck.application.learning.services.card_store import CardStore
from vocabdeck.domain.common.exceptions import EntityNotFoundError
from vocabdeck.domain.common.value_objects import LessonId, UnitId
from vocabdeck.domain.learning.entities.unit import Lesson, Unit
from vocabdeck.exceptions import LessonNotFoundError, UnitNotFoundError

logger = structlog.get_logger(__name__)


class UnitManagementUseCase:
    """
    Use case for the unit/lesson hierarchy.

    Cards are never deleted here; removing a unit or lesson leaves its cards
    orphaned in the collection.
    """

    def __init__(self, unit_repository: UnitRepositoryProtocol, card_store: CardStore) -> None:
        """Initialize use case with the unit repository and the card store."""
        self.unit_repository = unit_repository
        self.card_store = card_store

    def _get_unit(self, unit_id: str) -> Unit:
        unit = self.unit_repository.find_by_id(UnitId(unit_id))
        if unit is None:
            raise UnitNotFoundError(unit_id)
        return unit

    def list_units(self) -> list[Unit]:
        return self.unit_repository.find_all()

    def create_unit(self, name: str) -> Unit:
        """
        Create a new empty unit.

        Raises:
            DomainError: If name is empty
        """
        unit = self.unit_repository.save(Unit.create(name))
        logger.info("unit_created", unit_id=unit.id.value)
        return unit

    def rename_unit(self, unit_id: str, name: str) -> Unit:
        """
        Rename a unit.

        Raises:
            UnitNotFoundError: If the unit does not exist
            DomainError: If name is empty
        """
        unit = self._get_unit(unit_id)
        unit.rename(name)
        return self.unit_repository.save(unit)

    def delete_unit(self, unit_id: str) -> None:
        """
        Delete a unit with all its lessons.

        Raises:
            UnitNotFoundError: If the unit does not exist
        """
        unit = self._get_unit(unit_id)
        orphaned = self.card_store.count_orphans(unit.lesson_ids)
        self.unit_repository.delete(unit.id)
        if orphaned:
            logger.warning("unit_deleted_with_cards", unit_id=unit_id, orphaned_cards=orphaned)
        else:
            logger.info("unit_deleted", unit_id=unit_id)

    def add_lesson(self, unit_id: str, name: str) -> Lesson:
        """
        Add a lesson to a unit.

        Raises:
            UnitNotFoundError: If the unit does not exist
            DomainError: If name is empty
        """
        unit = self._get_unit(unit_id)
        lesson = unit.add_lesson(name)
        self.unit_repository.save(unit)
        logger.info("lesson_created", unit_id=unit_id, lesson_id=lesson.id.value)
        return lesson

    def rename_lesson(self, unit_id: str, lesson_id: str, name: str) -> Lesson:
        """
        Rename a lesson.

        Raises:
            UnitNotFoundError: If the unit does not exist
            LessonNotFoundError: If the lesson is not part of the unit
            DomainError: If name is empty
        """
        unit = self._get_unit(unit_id)
        try:
            lesson = unit.rename_lesson(LessonId(lesson_id), name)
        except EntityNotFoundError as e:
            raise LessonNotFoundError(lesson_id, unit_id) from e
        self.unit_repository.save(unit)
        return lesson

    def delete_lesson(self, unit_id: str, lesson_id: str) -> None:
        """
        Delete a lesson from a unit.

        Raises:
            UnitNotFoundError: If the unit does not exist
            LessonNotFoundError: If the lesson is not part of the unit
        """
        unit = self._get_unit(unit_id)
        try:
            lesson = unit.remove_lesson(LessonId(lesson_id))
        except EntityNotFoundError as e:
            raise LessonNotFoundError(lesson_id, unit_id) from e
        self.unit_repository.save(unit)

        orphaned = self.card_store.count_orphans([lesson.id])
        if orphaned:
            logger.warning(
                "lesson_deleted_with_cards",
                unit_id=unit_id,
                lesson_id=lesson_id,
                orphaned_cards=orphaned,
            )
        else:
            logger.info("lesson_deleted", unit_id=unit_id, lesson_id=lesson_id)
