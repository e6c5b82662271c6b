"""Protocol for Unit repository in learning context."""

from typing import Protocol

from vocabdeck.domain.common.value_objects import UnitId
from vocabdeck.domain.learning.entities.unit import Unit


class UnitRepositoryProtocol(Protocol):
    """Protocol for Unit repository operations in learning context."""

    def find_all(self) -> list[Unit]:
        """Get all units in creation order."""
        ...

    def find_by_id(self, unit_id: UnitId) -> Unit | None:
        """
        Find a unit by ID.

        Args:
            unit_id: The unit ID

        Returns:
            Unit entity if found, None otherwise
        """
        ...

    def save(self, unit: Unit) -> Unit:
        """
        Save a unit entity (create or update).

        Args:
            unit: The unit entity to save

        Returns:
            Saved unit entity
        """
        ...

    def delete(self, unit_id: UnitId) -> bool:
        """
        Delete a unit.

        Args:
            unit_id: The unit ID

        Returns:
            True if deleted, False if not found
        """
        ...
