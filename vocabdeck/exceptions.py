"""Custom exception hierarchy for the vocabdeck application."""


class VocabdeckError(Exception):
    """Base exception for all vocabdeck errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(VocabdeckError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class UnitNotFoundError(NotFoundError):
    """Unit not found error."""

    def __init__(self, unit_id: str | None = None, *, message: str | None = None) -> None:
        """Initialize with unit ID or custom message."""
        self.unit_id = unit_id
        if message:
            super().__init__(message)
        elif unit_id is not None:
            super().__init__(f"Unit with id {unit_id} not found")
        else:
            super().__init__("Unit not found")


class LessonNotFoundError(NotFoundError):
    """Lesson not found error."""

    def __init__(self, lesson_id: str, unit_id: str | None = None) -> None:
        """Initialize with lesson ID and optionally the unit it was looked up in."""
        self.lesson_id = lesson_id
        self.unit_id = unit_id
        if unit_id is not None:
            super().__init__(f"Lesson with id {lesson_id} not found in unit {unit_id}")
        else:
            super().__init__(f"Lesson with id {lesson_id} not found")


class ValidationError(VocabdeckError):
    """Validation error."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        """Initialize with message and 400 status code by default."""
        super().__init__(message, status_code=status_code)


class ServiceError(VocabdeckError):
    """Service layer error."""


class CardExtractionError(ServiceError):
    """The extraction collaborator failed; nothing was merged."""

    def __init__(self, reason: str) -> None:
        """Initialize with the reason reported by the extractor."""
        self.reason = reason
        super().__init__(f"Card extraction failed: {reason}", status_code=502)
