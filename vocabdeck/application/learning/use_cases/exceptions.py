"""Exceptions for learning use cases."""

from vocabdeck.exceptions import ValidationError


class NoSourceFilesError(ValidationError):
    """Extraction was requested without any file."""

    def __init__(self) -> None:
        super().__init__("At least one source file is required")


class NoEligibleQuestionTypesError(ValidationError):
    """None of the requested question types has eligible cards in scope."""

    def __init__(self) -> None:
        super().__init__("No selected question type has eligible cards in the chosen lessons")
