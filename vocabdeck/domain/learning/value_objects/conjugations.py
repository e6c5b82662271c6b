"""
Conjugations value object.

Holds the six present-tense forms of a verb in a fixed person order.
Each slot is either a form or None when the form is not known yet.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Self

from vocabdeck.domain.common.exceptions import ValidationError
from vocabdeck.domain.common.value_object import ValueObject

PERSONS: tuple[str, ...] = ("je", "tu", "il/elle", "nous", "vous", "ils/elles")

# Marker older extraction output uses for a form it could not resolve
UNKNOWN_FORM_MARKER = "???"


@dataclass(frozen=True)
class Conjugations(ValueObject):
    """
    The six conjugated forms of a verb.

    Order is first, second, third person singular, then plural.
    """

    forms: tuple[str | None, ...]

    def __post_init__(self) -> None:
        if len(self.forms) != len(PERSONS):
            raise ValidationError(
                f"Conjugations must have exactly {len(PERSONS)} slots",
                field="conjugations",
                value=len(self.forms),
            )

    @classmethod
    def from_slots(cls, slots: Sequence[str | None]) -> Self:
        """
        Build conjugations from loosely filled input slots.

        Strings are stripped; blanks and the unknown marker become None.
        Fewer than six slots are padded with None.

        Raises:
            ValidationError: If more than six slots are given
        """
        if len(slots) > len(PERSONS):
            raise ValidationError(
                f"At most {len(PERSONS)} conjugation slots are allowed",
                field="conjugations",
                value=len(slots),
            )
        forms = [_normalize_form(slot) for slot in slots]
        forms.extend([None] * (len(PERSONS) - len(forms)))
        return cls(tuple(forms))

    @property
    def is_complete(self) -> bool:
        """Whether every person has a known form."""
        return all(form is not None for form in self.forms)

    @property
    def is_empty(self) -> bool:
        """Whether no form is known at all."""
        return all(form is None for form in self.forms)

    @property
    def missing_persons(self) -> list[str]:
        return [person for person, form in zip(PERSONS, self.forms, strict=True) if form is None]

    def to_primitive(self) -> list[str | None]:
        return list(self.forms)


def _normalize_form(slot: str | None) -> str | None:
    if slot is None:
        return None
    form = slot.strip()
    if not form or form == UNKNOWN_FORM_MARKER:
        return None
    return form
