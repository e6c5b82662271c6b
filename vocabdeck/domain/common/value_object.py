"""
Base class for Value Objects.

Value Objects are immutable and defined by their attributes rather than by
identity. Subclasses are frozen dataclasses, which supply value equality
and hashing, and validate themselves on construction.

Example:
    @dataclass(frozen=True)
    class Conjugations(ValueObject):
        forms: tuple[str | None, ...]

        def __post_init__(self) -> None:
            if len(self.forms) != 6:
                raise ValidationError("Conjugations must have exactly 6 slots")
"""

from dataclasses import asdict, fields, is_dataclass


class ValueObject:
    """
    Base class for Value Objects in the domain model.

    Subclasses must be decorated with @dataclass(frozen=True) and raise
    ValidationError from __post_init__ when an invariant does not hold.
    """

    def to_primitive(self) -> object:
        """
        Convert to a primitive Python value for serialization.

        Single-field value objects collapse to that field's value; others
        become a dict of their fields.
        """
        if not is_dataclass(self):
            raise TypeError(f"{self.__class__.__name__} must be a dataclass")
        own_fields = fields(self)
        if len(own_fields) == 1:
            return getattr(self, own_fields[0].name)
        return asdict(self)
