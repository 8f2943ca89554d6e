"""Validation result — immutable outcome of validating one field."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating one field's raw input.

    ``value`` is the *normalized* value (``"18"`` for raw ``"1a8"``), or
    the flag itself for boolean fields. ``error`` is None iff every rule
    in the field's chain passed.

    The result is falsy when invalid, so you can write::

        result = validator.validate_field("email", text)
        if not result:
            show(result.error)
    """

    field: str
    value: str | bool
    error: str | None = None

    @property
    def is_valid(self) -> bool:
        """True if every rule passed."""
        return self.error is None

    def __bool__(self) -> bool:
        """Truthy iff the field passed."""
        return self.is_valid
