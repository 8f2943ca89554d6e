"""Form validator — one ``FieldValidator`` per field, no cross-field rules.

Usage::

    from loginkit.validation import create_login_validator

    validator = create_login_validator()
    state = validator.initial_state()
    state = state.apply(validator.validate_field("email", "user@example.com"))
    validator.is_form_valid(state)  # False until every field is filled in
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from loginkit.config import FormConfig
from loginkit.errors import ConfigurationError, UnknownFieldError
from loginkit.validation import rules
from loginkit.validation.field import FieldKind, FieldValidator
from loginkit.validation.normalizers import digits_only
from loginkit.validation.result import ValidationResult
from loginkit.validation.state import FieldState, FormState

FULL_NAME = "fullName"
AGE = "age"
EMAIL = "email"
PASSWORD = "password"
IS_ADMIN = "isAdmin"


class FormValidator:
    """Aggregates field validators. Holds no mutable state."""

    __slots__ = ("_validators",)

    def __init__(self, validators: Iterable[FieldValidator]) -> None:
        by_name: dict[str, FieldValidator] = {}
        for validator in validators:
            if validator.name in by_name:
                msg = f"Duplicate field name: {validator.name!r}"
                raise ConfigurationError(msg)
            by_name[validator.name] = validator
        if not by_name:
            raise ConfigurationError("A form needs at least one field")
        self._validators = by_name

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self._validators)

    @property
    def required_fields(self) -> tuple[str, ...]:
        """Fields that must be non-empty for the form to be valid (all but flags)."""
        return tuple(name for name, v in self._validators.items() if not v.is_flag)

    def field(self, name: str) -> FieldValidator:
        try:
            return self._validators[name]
        except KeyError:
            raise UnknownFieldError(name, self.fields) from None

    def defaults(self) -> dict[str, str | bool]:
        return {name: v.default for name, v in self._validators.items()}

    def initial_state(self) -> FormState:
        return FormState.initial(self.defaults())

    def validate_field(self, field: str, raw: str | bool) -> ValidationResult:
        """Validate one field. The caller applies the result to its state."""
        return self.field(field).validate(raw)

    def validate_all(self, values: Mapping[str, str | bool]) -> dict[str, ValidationResult]:
        """Validate every known field independently.

        Missing keys validate the field's empty default; unknown keys
        raise ``UnknownFieldError``.
        """
        for name in values:
            if name not in self._validators:
                raise UnknownFieldError(name, self.fields)
        return {
            name: v.validate(values.get(name, v.default))
            for name, v in self._validators.items()
        }

    def is_form_valid(self, state: Mapping[str, FieldState]) -> bool:
        """True iff every required field is non-empty and no field carries an error.

        Recomputed on every call. Flag fields are vacuously filled.
        """
        for name, validator in self._validators.items():
            fs = state[name]
            if fs.error is not None:
                return False
            if not validator.is_flag and not fs.value:
                return False
        return True

    def __repr__(self) -> str:
        return f"FormValidator({', '.join(self.fields)})"


def create_login_validator(config: FormConfig | None = None) -> FormValidator:
    """Build the canonical login form validator.

    Fields, in display order: ``fullName``, ``age``, ``email``,
    ``password`` and, when ``config.include_admin`` is set, ``isAdmin``.
    """
    config = config or FormConfig()
    validators = [
        FieldValidator(FULL_NAME, FieldKind.TEXT, rules.full_name_chain()),
        FieldValidator(AGE, FieldKind.NUMERIC, rules.age_chain(config.min_age), digits_only),
        FieldValidator(
            EMAIL,
            FieldKind.EMAIL,
            rules.email_chain(config.email_min_length, config.email_pattern),
        ),
        FieldValidator(PASSWORD, FieldKind.SECRET, rules.password_chain(config.password_min_length)),
    ]
    if config.include_admin:
        validators.append(FieldValidator(IS_ADMIN, FieldKind.FLAG))
    return FormValidator(validators)
