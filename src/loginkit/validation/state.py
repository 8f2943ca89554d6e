"""Form state — an immutable snapshot of every field's value, error and touch flag.

Adapters never mutate a ``FormState``; each event produces a new one::

    state = state.apply(validator.validate_field("age", "1a8")).touch("age")

``touched`` only decides whether an error is *shown*. Validity is
computed from ``value`` and ``error`` alone.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace

from loginkit.errors import UnknownFieldError
from loginkit.validation.result import ValidationResult


@dataclass(frozen=True, slots=True)
class FieldState:
    """Current value, error and touch flag for one field."""

    value: str | bool = ""
    error: str | None = None
    touched: bool = False


class FormState(Mapping[str, FieldState]):
    """Immutable mapping of field name to ``FieldState``.

    Field order is the order the form declares its fields.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, FieldState]) -> None:
        object.__setattr__(self, "_fields", dict(fields))

    def __setattr__(self, name: str, value: object) -> None:
        msg = "FormState is immutable; use apply(), touch() or toggle()"
        raise AttributeError(msg)

    @classmethod
    def initial(cls, defaults: Mapping[str, str | bool]) -> FormState:
        """Create a pristine state: default values, no errors, nothing touched."""
        return cls({name: FieldState(value=value) for name, value in defaults.items()})

    def __getitem__(self, key: str) -> FieldState:
        try:
            return self._fields[key]
        except KeyError:
            raise UnknownFieldError(key, tuple(self._fields)) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FormState):
            return self._fields == other._fields
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._fields.items()))

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self._fields.items())
        return f"FormState({{{items}}})"

    def _replace(self, name: str, **changes: object) -> FormState:
        current = self[name]
        fields = dict(self._fields)
        fields[name] = replace(current, **changes)
        return FormState(fields)

    def apply(self, result: ValidationResult) -> FormState:
        """Overwrite one field's value and error with a validation result."""
        return self._replace(result.field, value=result.value, error=result.error)

    def touch(self, name: str) -> FormState:
        if self[name].touched:
            return self
        return self._replace(name, touched=True)

    def toggle(self, name: str) -> FormState:
        """Flip a boolean flag field."""
        current = self[name]
        if not isinstance(current.value, bool):
            msg = f"Field {name!r} is not a flag"
            raise TypeError(msg)
        return self._replace(name, value=not current.value, touched=True)

    def data(self) -> dict[str, str | bool]:
        """Submitted data: every field's current (normalized) value."""
        return {name: fs.value for name, fs in self._fields.items()}

    def errors(self) -> dict[str, str]:
        """Fields currently carrying an error, mapped to the message."""
        return {name: fs.error for name, fs in self._fields.items() if fs.error is not None}

    def visible_error(self, name: str, *, eager: bool = False) -> str | None:
        """The error the UI should display for *name*.

        Errors are hidden until the field is touched unless *eager* is set
        (variants that show errors as soon as they exist).
        """
        fs = self[name]
        if eager or fs.touched:
            return fs.error
        return None
