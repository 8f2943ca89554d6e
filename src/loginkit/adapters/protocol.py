"""Form binding protocol — what the screen needs from an adapter.

A binding is any object matching the shape below. No base class
required. Both the imperative ``ManualForm`` and the declarative
``SchemaForm`` satisfy it, and for the same ordered input events they
produce the same ``{value, error}`` per field and the same validity.
"""

from typing import Protocol

from loginkit.validation import FormState, FormValidator


class FormBinding(Protocol):
    """Protocol for login form adapters."""

    validator: FormValidator
    eager_errors: bool

    @property
    def state(self) -> FormState: ...

    @property
    def is_valid(self) -> bool: ...

    def change(self, field: str, raw: str) -> None: ...

    async def trigger(self, field: str, raw: str) -> None: ...

    def blur(self, field: str) -> None: ...

    def toggle(self, field: str) -> None: ...

    def reset(self) -> None: ...
