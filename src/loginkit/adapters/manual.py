"""Imperative adapter — change handlers call the validator directly."""

import anyio.lowlevel

from loginkit.adapters.ordering import RequestOrder
from loginkit.validation import FormState, FormValidator, ValidationResult


class ManualForm:
    """Hand-wired form: every change runs ``validate_field`` on the spot.

    Errors appear once a field has been changed or blurred. The state is
    replaced, never mutated, on each event::

        form = ManualForm(create_login_validator())
        form.change("age", "1a8")
        form.state["age"].value  # "18"

    ``trigger()`` requests are ordered per field like ``SchemaForm``'s:
    an older request finishing late never overwrites a newer value.
    """

    __slots__ = ("_order", "_state", "eager_errors", "validator")

    def __init__(self, validator: FormValidator, *, eager_errors: bool = False) -> None:
        self.validator = validator
        self.eager_errors = eager_errors
        self._order = RequestOrder()
        self._state = validator.initial_state()

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def is_valid(self) -> bool:
        return self.validator.is_form_valid(self._state)

    def change(self, field: str, raw: str) -> None:
        result = self.validator.validate_field(field, raw)
        self._commit(self._order.issue(field), result)

    async def validate_async(self, field: str, raw: str) -> ValidationResult:
        await anyio.lowlevel.checkpoint()
        return self.validator.validate_field(field, raw)

    async def trigger(self, field: str, raw: str) -> None:
        """Awaitable form of ``change``; stale results are discarded."""
        self.validator.field(field)
        ticket = self._order.issue(field)
        result = await self.validate_async(field, raw)
        self._commit(ticket, result)

    def blur(self, field: str) -> None:
        self._state = self._state.touch(field)

    def toggle(self, field: str) -> None:
        self._state = self._state.toggle(field)

    def reset(self) -> None:
        """Start a fresh session; results of in-flight triggers are dropped."""
        self._state = self.validator.initial_state()
        self._order.drop_pending()

    def _commit(self, ticket: int, result: ValidationResult) -> None:
        if self._order.accept(result.field, ticket):
            self._state = self._state.apply(result).touch(result.field)
