"""Declarative schema adapter — rule chains compiled into a pydantic model.

``compile_schema()`` turns a ``FormValidator`` into a pydantic model
class. Each text field becomes::

    Annotated[str, BeforeValidator(normalizer), AfterValidator(rule_1), ...]

After-validators run left to right and stop at the first failure, so
the schema reports the same first-failing message as the rule chain.
Every rule failure is raised as ``PydanticCustomError(rule.name,
rule.message)``; ``schema_errors()`` maps the pydantic error list back
to ``{field: message}``.

``SchemaForm`` binds the model to a form session. Its ``trigger()`` is
awaitable to fit async UI loops, but validation itself is synchronous.
Requests for one field are ticketed in the order they are made; a
result is applied only if no newer request for that field has already
been applied, so the last-submitted value always wins.
"""

from collections.abc import Mapping
from typing import Annotated, Any

import anyio.lowlevel
from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    ValidationError,
    create_model,
)
from pydantic_core import PydanticCustomError

from loginkit.adapters.ordering import RequestOrder
from loginkit.errors import SchemaCompileError
from loginkit.validation import FormState, FormValidator, Rule, ValidationResult


def _rule_validator(rule: Rule) -> AfterValidator:
    def check(value: str) -> str:
        if not rule.predicate(value):
            raise PydanticCustomError(rule.name, rule.message)
        return value

    return AfterValidator(check)


def compile_schema(validator: FormValidator, *, name: str = "LoginSchema") -> type[BaseModel]:
    """Compile a form's rule chains into a pydantic model class.

    Flag fields become ``bool = False`` with no validators. Every field
    is validated even when missing from the input (``validate_default``),
    and unknown keys are rejected.

    Raises:
        SchemaCompileError: If pydantic cannot build the model.
    """
    definitions: dict[str, Any] = {}
    for field_name in validator.fields:
        field_validator = validator.field(field_name)
        if field_validator.is_flag:
            definitions[field_name] = (bool, False)
            continue
        metadata = [
            BeforeValidator(field_validator.normalizer),
            *(_rule_validator(rule) for rule in field_validator.chain),
        ]
        definitions[field_name] = (Annotated[str, *metadata], "")

    try:
        return create_model(
            name,
            __config__=ConfigDict(extra="forbid", validate_default=True),
            **definitions,
        )
    except (NameError, TypeError, ValueError) as exc:
        msg = f"Cannot compile schema {name!r}: {exc}"
        raise SchemaCompileError(msg) from exc


def schema_errors(model: type[BaseModel], values: Mapping[str, Any]) -> dict[str, str]:
    """Validate *values* against *model* and return ``{field: message}``.

    Only the first error per field is kept. An empty dict means valid.
    """
    try:
        model.model_validate(dict(values))
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for error in exc.errors():
            loc = error["loc"]
            if loc:
                errors.setdefault(str(loc[0]), error["msg"])
        return errors
    return {}


class SchemaForm:
    """Form session backed by a compiled pydantic schema.

    Args:
        validator: The form's validator; its chains are compiled once.
        validate_on_mount: Validate every field when the session starts,
            so errors exist (hidden until touched) before any input.
        eager_errors: Ask the UI to show errors without waiting for touch.
        model: A precompiled schema to reuse instead of compiling.
    """

    __slots__ = (
        "_order",
        "_state",
        "eager_errors",
        "model",
        "validate_on_mount",
        "validator",
    )

    def __init__(
        self,
        validator: FormValidator,
        *,
        validate_on_mount: bool = False,
        eager_errors: bool = False,
        model: type[BaseModel] | None = None,
    ) -> None:
        self.validator = validator
        self.model = model or compile_schema(validator)
        self.validate_on_mount = validate_on_mount
        self.eager_errors = eager_errors
        self._order = RequestOrder()
        self.reset()

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def is_valid(self) -> bool:
        """Required fields filled in, and the schema accepts the current data."""
        if not self.validator.is_form_valid(self._state):
            return False
        return not schema_errors(self.model, self._state.data())

    def reset(self) -> None:
        """Start a fresh session; results of in-flight triggers are dropped."""
        state = self.validator.initial_state()
        if self.validate_on_mount:
            for name, message in schema_errors(self.model, state.data()).items():
                state = state.apply(ValidationResult(name, state[name].value, message))
        self._state = state
        self._order.drop_pending()

    def validate(self, field: str, raw: str) -> ValidationResult:
        """Normalize *raw* and validate it through the schema (no state change)."""
        value = self.validator.field(field).normalize(raw)
        errors = schema_errors(self.model, self._state.data() | {field: value})
        return ValidationResult(field, value, errors.get(field))

    async def validate_async(self, field: str, raw: str) -> ValidationResult:
        await anyio.lowlevel.checkpoint()
        return self.validate(field, raw)

    def change(self, field: str, raw: str) -> None:
        result = self.validate(field, raw)
        self._commit(self._order.issue(field), result)

    async def trigger(self, field: str, raw: str) -> None:
        """Validate a change asynchronously; stale results are discarded."""
        self.validator.field(field)
        ticket = self._order.issue(field)
        result = await self.validate_async(field, raw)
        self._commit(ticket, result)

    def blur(self, field: str) -> None:
        self._state = self._state.touch(field)

    def toggle(self, field: str) -> None:
        self._state = self._state.toggle(field)

    def _commit(self, ticket: int, result: ValidationResult) -> None:
        if self._order.accept(result.field, ticket):
            self._state = self._state.apply(result).touch(result.field)
