"""Form adapters — bind the shared validator to a UI style.

Variants::

    manual       ManualForm: change handlers call the validator directly
    schema       SchemaForm: pydantic schema, validated on mount, errors shown once touched
    schema-live  SchemaForm: pydantic schema, awaitable triggers, errors shown eagerly
"""

from loginkit.adapters.manual import ManualForm
from loginkit.adapters.protocol import FormBinding
from loginkit.adapters.schema import SchemaForm, compile_schema, schema_errors
from loginkit.config import VARIANTS
from loginkit.errors import ConfigurationError
from loginkit.validation import FormValidator

__all__ = [
    "FormBinding",
    "ManualForm",
    "SchemaForm",
    "compile_schema",
    "create_binding",
    "schema_errors",
]


def create_binding(variant: str, validator: FormValidator) -> FormBinding:
    """Create the adapter for a named variant.

    Raises:
        ConfigurationError: If *variant* is not one of ``VARIANTS``.
    """
    if variant == "manual":
        return ManualForm(validator)
    if variant == "schema":
        return SchemaForm(validator, validate_on_mount=True)
    if variant == "schema-live":
        return SchemaForm(validator, eager_errors=True)
    msg = f"Unknown variant {variant!r}. Expected one of: {', '.join(VARIANTS)}"
    raise ConfigurationError(msg)
