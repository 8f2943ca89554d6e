"""loginkit — login form validation with interchangeable form adapters.

One rule set, three ways to bind it:

- ``manual``: change handlers call the validator directly
- ``schema``: the rules compiled into a pydantic model, validated on mount
- ``schema-live``: the same model behind awaitable, last-write-wins triggers

Basic usage::

    from loginkit import LoginScreen

    screen = LoginScreen()
    screen.change("fullName", "Maria Silva")
    screen.change("age", "27")
    screen.change("email", "maria@example.com")
    screen.change("password", "s3gredo")
    screen.submit()  # True; screen.drain() holds the success toast
"""

from loginkit.adapters import ManualForm, SchemaForm, create_binding
from loginkit.config import FormConfig
from loginkit.errors import (
    ConfigurationError,
    LoginKitError,
    SchemaCompileError,
    UnknownFieldError,
)
from loginkit.screen import LoginScreen, Toast
from loginkit.validation import (
    FieldState,
    FormState,
    FormValidator,
    ValidationResult,
    create_login_validator,
)

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "FieldState",
    "FormConfig",
    "FormState",
    "FormValidator",
    "LoginKitError",
    "LoginScreen",
    "ManualForm",
    "SchemaCompileError",
    "SchemaForm",
    "Toast",
    "UnknownFieldError",
    "ValidationResult",
    "create_binding",
    "create_login_validator",
]
