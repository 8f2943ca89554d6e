"""Field validation — normalizers, short-circuiting rule chains, form validity.

Usage::

    from loginkit.validation import create_login_validator

    validator = create_login_validator()
    result = validator.validate_field("age", "1a8")
    # result.value == "18", result.error is None

    result = validator.validate_field("fullName", "John")
    # result.error == "Informe nome e sobrenome."
"""

from loginkit.validation.result import ValidationResult
from loginkit.validation.state import FieldState, FormState
from loginkit.validation.rules import Rule, RuleChain
from loginkit.validation.normalizers import Normalizer, digits_only, identity
from loginkit.validation.field import FieldKind, FieldValidator
from loginkit.validation.form import (
    AGE,
    EMAIL,
    FULL_NAME,
    IS_ADMIN,
    PASSWORD,
    FormValidator,
    create_login_validator,
)

__all__ = [
    "AGE",
    "EMAIL",
    "FULL_NAME",
    "IS_ADMIN",
    "PASSWORD",
    "FieldKind",
    "FieldState",
    "FieldValidator",
    "FormState",
    "FormValidator",
    "Normalizer",
    "Rule",
    "RuleChain",
    "ValidationResult",
    "create_login_validator",
    "digits_only",
    "identity",
]
