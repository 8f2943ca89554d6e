"""Field validators — a normalizer and a rule chain bound to a field name."""

import logging
from dataclasses import dataclass, field
from enum import Enum

from loginkit.validation.normalizers import Normalizer, identity
from loginkit.validation.result import ValidationResult
from loginkit.validation.rules import RuleChain

logger = logging.getLogger("loginkit.validation")


class FieldKind(Enum):
    """Semantic type of a form field."""

    TEXT = "text"
    NUMERIC = "numeric"
    EMAIL = "email"
    SECRET = "secret"
    FLAG = "flag"


@dataclass(frozen=True, slots=True)
class FieldValidator:
    """Validates one field: normalize, then run the chain.

    Flag fields carry a ``bool`` and have no rules; every other kind
    carries a ``str``. Passing the wrong type is a programming error
    and raises ``TypeError``. Bad *input* never raises.
    """

    name: str
    kind: FieldKind = FieldKind.TEXT
    chain: RuleChain = field(default_factory=RuleChain)
    normalizer: Normalizer = identity

    @property
    def is_flag(self) -> bool:
        return self.kind is FieldKind.FLAG

    @property
    def default(self) -> str | bool:
        """Initial value for a fresh form session."""
        return False if self.is_flag else ""

    def normalize(self, raw: str | bool) -> str | bool:
        if self.is_flag:
            if not isinstance(raw, bool):
                msg = f"Field {self.name!r} expects a bool, got {type(raw).__name__}"
                raise TypeError(msg)
            return raw
        if not isinstance(raw, str):
            msg = f"Field {self.name!r} expects a str, got {type(raw).__name__}"
            raise TypeError(msg)
        return self.normalizer(raw)

    def validate(self, raw: str | bool) -> ValidationResult:
        value = self.normalize(raw)
        if self.is_flag:
            return ValidationResult(self.name, value)
        error = self.chain.evaluate(value)
        # Values are never logged: the form carries a password
        logger.debug("validated %s: %s", self.name, error or "ok")
        return ValidationResult(self.name, value, error)
