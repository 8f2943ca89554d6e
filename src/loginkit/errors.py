"""loginkit exception hierarchy.

Field validation failures are never exceptions: they come back as
``ValidationResult.error`` strings. The types here cover programmer
errors and misconfiguration only.
"""


class LoginKitError(Exception):
    """Base for all loginkit-specific errors."""


class ConfigurationError(LoginKitError):
    """Raised when a ``FormConfig`` or a validator set is invalid.

    Typically raised at construction time, before any input is seen.
    """


class UnknownFieldError(LoginKitError, KeyError):
    """Raised when a field name is not part of the form.

    This is a programming error (a typo in a handler, a stale template),
    not a validation failure, so it fails loudly.
    """

    def __init__(self, field: str, known: tuple[str, ...] = ()) -> None:
        self.field = field
        self.known = known
        detail = f"Unknown field: {field!r}"
        if known:
            detail += f" (known fields: {', '.join(known)})"
        super().__init__(detail)

    def __str__(self) -> str:
        # KeyError.__str__ repr()s its argument; keep the plain message
        return str(self.args[0])


class SchemaCompileError(LoginKitError):
    """Raised when a rule chain cannot be compiled into a schema model."""
