"""Form configuration.

FormConfig holds the rule thresholds, the email pattern choice and the
screen defaults. Bad values are rejected when the config is built, so a
validator is never created from an invalid config.
"""

from dataclasses import dataclass

from loginkit.errors import ConfigurationError

EMAIL_PATTERNS = ("strict", "permissive")
VARIANTS = ("manual", "schema", "schema-live")
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass(frozen=True, slots=True)
class FormConfig:
    """Login form configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = FormConfig(include_admin=True, email_pattern="permissive")
    """

    # Rules
    email_pattern: str = "strict"  # "strict" (canonical) or "permissive"
    min_age: int = 18
    email_min_length: int = 5
    password_min_length: int = 6

    # Fields
    include_admin: bool = False  # Adds the isAdmin flag (no rules, never affects validity)

    # Screen
    default_variant: str = "manual"
    age_max_input_length: int = 3  # Input hint only; validators assume no bound
    success_message: str = "Login realizado com sucesso!"
    autoescape: bool = True

    # Logging (applied by the CLI; the library never configures handlers)
    log_level: str = "warning"

    def __post_init__(self) -> None:
        if self.email_pattern not in EMAIL_PATTERNS:
            msg = (
                f"Unknown email pattern {self.email_pattern!r}. "
                f"Expected one of: {', '.join(EMAIL_PATTERNS)}"
            )
            raise ConfigurationError(msg)
        if self.default_variant not in VARIANTS:
            msg = (
                f"Unknown variant {self.default_variant!r}. "
                f"Expected one of: {', '.join(VARIANTS)}"
            )
            raise ConfigurationError(msg)
        for name in ("min_age", "email_min_length", "password_min_length", "age_max_input_length"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                msg = f"{name} must be a positive integer, got {value!r}"
                raise ConfigurationError(msg)
        if not self.success_message:
            raise ConfigurationError("success_message must not be empty")
        if self.log_level.lower() not in LOG_LEVELS:
            msg = f"Unknown log level {self.log_level!r}"
            raise ConfigurationError(msg)
