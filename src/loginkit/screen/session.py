"""Login screen — variant switching, submit gate and notifications.

The screen owns one form session at a time. Switching variant or
submitting successfully discards the session and starts a fresh one;
nothing is persisted.

Usage::

    screen = LoginScreen(FormConfig(include_admin=True))
    screen.change("fullName", "Maria Silva")
    ...
    if screen.submit():
        toast = screen.drain()[0]  # Toast("success", "Login realizado com sucesso!")
"""

import logging

from loginkit.adapters import FormBinding, create_binding
from loginkit.config import VARIANTS, FormConfig
from loginkit.screen.view import (
    FIELD_META,
    VARIANT_SWITCH_LABELS,
    VARIANT_TITLES,
    FieldMeta,
    FieldView,
    ScreenView,
    SwitchView,
    Toast,
)
from loginkit.validation import AGE, IS_ADMIN, FormState, create_login_validator

logger = logging.getLogger("loginkit.screen")


class LoginScreen:
    """Presentation layer for the login form.

    Args:
        config: Form configuration; defaults to ``FormConfig()``.
        variant: Initial variant; defaults to ``config.default_variant``.
    """

    def __init__(self, config: FormConfig | None = None, *, variant: str | None = None) -> None:
        self.config = config or FormConfig()
        self.validator = create_login_validator(self.config)
        self._variant = variant or self.config.default_variant
        self.form: FormBinding = create_binding(self._variant, self.validator)
        self._notifications: list[Toast] = []

    @property
    def variant(self) -> str:
        return self._variant

    @property
    def state(self) -> FormState:
        return self.form.state

    @property
    def submit_enabled(self) -> bool:
        return self.form.is_valid

    @property
    def notifications(self) -> tuple[Toast, ...]:
        return tuple(self._notifications)

    def switch(self, variant: str) -> None:
        """Switch to another variant, starting a fresh session."""
        form = create_binding(variant, self.validator)
        self.form = form
        self._variant = variant
        logger.info("switched to %s variant", variant)

    # -- Input events -----------------------------------------------------

    def change(self, field: str, raw: str) -> None:
        self.form.change(field, raw)

    async def trigger(self, field: str, raw: str) -> None:
        await self.form.trigger(field, raw)

    def blur(self, field: str) -> None:
        self.form.blur(field)

    def toggle(self, field: str) -> None:
        self.form.toggle(field)

    # -- Submit -----------------------------------------------------------

    def submit(self) -> bool:
        """Simulate a login. No-op (returns False) while the form is invalid."""
        if not self.form.is_valid:
            logger.debug("submit ignored: form is invalid")
            return False
        data = self.form.state.data()
        self._notifications.append(Toast("success", self.config.success_message))
        logger.info(
            "login submitted via %s variant (admin=%s)",
            self._variant,
            data.get(IS_ADMIN, False),
        )
        self.form.reset()
        return True

    def drain(self) -> list[Toast]:
        """Pop every pending notification."""
        pending, self._notifications = self._notifications, []
        return pending

    # -- Rendering --------------------------------------------------------

    def view(self) -> ScreenView:
        state = self.form.state
        fields = tuple(
            self._field_view(name, FIELD_META.get(name, FieldMeta(name)), state)
            for name in self.validator.fields
        )
        switches = tuple(
            SwitchView(variant, VARIANT_SWITCH_LABELS[variant])
            for variant in VARIANTS
            if variant != self._variant
        )
        return ScreenView(
            variant=self._variant,
            title=VARIANT_TITLES[self._variant],
            fields=fields,
            switches=switches,
            submit_enabled=self.form.is_valid,
            toasts=self.notifications,
        )

    def render(self) -> str:
        """Render the screen to HTML (requires the ``ui`` extra)."""
        from loginkit.screen.renderer import render_screen

        return render_screen(self.view(), autoescape=self.config.autoescape)

    def _field_view(self, name: str, meta: FieldMeta, state: FormState) -> FieldView:
        value = state[name].value
        if meta.input_type == "password":
            # Secrets are never echoed back into markup
            value = ""
        return FieldView(
            name=name,
            label=meta.label,
            placeholder=meta.placeholder,
            input_type=meta.input_type,
            autocapitalize=meta.autocapitalize,
            input_mode=meta.input_mode,
            value=value,
            error=state.visible_error(name, eager=self.form.eager_errors),
            max_length=self.config.age_max_input_length if name == AGE else None,
        )
