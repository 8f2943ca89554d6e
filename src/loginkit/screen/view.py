"""Screen view models — what the template reads.

Views are frozen snapshots built from the current form state; the
template never touches the form itself.
"""

from dataclasses import dataclass

from loginkit.validation import AGE, EMAIL, FULL_NAME, IS_ADMIN, PASSWORD


@dataclass(frozen=True, slots=True)
class FieldMeta:
    """Static presentation hints for one field."""

    label: str
    placeholder: str = ""
    input_type: str = "text"
    autocapitalize: str = "none"
    input_mode: str = ""


FIELD_META: dict[str, FieldMeta] = {
    FULL_NAME: FieldMeta("Nome completo", "Nome e sobrenome", autocapitalize="words"),
    AGE: FieldMeta("Idade", "Ex.: 20", input_mode="numeric"),
    EMAIL: FieldMeta("Email", "email@exemplo.com", input_type="email"),
    PASSWORD: FieldMeta("Senha", "sua senha", input_type="password"),
    IS_ADMIN: FieldMeta("Administrador", input_type="checkbox"),
}

VARIANT_TITLES: dict[str, str] = {
    "manual": "Acesse sua conta",
    "schema": "Acesse sua conta (esquema declarativo)",
    "schema-live": "Acesse sua conta (esquema com validação ao vivo)",
}

VARIANT_SWITCH_LABELS: dict[str, str] = {
    "manual": "Usar formulário manual",
    "schema": "Usar esquema declarativo",
    "schema-live": "Usar esquema com validação ao vivo",
}


@dataclass(frozen=True, slots=True)
class Toast:
    """A transient notification (``kind`` is ``"success"`` or ``"error"``)."""

    kind: str
    text: str


@dataclass(frozen=True, slots=True)
class FieldView:
    name: str
    label: str
    placeholder: str
    input_type: str
    autocapitalize: str
    input_mode: str
    value: str | bool
    error: str | None = None
    max_length: int | None = None

    @property
    def is_checkbox(self) -> bool:
        return self.input_type == "checkbox"


@dataclass(frozen=True, slots=True)
class SwitchView:
    variant: str
    label: str


@dataclass(frozen=True, slots=True)
class ScreenView:
    """Everything the login template needs for one render."""

    variant: str
    title: str
    fields: tuple[FieldView, ...]
    switches: tuple[SwitchView, ...]
    submit_enabled: bool
    toasts: tuple[Toast, ...] = ()

    def field(self, name: str) -> FieldView:
        for view in self.fields:
            if view.name == name:
                return view
        raise KeyError(name)
