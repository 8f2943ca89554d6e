"""Fixed user-facing error messages (pt-BR).

Messages are stable strings; thresholds that can be configured are
formatted into the message so the text always matches the rule.
"""

FULL_NAME_REQUIRED = "Informe nome e sobrenome."
FULL_NAME_LETTERS_ONLY = "Apenas letras (sem números)."

AGE_REQUIRED = "Informe sua idade."
AGE_INVALID = "Idade inválida."

EMAIL_INVALID = "Email inválido."


def age_minimum(years: int) -> str:
    return f"Idade mínima: {years} anos."


def email_min_length(n: int) -> str:
    return f"Mínimo de {n} caracteres."


def password_min_length(n: int) -> str:
    return f"Senha precisa de {n}+ caracteres."
