"""``loginkit fields`` — list the form's fields and their rule chains."""

import argparse

from loginkit.config import FormConfig
from loginkit.validation import create_login_validator


def run_fields(args: argparse.Namespace, config: FormConfig) -> None:
    validator = create_login_validator(config)
    for name in validator.fields:
        field = validator.field(name)
        rules = ", ".join(field.chain.names) or "-"
        print(f"{name} ({field.kind.value}): {rules}")
