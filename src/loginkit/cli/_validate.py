"""``loginkit validate`` — run field=value pairs through a form adapter.

Every required field is validated, including those not given on the
command line (they validate as empty). Exits with code 1 if the form
is invalid.
"""

import argparse
import json

from loginkit.adapters import create_binding
from loginkit.cli._input import apply_pairs, parse_pairs
from loginkit.config import FormConfig
from loginkit.validation import FieldKind, create_login_validator


def run_validate(args: argparse.Namespace, config: FormConfig) -> None:
    validator = create_login_validator(config)
    form = create_binding(args.variant, validator)

    pairs = parse_pairs(args.pairs)
    given = {name for name, _ in pairs}
    missing = [(name, "") for name in validator.required_fields if name not in given]
    apply_pairs(form, pairs + missing)

    state = form.state
    valid = form.is_valid
    if args.json:
        values = state.data()
        for name in validator.fields:
            if validator.field(name).kind is FieldKind.SECRET:
                values[name] = "*" * len(str(values[name]))
        print(json.dumps(
            {"valid": valid, "values": values, "errors": state.errors()},
            ensure_ascii=False,
            indent=2,
        ))
    else:
        width = max(len(name) for name in validator.fields)
        for name in validator.fields:
            error = state[name].error
            print(f"{name:<{width}}  {error or 'ok'}")

    if not valid:
        raise SystemExit(1)
