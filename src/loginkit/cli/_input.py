"""Shared CLI helpers: build config from flags, parse and apply field=value pairs."""

import argparse
import sys

from loginkit.adapters import FormBinding
from loginkit.config import FormConfig
from loginkit.errors import LoginKitError

_TRUE = ("1", "true", "yes", "on")


def config_from_args(args: argparse.Namespace) -> FormConfig:
    """Build the config from CLI flags; unset flags keep ``FormConfig`` defaults."""
    overrides: dict[str, str] = {}
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return FormConfig(
        email_pattern=args.email_pattern,
        include_admin=args.admin,
        default_variant=args.variant,
        **overrides,
    )


def parse_pairs(pairs: list[str]) -> list[tuple[str, str]]:
    """Split ``field=value`` arguments; exits with code 2 on a malformed pair."""
    parsed: list[tuple[str, str]] = []
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            print(f"Error: expected field=value, got {pair!r}", file=sys.stderr)
            raise SystemExit(2)
        parsed.append((name, value))
    return parsed


def apply_pairs(form: FormBinding, pairs: list[tuple[str, str]]) -> None:
    """Feed pairs to the form in order, as change events (flags are toggled on)."""
    try:
        for name, value in pairs:
            if form.validator.field(name).is_flag:
                if (value.lower() in _TRUE) != form.state[name].value:
                    form.toggle(name)
            else:
                form.change(name, value)
    except LoginKitError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
