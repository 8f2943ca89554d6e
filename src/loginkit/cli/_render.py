"""``loginkit render`` — print the login screen HTML for a variant."""

import argparse
import sys

from loginkit.cli._input import apply_pairs, parse_pairs
from loginkit.config import FormConfig
from loginkit.screen import LoginScreen, TemplatingNotInstalledError


def run_render(args: argparse.Namespace, config: FormConfig) -> None:
    screen = LoginScreen(config)
    apply_pairs(screen.form, parse_pairs(args.pairs))
    try:
        print(screen.render())
    except TemplatingNotInstalledError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
