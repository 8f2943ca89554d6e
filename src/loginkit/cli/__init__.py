"""loginkit CLI — validate input, list fields and render the login screen.

Entry point registered as ``loginkit`` in ``pyproject.toml``::

    [project.scripts]
    loginkit = "loginkit.cli:main"
"""

import argparse
import logging
import sys

from loginkit.config import EMAIL_PATTERNS, LOG_LEVELS, VARIANTS


def _add_form_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--variant",
        choices=VARIANTS,
        default="manual",
        help="Form adapter to run the input through",
    )
    parser.add_argument(
        "--email-pattern",
        choices=EMAIL_PATTERNS,
        default="strict",
        help="Email shape check (strict is canonical)",
    )
    parser.add_argument(
        "--admin",
        action="store_true",
        help="Include the isAdmin flag field",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``loginkit`` command."""
    parser = argparse.ArgumentParser(
        prog="loginkit",
        description="loginkit — login form validation with interchangeable adapters.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Logging level (default: FormConfig.log_level)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- loginkit validate ------------------------------------------------
    validate_parser = subparsers.add_parser("validate", help="Validate field=value pairs")
    validate_parser.add_argument(
        "pairs",
        nargs="*",
        metavar="field=value",
        help="Field input, applied in order (e.g. age=1a8)",
    )
    validate_parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    _add_form_options(validate_parser)

    # -- loginkit fields --------------------------------------------------
    fields_parser = subparsers.add_parser("fields", help="List fields and their rules")
    _add_form_options(fields_parser)

    # -- loginkit render --------------------------------------------------
    render_parser = subparsers.add_parser("render", help="Render the login screen as HTML")
    render_parser.add_argument(
        "pairs",
        nargs="*",
        metavar="field=value",
        help="Field input to pre-fill before rendering",
    )
    _add_form_options(render_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from loginkit.cli._input import config_from_args

    config = config_from_args(args)
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "validate":
        from loginkit.cli._validate import run_validate

        run_validate(args, config)
    elif args.command == "fields":
        from loginkit.cli._fields import run_fields

        run_fields(args, config)
    elif args.command == "render":
        from loginkit.cli._render import run_render

        run_render(args, config)
