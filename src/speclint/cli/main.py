"""CLI entrypoint for Speclint."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from speclint import __version__
from speclint.config import find_config, load_config, validate_config_file
from speclint.constants.branding import CLI_DESCRIPTION
from speclint.exceptions import ConfigError, SpeclintError
from speclint.exceptions.validation import format_errors
from speclint.lint import lint_file
from speclint.model import Problem
from speclint.reporting import render_problems, render_problems_json, render_unused

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="speclint",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lint = subparsers.add_parser("lint", help="Lint OpenAPI 2/3 definitions")
    lint.add_argument("entrypoints", type=Path, nargs="+", help="API definition files to lint")
    lint.add_argument("-c", "--config", type=Path, help="Explicit config file")
    lint.add_argument(
        "--extends",
        action="append",
        default=None,
        help="Preset to extend instead of the config's `extends` (repeat for multiple presets)",
    )
    lint.add_argument("--skip-rule", action="append", default=[], help="Turn a rule off for this run")
    lint.add_argument(
        "--skip-preprocessor",
        action="append",
        default=[],
        help="Turn a preprocessor off for this run",
    )
    lint.add_argument("--skip-decorator", action="append", default=[], help="Turn a decorator off for this run")
    lint.add_argument(
        "--generate-ignore-file",
        action="store_true",
        help="Record every current problem in the ignore file instead of reporting it",
    )
    lint.add_argument("--format", choices=["stylish", "json"], default="stylish", help="Output format")
    lint.add_argument("--no-color", action="store_true", help="Disable colored output")
    lint.add_argument("-v", "--verbose", action="store_true", help="Report configured rules that never ran")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without linting")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return _handle_validate_config(args)

    if args.command != "lint":
        parser.error(f"Unsupported command: {args.command}")

    config_path = args.config or find_config()
    if config_path is not None:
        validation_errors = validate_config_file(config_path, config_explicit=args.config is not None)
        if validation_errors:
            print(format_errors(validation_errors), file=sys.stderr)
            return 2

    try:
        config = load_config(config_path, args.extends).lint
        config.skip_rules(args.skip_rule)
        config.skip_preprocessors(args.skip_preprocessor)
        config.skip_decorators(args.skip_decorator)

        problems: list[Problem] = []
        for entrypoint in args.entrypoints:
            problems.extend(lint_file(entrypoint, config))
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except SpeclintError as exc:
        print(f"Lint error: {exc}", file=sys.stderr)
        return 1

    if args.generate_ignore_file:
        for problem in problems:
            config.add_ignore(problem)
        saved = config.save_ignore()
        print(f"Generated ignore file with {len(problems)} problems: {saved}")
        return 0

    if args.format == "json":
        print(render_problems_json(problems))
    else:
        use_color = not args.no_color and sys.stdout.isatty()
        print(render_problems(problems, color=use_color))

    if args.verbose:
        unused = render_unused(config.get_unused_rules())
        if unused:
            print(unused, file=sys.stderr)

    has_errors = any(problem.severity == "error" and not problem.ignored for problem in problems)
    return 1 if has_errors else 0


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    config_path = args.config or find_config()
    if config_path is None:
        print("No config file found; defaults apply.")
        return 0

    errors = validate_config_file(config_path, config_explicit=args.config is not None)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    try:
        load_config(config_path)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    print(f"Config is valid: {config_path}")
    return 0
