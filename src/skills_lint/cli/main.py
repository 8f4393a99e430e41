"""CLI entrypoint for skills-lint."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from skills_lint import __version__
from skills_lint.cli.handlers import handle_init, handle_lint, handle_validate_config
from skills_lint.constants.branding import CLI_DESCRIPTION
from skills_lint.constants.config import CONFIG_FILENAME


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser.

    Linting is the default action; ``init`` and ``validate-config`` are
    optional subcommands.
    """
    parser = argparse.ArgumentParser(
        prog="skills-lint",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-f", "--file", default=None, help="Lint a single file instead of using config patterns")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path(CONFIG_FILENAME),
        help=f"Config file path (default: {CONFIG_FILENAME})",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress the ASCII banner (for CI)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show all findings including passing rules")
    parser.add_argument("-n", "--no-cache", action="store_true", help="Disable token cache reads/writes")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument(
        "--json-output",
        type=Path,
        default=None,
        help="Also write the report as JSON to this path",
    )

    subparsers = parser.add_subparsers(dest="command")

    init = subparsers.add_parser("init", help="Create a starter config interactively")
    init.add_argument(
        "-c",
        "--config",
        type=Path,
        default=argparse.SUPPRESS,
        help=f"Config file to write (default: {CONFIG_FILENAME})",
    )
    init.add_argument("-y", "--yes", action="store_true", help="Accept all defaults without prompting")
    init.add_argument("--dry-run", action="store_true", help="Print the generated config without writing it")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without linting")
    validate.add_argument(
        "-c",
        "--config",
        type=Path,
        default=argparse.SUPPRESS,
        help=f"Config file to validate (default: {CONFIG_FILENAME})",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "init":
        return handle_init(args)
    if args.command == "validate-config":
        return handle_validate_config(args)
    if args.command is not None:
        parser.error(f"Unsupported command: {args.command}")

    return handle_lint(args)


if __name__ == "__main__":
    raise SystemExit(main())
