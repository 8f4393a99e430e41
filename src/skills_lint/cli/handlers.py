"""CLI subcommand handlers and exit-code evaluation."""

from __future__ import annotations

import argparse
import logging
import sys

from skills_lint.cli.init_flow import (
    ReadFn,
    WriteFn,
    build_init_config,
    build_unified_diff,
    collect_init_draft,
    default_init_draft,
    prompt_yes_no,
    render_init_json,
    update_gitignore,
)
from skills_lint.config import load_config, validate_config_file, validate_config_payload
from skills_lint.constants.config import GITIGNORE_FILENAME, INIT_CONFIG_TEMP_PREFIX, INIT_CONFIG_TEMP_SUFFIX
from skills_lint.constants.scoring import EXIT_ERRORS, EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_PASS, EXIT_WARNINGS
from skills_lint.exceptions import ConfigError, SkillsLintError
from skills_lint.exceptions.validation import format_errors
from skills_lint.io import write_text_atomic
from skills_lint.linter import run
from skills_lint.model import LintReport
from skills_lint.reporting import StdoutReporter, write_json_report

logger = logging.getLogger(__name__)


def exit_code_for(report: LintReport) -> int:
    """Map the worst severity of *report* onto the process exit code."""
    worst = report.worst_severity()
    if worst == "error":
        return EXIT_ERRORS
    if worst == "warning":
        return EXIT_WARNINGS
    return EXIT_PASS


def _print_error(message: object) -> None:
    print(f"error: {message}", file=sys.stderr)


def handle_lint(args: argparse.Namespace) -> int:
    """Load config, lint files, print the report and return the exit code."""
    try:
        config = load_config(args.config)
    except ConfigError as exc:
        _print_error(exc)
        return EXIT_FAILURE

    try:
        files = [args.file] if args.file is not None else None
        report = run(config, files, single_file=files is not None, use_cache=not args.no_cache)
    except SkillsLintError as exc:
        _print_error(exc)
        return EXIT_FAILURE

    use_color = not args.no_color and sys.stdout.isatty()
    reporter = StdoutReporter(report, color=use_color, verbose=args.verbose, show_banner=not args.quiet)
    print(reporter.render())

    if args.json_output is not None:
        try:
            write_json_report(args.json_output, report)
        except OSError as exc:
            _print_error(f"failed to write JSON report '{args.json_output}': {exc}")
            return EXIT_FAILURE
        logger.info("Wrote JSON report to %s", args.json_output)

    return exit_code_for(report)


def handle_validate_config(args: argparse.Namespace) -> int:
    """Validate the config file and report every problem found."""
    errors = validate_config_file(args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return EXIT_FAILURE

    print("Configuration is valid.")
    return EXIT_PASS


def handle_init(args: argparse.Namespace, *, read: ReadFn = input, write: WriteFn = print) -> int:
    """Run the ``skills-lint init`` wizard and write a starter config."""
    target_path = args.config
    try:
        existing_content = target_path.read_text(encoding="utf-8") if target_path.is_file() else None
    except (OSError, UnicodeDecodeError) as exc:
        _print_error(f"failed to read {target_path}: {exc}")
        return EXIT_FAILURE

    try:
        if existing_content is not None and not args.yes and not args.dry_run:
            overwrite = prompt_yes_no(
                f"{target_path} already exists. Overwrite?", default=False, read=read, write=write
            )
            if not overwrite:
                write("Aborted.")
                return EXIT_PASS
        draft = default_init_draft() if args.yes else collect_init_draft(read=read, write=write)
    except (EOFError, KeyboardInterrupt):
        print("Init cancelled.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except ConfigError as exc:
        _print_error(exc)
        return EXIT_ERRORS

    payload = build_init_config(draft)
    validation_errors = validate_config_payload(payload, str(target_path))
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return EXIT_FAILURE

    rendered = render_init_json(payload)
    if existing_content is not None:
        diff = build_unified_diff(existing_content, rendered, target_path)
        if diff:
            write(diff)

    if args.dry_run:
        write(f"# Dry run: no file written. Target: {target_path}")
        write(rendered.rstrip("\n"))
        return EXIT_PASS

    try:
        write_text_atomic(
            path=target_path,
            content=rendered,
            temp_prefix=INIT_CONFIG_TEMP_PREFIX,
            temp_suffix=INIT_CONFIG_TEMP_SUFFIX,
        )
    except OSError as exc:
        _print_error(f"failed to write {target_path}: {exc}")
        return EXIT_ERRORS

    write(f"done: wrote {target_path}")
    update_gitignore(target_path.parent / GITIGNORE_FILENAME, write=write)
    return EXIT_PASS
