"""Severity ordering and exit codes."""

from __future__ import annotations

SEVERITY_RANK: dict[str, int] = {
    "pass": 0,
    "warning": 1,
    "error": 2,
}

EXIT_PASS: int = 0
EXIT_ERRORS: int = 1
EXIT_WARNINGS: int = 2
EXIT_FAILURE: int = 3
EXIT_INTERRUPTED: int = 130
