"""Constants for report files and stdout formatting."""

from __future__ import annotations

SCHEMA_VERSION: str = "1.0.0"
REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

SECTION_RULE_WIDTH: int = 50
TABLE_INDENT: str = "     "

STATUS_SYMBOLS: dict[str, str] = {
    "pass": "✓ PASS",
    "warning": "⚠ WARN",
    "error": "✗ ERROR",
}

TOKEN_TABLE_HEADERS: tuple[str, ...] = ("Model", "Tokens", "Warning", "Error", "Status")

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32m"
ANSI_DIM: str = "\033[2m"

SEVERITY_COLORS: dict[str, str] = {
    "error": ANSI_RED,
    "warning": ANSI_YELLOW,
    "pass": ANSI_GREEN,
}
