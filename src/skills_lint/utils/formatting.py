"""Number formatting for terminal output."""

from __future__ import annotations


def format_number(value: int) -> str:
    """Format an integer with comma thousands separators (``12345`` -> ``12,345``)."""
    return f"{value:,}"
