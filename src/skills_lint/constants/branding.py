"""Branding constants for terminal output."""

from __future__ import annotations

ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ SKILLS-LINT",
    "     // token budgets for agent skills",
)
CLI_DESCRIPTION: str = "\n".join(
    (*ASCII_LOGO_LINES, "", "Lint agent skill markdown files against per-model token budgets")
)
