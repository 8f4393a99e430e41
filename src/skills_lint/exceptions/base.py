"""Base exception type."""

from __future__ import annotations


class SkillsLintError(Exception):
    """Base class for all errors raised by skills-lint."""
