"""Configuration-related exceptions."""

from __future__ import annotations

from skills_lint.exceptions.base import SkillsLintError


class ConfigError(SkillsLintError, ValueError):
    """Raised when the lint configuration is missing or invalid."""
