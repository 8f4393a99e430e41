"""File discovery exceptions."""

from __future__ import annotations

from skills_lint.exceptions.base import SkillsLintError


class DiscoveryError(SkillsLintError, ValueError):
    """Raised when a glob pattern cannot be expanded."""
