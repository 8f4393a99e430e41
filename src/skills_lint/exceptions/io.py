"""File I/O exceptions."""

from __future__ import annotations

from skills_lint.exceptions.base import SkillsLintError


class FileReadError(SkillsLintError, OSError):
    """Raised when a skill file cannot be read as UTF-8 text."""

    def __init__(self, path: str, reason: object) -> None:
        super().__init__(f"failed to read file '{path}': {reason}")
        self.path = path
