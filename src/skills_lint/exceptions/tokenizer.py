"""Tokenizer exceptions."""

from __future__ import annotations

from skills_lint.exceptions.base import SkillsLintError


class TokenizerError(SkillsLintError, RuntimeError):
    """Raised when an encoding cannot be loaded or applied."""


class UnknownEncodingError(TokenizerError, ValueError):
    """Raised for encoding names outside the supported set."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown encoding: {name}")
        self.name = name
