"""Shared exception hierarchy for skills-lint."""

from __future__ import annotations

from .base import SkillsLintError
from .config import ConfigError
from .discovery import DiscoveryError
from .io import FileReadError
from .tokenizer import TokenizerError, UnknownEncodingError

__all__ = [
    "ConfigError",
    "DiscoveryError",
    "FileReadError",
    "SkillsLintError",
    "TokenizerError",
    "UnknownEncodingError",
]
