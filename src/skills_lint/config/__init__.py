"""Configuration loading, validation, and normalization for lint runs."""

from __future__ import annotations

from skills_lint.config.loader import build_config, load_config
from skills_lint.config.model import SkillsLintConfig
from skills_lint.config.validator import validate_config_file, validate_config_payload

__all__ = [
    "SkillsLintConfig",
    "build_config",
    "load_config",
    "validate_config_file",
    "validate_config_payload",
]
