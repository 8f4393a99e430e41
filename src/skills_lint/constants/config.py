"""Configuration filenames and defaults."""

from __future__ import annotations

CONFIG_FILENAME: str = ".skills-lint.config.json"
DEFAULT_PATTERN: str = "./.github/**/SKILL.md"
DEFAULT_CACHE_ENABLED: bool = True

INIT_CONFIG_TEMP_PREFIX: str = ".skills-lint-init-"
INIT_CONFIG_TEMP_SUFFIX: str = ".json"
GITIGNORE_FILENAME: str = ".gitignore"
