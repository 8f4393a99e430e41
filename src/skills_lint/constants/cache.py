"""Constants used by the token-count cache."""

from __future__ import annotations

CACHE_DIRNAME: str = ".skills-lint-cache"
CACHE_FILENAME: str = "tokens.json"
CACHE_VERSION: int = 1
CACHE_KEY_HASH_LENGTH: int = 16
CACHE_TEMP_PREFIX: str = ".tokens-"
CACHE_TEMP_SUFFIX: str = ".tmp"
CACHE_IGNORE_ENTRY: str = ".skills-lint-cache/"
