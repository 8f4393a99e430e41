"""On-disk cache of token counts keyed by content hash and encoding."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

from skills_lint import tokenizer
from skills_lint.constants.cache import (
    CACHE_DIRNAME,
    CACHE_FILENAME,
    CACHE_KEY_HASH_LENGTH,
    CACHE_TEMP_PREFIX,
    CACHE_TEMP_SUFFIX,
    CACHE_VERSION,
)
from skills_lint.io import load_json_file, write_json_atomic
from skills_lint.types import CachePayload

logger = logging.getLogger(__name__)


def default_cache_path() -> Path:
    """Return the cache file location relative to the working directory."""
    return Path(CACHE_DIRNAME) / CACHE_FILENAME


def cache_key(text: str, encoding: str) -> str:
    """Return ``<first 16 hex chars of sha256(text)>:<encoding>``."""
    digest = hashlib.sha256(text.encode("utf-8")).hexdigest()[:CACHE_KEY_HASH_LENGTH]
    return f"{digest}:{encoding}"


def _load_entries(path: Path) -> dict[str, int]:
    """Read cache entries; anything missing, corrupt or versioned differently yields ``{}``."""
    if not path.is_file():
        return {}
    try:
        payload = load_json_file(path)
    except (OSError, ValueError) as exc:
        logger.debug("Ignoring unreadable token cache %s: %s", path, exc)
        return {}

    if not isinstance(payload, dict) or payload.get("v") != CACHE_VERSION:
        return {}
    raw_entries = payload.get("entries")
    if not isinstance(raw_entries, dict):
        return {}

    entries: dict[str, int] = {}
    for key, value in raw_entries.items():
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            return {}
        entries[key] = value
    return entries


class TokenCache:
    """Memoizes token counts across runs.

    Entries are only written back by :meth:`flush` when a new count was
    computed during this run.
    """

    def __init__(self, entries: dict[str, int] | None = None, *, path: Path | None = None) -> None:
        self._path = path if path is not None else default_cache_path()
        self._entries: dict[str, int] = dict(entries or {})
        self._dirty = False
        self.hits = 0
        self.misses = 0

    @classmethod
    def load(cls, path: Path | None = None) -> TokenCache:
        """Load the cache from disk, starting empty when it cannot be used."""
        resolved = path if path is not None else default_cache_path()
        return cls(_load_entries(resolved), path=resolved)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def dirty(self) -> bool:
        return self._dirty

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def count_tokens(self, text: str, encoding: str) -> int:
        """Count tokens for *text*, consulting the cache first."""
        key = cache_key(text, encoding)
        cached = self._entries.get(key)
        if cached is not None:
            self.hits += 1
            return cached

        count = tokenizer.count_tokens(text, encoding)
        self._entries[key] = count
        self._dirty = True
        self.misses += 1
        return count

    def to_payload(self) -> CachePayload:
        return {"v": CACHE_VERSION, "entries": dict(self._entries)}

    def flush(self) -> None:
        """Persist the cache when dirty; write failures are logged, never raised."""
        if not self._dirty:
            return
        try:
            write_json_atomic(
                path=self._path,
                payload=self.to_payload(),
                temp_prefix=CACHE_TEMP_PREFIX,
                temp_suffix=CACHE_TEMP_SUFFIX,
            )
        except OSError as exc:
            logger.warning("Failed to write token cache %s: %s", self._path, exc)
            return
        self._dirty = False
