"""Skill file discovery from config glob patterns."""

from __future__ import annotations

import glob
import logging
import os

from skills_lint.exceptions import DiscoveryError

logger = logging.getLogger(__name__)


def _has_unclosed_class(pattern: str) -> bool:
    index = 0
    while index < len(pattern):
        if pattern[index] != "[":
            index += 1
            continue
        end = index + 1
        if end < len(pattern) and pattern[end] == "!":
            end += 1
        # a leading ] is a literal member of the class
        if end < len(pattern) and pattern[end] == "]":
            end += 1
        close = pattern.find("]", end)
        if close == -1:
            return True
        index = close + 1
    return False


def _validate_pattern(pattern: str) -> None:
    if not pattern.strip():
        raise DiscoveryError(f"invalid glob pattern '{pattern}': pattern is empty")
    segments = pattern.replace("\\", "/").split("/")
    if any("**" in segment and segment != "**" for segment in segments):
        raise DiscoveryError(f"invalid glob pattern '{pattern}': `**` must be a whole path segment")
    if _has_unclosed_class(pattern):
        raise DiscoveryError(f"invalid glob pattern '{pattern}': unclosed character class")


def discover_files(patterns: tuple[str, ...] | list[str]) -> list[str]:
    """Expand glob *patterns* (``**`` recurses) into a sorted, deduplicated file list.

    Paths are returned as matched, relative to the working directory unless
    the pattern itself is absolute.  Hidden directories such as ``.claude``
    are searched too.  Directories are skipped.

    Raises:
        DiscoveryError: A pattern is empty, has an unclosed ``[`` or uses
            ``**`` inside a path segment.
    """
    files: set[str] = set()
    for pattern in patterns:
        _validate_pattern(pattern)
        matches = glob.glob(pattern, recursive=True, include_hidden=True)

        matched_files = [match for match in matches if os.path.isfile(match)]
        logger.debug("Pattern %r matched %d file(s)", pattern, len(matched_files))
        files.update(matched_files)

    return sorted(files)
