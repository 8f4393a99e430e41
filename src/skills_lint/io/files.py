"""File-level helpers for reading skill files."""

from __future__ import annotations

from pathlib import Path

from skills_lint.exceptions import FileReadError


def read_skill_file(file: str) -> str:
    """Read a skill file as UTF-8 text, raising :class:`FileReadError` on failure."""
    try:
        return Path(file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(file, exc) from exc
