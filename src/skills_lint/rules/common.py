"""Helpers shared by the rule modules."""

from __future__ import annotations

from collections.abc import Mapping

from skills_lint.io import read_skill_file


def file_content(file: str, contents: Mapping[str, str] | None) -> str:
    """Return pre-read content for *file* when available, reading it otherwise."""
    if contents is not None and file in contents:
        return contents[file]
    return read_skill_file(file)
