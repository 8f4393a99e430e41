"""Frontmatter extraction for SKILL.md files."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import yaml

from skills_lint.constants.parsing import BYTE_ORDER_MARK, FRONTMATTER_DELIMITER
from skills_lint.model import SkillDocument

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only, dropping a trailing ``\\r`` per line and a final empty line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def split_document(content: str) -> SkillDocument | None:
    """Split *content* into frontmatter text and body.

    The first line (after an optional UTF-8 BOM) must be ``---``; lines are
    collected until the next ``---`` line.  Returns ``None`` when the file has
    no frontmatter or the closing delimiter is missing.
    """
    lines = split_lines(content.removeprefix(BYTE_ORDER_MARK))
    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return None

    for index in range(1, len(lines)):
        if lines[index].strip() == FRONTMATTER_DELIMITER:
            return SkillDocument(
                frontmatter="\n".join(lines[1:index]),
                body="\n".join(lines[index + 1 :]),
            )
    return None


def extract_frontmatter(content: str) -> str | None:
    """Return the raw frontmatter text of *content*, or ``None``."""
    document = split_document(content)
    return document.frontmatter if document is not None else None


def parse_frontmatter(frontmatter: str, *, source: str = "<string>") -> dict[str, Any] | None:
    """Parse frontmatter text as a YAML mapping.

    Empty frontmatter yields an empty mapping.  Text that is not a YAML
    mapping yields ``None``; skill descriptions often hold unquoted colons,
    so this is only logged at debug level.
    """
    if not frontmatter.strip():
        return {}
    try:
        payload = yaml.safe_load(frontmatter)
    except yaml.YAMLError as exc:
        logger.debug("Frontmatter in %s is not valid YAML: %s", source, exc)
        return None
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        logger.debug("Frontmatter in %s is not a YAML mapping, got %s", source, type(payload).__name__)
        return None
    return payload


def _line_field(frontmatter: str, name: str) -> str | None:
    prefix = f"{name}:"
    for line in split_lines(frontmatter):
        if line.startswith(prefix):
            value = line[len(prefix) :].strip()
            if value:
                return value
    return None


def frontmatter_field(frontmatter: str, name: str, fields: Mapping[str, Any] | None = None) -> str | None:
    """Return the stripped value of *name*, or ``None`` when absent or blank.

    A non-blank string from the parsed *fields* wins, so quoted and folded
    values are unwrapped.  Otherwise the first ``name:`` line with a value
    is used, which covers frontmatter that is not valid YAML and non-string
    scalars such as ``name: yes``.
    """
    if fields is not None:
        value = fields.get(name)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return _line_field(frontmatter, name)
