"""Constants for SKILL.md frontmatter parsing."""

from __future__ import annotations

FRONTMATTER_DELIMITER: str = "---"
BYTE_ORDER_MARK: str = "\ufeff"
