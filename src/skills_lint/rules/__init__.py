"""Lint rules evaluated against skill files."""

from . import frontmatter_limit, skill_index_budget, skill_structure, token_limit, unique_fields

__all__ = [
    "frontmatter_limit",
    "skill_index_budget",
    "skill_structure",
    "token_limit",
    "unique_fields",
]
