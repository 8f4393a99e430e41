"""Supported models, encodings, and starter budgets."""

from __future__ import annotations

from typing import TypeAlias

SUPPORTED_MODELS: tuple[tuple[str, str], ...] = (
    ("gpt-5", "o200k_base"),
    ("gpt-4o", "o200k_base"),
    ("gpt-4o-mini", "o200k_base"),
    ("gpt-4-turbo", "cl100k_base"),
    ("gpt-4", "cl100k_base"),
    ("gpt-3.5-turbo", "cl100k_base"),
)
SUPPORTED_MODEL_NAMES: tuple[str, ...] = tuple(name for name, _ in SUPPORTED_MODELS)
DEFAULT_ENCODINGS: dict[str, str] = dict(SUPPORTED_MODELS)

SUPPORTED_ENCODINGS: tuple[str, ...] = ("cl100k_base", "o200k_base", "p50k_base", "r50k_base")
FALLBACK_ENCODING: str = "cl100k_base"

# (warning, error) pairs used by ``skills-lint init``.
BudgetPair: TypeAlias = tuple[int, int]

STARTER_BUDGETS: dict[str, dict[str, BudgetPair]] = {
    "gpt-5": {
        "token-limit": (16000, 32000),
        "frontmatter-limit": (2000, 4000),
        "skill-index-budget": (4000, 8000),
    },
    "gpt-4o": {
        "token-limit": (8000, 16000),
        "frontmatter-limit": (1000, 2000),
        "skill-index-budget": (2000, 4000),
    },
    "gpt-4o-mini": {
        "token-limit": (8000, 16000),
        "frontmatter-limit": (1000, 2000),
        "skill-index-budget": (2000, 4000),
    },
    "gpt-4-turbo": {
        "token-limit": (8000, 16000),
        "frontmatter-limit": (1000, 2000),
        "skill-index-budget": (2000, 4000),
    },
    "gpt-4": {
        "token-limit": (2000, 4000),
        "frontmatter-limit": (500, 1000),
        "skill-index-budget": (1000, 2000),
    },
    "gpt-3.5-turbo": {
        "token-limit": (4000, 8000),
        "frontmatter-limit": (500, 1000),
        "skill-index-budget": (1000, 2000),
    },
}
STARTER_BUDGETS_FALLBACK: dict[str, BudgetPair] = STARTER_BUDGETS["gpt-4o"]


def default_encoding(model: str) -> str | None:
    """Return the default encoding for a supported model, or ``None``."""
    return DEFAULT_ENCODINGS.get(model)
