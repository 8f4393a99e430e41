"""Lint orchestration package."""

from __future__ import annotations

from typing import Any

__all__ = ["TokenCache", "check_structure", "discover", "lint_file", "run"]


def __getattr__(name: str) -> Any:
    """Lazily expose linter APIs to avoid import cycles at package import time."""
    if name == "TokenCache":
        from .cache import TokenCache

        return TokenCache
    if name in {"check_structure", "discover", "lint_file", "run"}:
        from . import orchestrator

        return getattr(orchestrator, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
