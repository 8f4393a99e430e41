"""Typed config sub-structures for rule budgets and overrides."""

from __future__ import annotations

import fnmatch
import posixpath
from dataclasses import dataclass, field


def normalize_path(path: str) -> str:
    """Normalize a file path for override matching (``./a//b`` -> ``a/b``)."""
    return posixpath.normpath(path.replace("\\", "/"))


@dataclass(frozen=True)
class ModelBudget:
    """Warning/error thresholds for one model, with an optional encoding override."""

    warning: int
    error: int
    encoding: str | None = None


@dataclass(frozen=True)
class BudgetRuleConfig:
    """A budget rule (``token-limit`` and friends) keyed by model name."""

    models: dict[str, ModelBudget] = field(default_factory=dict)

    def model_names(self) -> list[str]:
        return sorted(self.models)


@dataclass(frozen=True)
class OverrideModelBudget:
    """Partial per-file budget; unset fields fall through to the global budget."""

    warning: int | None = None
    error: int | None = None
    encoding: str | None = None


@dataclass(frozen=True)
class OverrideEntry:
    """Per-file token-limit adjustments."""

    files: tuple[str, ...] = ()
    token_limit: dict[str, OverrideModelBudget] = field(default_factory=dict)

    def matches(self, file: str) -> bool:
        """Return True when *file* equals or glob-matches one of the entry's paths."""
        target = normalize_path(file)
        for candidate in self.files:
            pattern = normalize_path(candidate)
            if pattern == target or fnmatch.fnmatchcase(target, pattern):
                return True
        return False


@dataclass(frozen=True)
class RulesConfig:
    """All rule settings from the ``rules`` block."""

    token_limit: BudgetRuleConfig
    frontmatter_limit: BudgetRuleConfig | None = None
    skill_index_budget: BudgetRuleConfig | None = None
    skill_structure: bool = False
    unique_name: bool = False
    unique_description: bool = False
