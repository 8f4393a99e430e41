"""Config data model for lint runs."""

from __future__ import annotations

from dataclasses import dataclass

from skills_lint.constants.config import DEFAULT_CACHE_ENABLED
from skills_lint.constants.models import FALLBACK_ENCODING, default_encoding
from skills_lint.model import ResolvedBudget
from skills_lint.types import BudgetRuleConfig, OverrideEntry, RulesConfig


def _resolve_plain(rule: BudgetRuleConfig | None, model: str) -> ResolvedBudget | None:
    if rule is None:
        return None
    budget = rule.models.get(model)
    if budget is None:
        return None
    return ResolvedBudget(
        encoding=budget.encoding or default_encoding(model) or FALLBACK_ENCODING,
        warning=budget.warning,
        error=budget.error,
    )


@dataclass(frozen=True)
class SkillsLintConfig:
    """Resolved lint config loaded from ``.skills-lint.config.json``."""

    patterns: tuple[str, ...]
    rules: RulesConfig
    cache: bool = DEFAULT_CACHE_ENABLED
    overrides: tuple[OverrideEntry, ...] = ()

    def resolve_token_limit(self, file: str, model: str) -> ResolvedBudget | None:
        """Resolve the effective token-limit budget for *file* and *model*.

        Overrides are applied in declaration order on top of the global
        budget; each field set by a matching override wins.
        """
        base = self.rules.token_limit.models.get(model)
        if base is None:
            return None

        encoding = base.encoding
        warning = base.warning
        error = base.error
        for entry in self.overrides:
            if not entry.matches(file):
                continue
            override = entry.token_limit.get(model)
            if override is None:
                continue
            if override.encoding is not None:
                encoding = override.encoding
            if override.warning is not None:
                warning = override.warning
            if override.error is not None:
                error = override.error

        return ResolvedBudget(
            encoding=encoding or default_encoding(model) or FALLBACK_ENCODING,
            warning=warning,
            error=error,
        )

    def resolve_frontmatter_limit(self, model: str) -> ResolvedBudget | None:
        """Resolve the frontmatter-limit budget for *model* (no per-file overrides)."""
        return _resolve_plain(self.rules.frontmatter_limit, model)

    def resolve_skill_index_budget(self, model: str) -> ResolvedBudget | None:
        """Resolve the skill-index-budget for *model* (no per-file overrides)."""
        return _resolve_plain(self.rules.skill_index_budget, model)
