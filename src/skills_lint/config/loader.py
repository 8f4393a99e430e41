"""Config loading and normalization for lint runs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from skills_lint.config.model import SkillsLintConfig
from skills_lint.config.validator import read_config_payload, validate_config_payload
from skills_lint.constants.config import DEFAULT_CACHE_ENABLED
from skills_lint.constants.rules import (
    FRONTMATTER_LIMIT,
    SKILL_INDEX_BUDGET,
    SKILL_STRUCTURE,
    TOKEN_LIMIT,
    UNIQUE_DESCRIPTION,
    UNIQUE_NAME,
)
from skills_lint.exceptions import ConfigError
from skills_lint.exceptions.validation import format_errors
from skills_lint.types import (
    BudgetRuleConfig,
    ModelBudget,
    OverrideEntry,
    OverrideModelBudget,
    RulesConfig,
)

logger = logging.getLogger(__name__)


def load_config(path: Path) -> SkillsLintConfig:
    """Load, validate and normalize the JSON config at *path*.

    Raises :class:`ConfigError` carrying every validation problem found.
    """
    raw, errors = read_config_payload(path)
    if not errors:
        errors = validate_config_payload(raw, str(path))
    if errors:
        raise ConfigError(format_errors(errors))

    assert isinstance(raw, dict)
    config = build_config(raw)
    logger.debug("Loaded config from %s (%d pattern(s))", path, len(config.patterns))
    return config


def build_config(raw: dict[str, Any]) -> SkillsLintConfig:
    """Build a :class:`SkillsLintConfig` from a payload that passed validation."""
    rules_raw = raw["rules"]
    rules = RulesConfig(
        token_limit=_build_budget_rule(rules_raw[TOKEN_LIMIT]),
        frontmatter_limit=_build_optional_budget_rule(rules_raw.get(FRONTMATTER_LIMIT)),
        skill_index_budget=_build_optional_budget_rule(rules_raw.get(SKILL_INDEX_BUDGET)),
        skill_structure=rules_raw.get(SKILL_STRUCTURE, False) is True,
        unique_name=rules_raw.get(UNIQUE_NAME, False) is True,
        unique_description=rules_raw.get(UNIQUE_DESCRIPTION, False) is True,
    )

    overrides = tuple(
        OverrideEntry(
            files=tuple(entry["files"]),
            token_limit={
                model: OverrideModelBudget(
                    warning=budget.get("warning"),
                    error=budget.get("error"),
                    encoding=budget.get("encoding"),
                )
                for model, budget in entry["rules"][TOKEN_LIMIT]["models"].items()
            },
        )
        for entry in raw.get("overrides", [])
    )

    return SkillsLintConfig(
        patterns=tuple(raw["patterns"]),
        rules=rules,
        cache=raw.get("cache", DEFAULT_CACHE_ENABLED),
        overrides=overrides,
    )


def _build_budget_rule(raw: dict[str, Any]) -> BudgetRuleConfig:
    return BudgetRuleConfig(
        models={
            model: ModelBudget(
                warning=budget["warning"],
                error=budget["error"],
                encoding=budget.get("encoding"),
            )
            for model, budget in raw["models"].items()
        }
    )


def _build_optional_budget_rule(raw: dict[str, Any] | None) -> BudgetRuleConfig | None:
    if raw is None:
        return None
    return _build_budget_rule(raw)
