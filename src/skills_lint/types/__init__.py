"""Shared type aliases for skills-lint."""

from .cache import CachePayload
from .common import JsonObject, JsonScalar, JsonValue, Severity
from .config import (
    BudgetRuleConfig,
    ModelBudget,
    OverrideEntry,
    OverrideModelBudget,
    RulesConfig,
    normalize_path,
)
from .init_config import InitConfigDraft

__all__ = [
    "BudgetRuleConfig",
    "CachePayload",
    "InitConfigDraft",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "ModelBudget",
    "OverrideEntry",
    "OverrideModelBudget",
    "RulesConfig",
    "Severity",
    "normalize_path",
]
