"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found
CFG002: str = "CFG002"  # invalid JSON parse
CFG003: str = "CFG003"  # top-level value is not an object
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # unsupported model or encoding
CFG007: str = "CFG007"  # value out of range
CFG008: str = "CFG008"  # missing required key

ALL_CFG_CODES: tuple[str, ...] = (
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
)

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"$schema", "patterns", "rules", "cache", "overrides"})
REQUIRED_CONFIG_KEYS: tuple[str, ...] = ("patterns", "rules")

ALLOWED_RULE_KEYS: frozenset[str] = frozenset(
    {
        "token-limit",
        "frontmatter-limit",
        "skill-index-budget",
        "skill-structure",
        "unique-name",
        "unique-description",
    }
)
ALLOWED_BUDGET_RULE_KEYS: frozenset[str] = frozenset({"models"})
ALLOWED_BUDGET_KEYS: frozenset[str] = frozenset({"encoding", "warning", "error"})
ALLOWED_OVERRIDE_KEYS: frozenset[str] = frozenset({"files", "rules"})
ALLOWED_OVERRIDE_RULE_KEYS: frozenset[str] = frozenset({"token-limit"})
