"""Rule identifiers and rule-specific constants."""

from __future__ import annotations

TOKEN_LIMIT: str = "token-limit"
FRONTMATTER_LIMIT: str = "frontmatter-limit"
SKILL_INDEX_BUDGET: str = "skill-index-budget"
SKILL_STRUCTURE: str = "skill-structure"
UNIQUE_NAME: str = "unique-name"
UNIQUE_DESCRIPTION: str = "unique-description"

BUDGET_RULES: tuple[str, ...] = (TOKEN_LIMIT, FRONTMATTER_LIMIT, SKILL_INDEX_BUDGET)
TOGGLE_RULES: tuple[str, ...] = (SKILL_STRUCTURE, UNIQUE_NAME, UNIQUE_DESCRIPTION)
OPTIONAL_RULES: tuple[str, ...] = (
    FRONTMATTER_LIMIT,
    SKILL_INDEX_BUDGET,
    SKILL_STRUCTURE,
    UNIQUE_NAME,
    UNIQUE_DESCRIPTION,
)

# Pseudo file label for the aggregated frontmatter finding.
AGGREGATE_LABEL: str = "(skill index)"

STRUCTURE_VALID_MESSAGE: str = "valid"
UNIQUE_MESSAGE: str = "unique"
ISSUE_INVALID_FRONTMATTER: str = "invalid frontmatter"
ISSUE_MISSING_NAME: str = "missing name"
ISSUE_MISSING_DESCRIPTION: str = "missing description"
ISSUE_EMPTY_BODY: str = "empty body"

DESCRIPTION_PREVIEW_LENGTH: int = 40
