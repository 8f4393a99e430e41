"""Aggregate budget for the frontmatter of every discovered skill.

Agents typically load all skill names and descriptions up front, so the
joined frontmatter is what every conversation pays for.
"""

from __future__ import annotations

from collections.abc import Mapping

from skills_lint.config import SkillsLintConfig
from skills_lint.constants.rules import AGGREGATE_LABEL, SKILL_INDEX_BUDGET
from skills_lint.linter.cache import TokenCache
from skills_lint.model import LintFinding, ResolvedBudget
from skills_lint.parsers import extract_frontmatter
from skills_lint.rules import token_limit
from skills_lint.rules.common import file_content


def aggregate_frontmatter(files: list[str], contents: Mapping[str, str] | None = None) -> str:
    """Join the frontmatter of *files* (in order) with newlines, skipping files without one."""
    parts: list[str] = []
    for file in files:
        frontmatter = extract_frontmatter(file_content(file, contents))
        if frontmatter is not None:
            parts.append(frontmatter)
    return "\n".join(parts)


def check(
    aggregated: str,
    model: str,
    budget: ResolvedBudget,
    cache: TokenCache | None = None,
) -> LintFinding:
    """Check the aggregated frontmatter against a resolved budget for one model."""
    return token_limit.check(SKILL_INDEX_BUDGET, AGGREGATE_LABEL, model, aggregated, budget, cache)


def check_all(
    config: SkillsLintConfig,
    files: list[str],
    cache: TokenCache | None = None,
    *,
    contents: Mapping[str, str] | None = None,
) -> list[LintFinding]:
    """Check all discovered files' frontmatter as one index.

    Returns an empty list when the rule is not configured.
    """
    rule = config.rules.skill_index_budget
    if rule is None:
        return []

    aggregated = aggregate_frontmatter(files, contents)
    findings: list[LintFinding] = []
    for model in rule.model_names():
        budget = config.resolve_skill_index_budget(model)
        if budget is not None:
            findings.append(check(aggregated, model, budget, cache))
    return findings
