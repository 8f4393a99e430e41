"""Per-file frontmatter token budget rule."""

from __future__ import annotations

from skills_lint.config import SkillsLintConfig
from skills_lint.constants.rules import FRONTMATTER_LIMIT
from skills_lint.linter.cache import TokenCache
from skills_lint.model import LintFinding, ResolvedBudget
from skills_lint.parsers import extract_frontmatter
from skills_lint.rules import token_limit


def check(
    file: str,
    model: str,
    frontmatter: str,
    budget: ResolvedBudget,
    cache: TokenCache | None = None,
) -> LintFinding:
    """Check frontmatter text against a resolved budget for one model."""
    return token_limit.check(FRONTMATTER_LIMIT, file, model, frontmatter, budget, cache)


def check_file(
    config: SkillsLintConfig,
    file: str,
    content: str,
    cache: TokenCache | None = None,
) -> list[LintFinding]:
    """Check a file's frontmatter for all configured models.

    Returns an empty list when the rule is not configured or the file has no
    frontmatter.
    """
    rule = config.rules.frontmatter_limit
    if rule is None:
        return []

    frontmatter = extract_frontmatter(content)
    if frontmatter is None:
        return []

    findings: list[LintFinding] = []
    for model in rule.model_names():
        budget = config.resolve_frontmatter_limit(model)
        if budget is not None:
            findings.append(check(file, model, frontmatter, budget, cache))
    return findings
