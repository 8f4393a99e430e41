"""Per-file token budget rule."""

from __future__ import annotations

from skills_lint import tokenizer
from skills_lint.config import SkillsLintConfig
from skills_lint.constants.rules import TOKEN_LIMIT
from skills_lint.linter.cache import TokenCache
from skills_lint.model import LintFinding, ResolvedBudget


def check(
    rule: str,
    file: str,
    model: str,
    content: str,
    budget: ResolvedBudget,
    cache: TokenCache | None = None,
) -> LintFinding:
    """Count *content* with the budget's encoding and grade it against the thresholds.

    The other budget rules delegate here with their own rule id.
    """
    if cache is not None:
        token_count = cache.count_tokens(content, budget.encoding)
    else:
        token_count = tokenizer.count_tokens(content, budget.encoding)

    return LintFinding(
        rule=rule,
        file=file,
        model=model,
        token_count=token_count,
        warning_threshold=budget.warning,
        error_threshold=budget.error,
        severity=budget.classify(token_count),
    )


def check_file(
    config: SkillsLintConfig,
    file: str,
    content: str,
    cache: TokenCache | None = None,
) -> list[LintFinding]:
    """Check one file's full text for every configured model, in model-name order."""
    findings: list[LintFinding] = []
    for model in config.rules.token_limit.model_names():
        budget = config.resolve_token_limit(file, model)
        if budget is not None:
            findings.append(check(TOKEN_LIMIT, file, model, content, budget, cache))
    return findings
