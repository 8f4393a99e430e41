"""End-to-end lint orchestration.

``run`` is the primary entry point used by the CLI.
"""

from __future__ import annotations

import logging
from pathlib import Path

from skills_lint.config import SkillsLintConfig
from skills_lint.io import read_skill_file
from skills_lint.linter.cache import TokenCache
from skills_lint.linter.discovery import discover_files
from skills_lint.model import LintFinding, LintReport, StructureFinding
from skills_lint.rules import frontmatter_limit, skill_index_budget, skill_structure, token_limit, unique_fields

logger = logging.getLogger(__name__)


def discover(config: SkillsLintConfig) -> list[str]:
    """Discover files based on config patterns."""
    return discover_files(config.patterns)


def lint_file(
    config: SkillsLintConfig,
    file: str,
    cache: TokenCache | None = None,
    *,
    content: str | None = None,
) -> list[LintFinding]:
    """Run the per-file budget rules (token-limit, then frontmatter-limit) on *file*."""
    if content is None:
        content = read_skill_file(file)
    findings = token_limit.check_file(config, file, content, cache)
    findings.extend(frontmatter_limit.check_file(config, file, content, cache))
    return findings


def check_structure(
    config: SkillsLintConfig,
    file: str,
    *,
    content: str | None = None,
) -> StructureFinding | None:
    """Return the skill-structure finding for *file*, or ``None`` when the rule is off."""
    if not config.rules.skill_structure:
        return None
    if content is None:
        content = read_skill_file(file)
    return skill_structure.lint_file(file, content)


def run(
    config: SkillsLintConfig,
    files: list[str] | None = None,
    *,
    single_file: bool = False,
    use_cache: bool = True,
    cache_path: Path | None = None,
) -> LintReport:
    """Run the lint pipeline.

    *files* defaults to the config's glob matches.  With *single_file* the
    cross-file rules (skill-index-budget, unique-name, unique-description)
    are skipped.
    """
    if files is None:
        files = discover(config)
    if not files:
        logger.debug("No files matched %s", ", ".join(config.patterns))
        return LintReport()

    cache = TokenCache.load(cache_path) if (use_cache and config.cache) else None

    contents: dict[str, str] = {}
    findings: list[LintFinding] = []
    structure_findings: list[StructureFinding] = []
    for file in files:
        content = read_skill_file(file)
        contents[file] = content
        logger.debug("Linting %s", file)
        findings.extend(lint_file(config, file, cache, content=content))
        structure = check_structure(config, file, content=content)
        if structure is not None:
            structure_findings.append(structure)

    if not single_file:
        findings.extend(skill_index_budget.check_all(config, files, cache, contents=contents))
        structure_findings.extend(unique_fields.check_all(config, files, contents=contents))

    if cache is not None:
        cache.flush()

    return LintReport(
        findings=tuple(findings),
        structure_findings=tuple(structure_findings),
        cache_hits=cache.hits if cache is not None else 0,
        cache_misses=cache.misses if cache is not None else 0,
    )
