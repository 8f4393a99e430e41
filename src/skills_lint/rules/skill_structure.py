"""Structural validity of a skill file."""

from __future__ import annotations

from skills_lint.constants.rules import (
    ISSUE_EMPTY_BODY,
    ISSUE_INVALID_FRONTMATTER,
    ISSUE_MISSING_DESCRIPTION,
    ISSUE_MISSING_NAME,
    SKILL_STRUCTURE,
    STRUCTURE_VALID_MESSAGE,
)
from skills_lint.model import StructureFinding
from skills_lint.parsers import frontmatter_field, parse_frontmatter, split_document


def check_content(content: str, *, source: str = "<string>") -> list[str]:
    """Return structural issues for *content*, in a fixed order; empty when valid.

    A missing or unterminated frontmatter block is reported on its own since
    the remaining checks depend on it.
    """
    document = split_document(content)
    if document is None:
        return [ISSUE_INVALID_FRONTMATTER]

    fields = parse_frontmatter(document.frontmatter, source=source)
    issues: list[str] = []
    if frontmatter_field(document.frontmatter, "name", fields) is None:
        issues.append(ISSUE_MISSING_NAME)
    if frontmatter_field(document.frontmatter, "description", fields) is None:
        issues.append(ISSUE_MISSING_DESCRIPTION)
    if not document.body.strip():
        issues.append(ISSUE_EMPTY_BODY)
    return issues


def lint_file(file: str, content: str) -> StructureFinding:
    """Lint a single file for structural validity."""
    issues = check_content(content, source=file)
    if not issues:
        return StructureFinding(
            rule=SKILL_STRUCTURE,
            file=file,
            message=STRUCTURE_VALID_MESSAGE,
            severity="pass",
        )
    return StructureFinding(
        rule=SKILL_STRUCTURE,
        file=file,
        message=", ".join(issues),
        severity="error",
    )
