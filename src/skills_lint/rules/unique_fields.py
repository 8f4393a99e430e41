"""Cross-file uniqueness of skill names and descriptions."""

from __future__ import annotations

from collections.abc import Mapping

from skills_lint.config import SkillsLintConfig
from skills_lint.constants.rules import (
    DESCRIPTION_PREVIEW_LENGTH,
    UNIQUE_DESCRIPTION,
    UNIQUE_MESSAGE,
    UNIQUE_NAME,
)
from skills_lint.model import StructureFinding
from skills_lint.parsers import extract_frontmatter, frontmatter_field, parse_frontmatter
from skills_lint.rules.common import file_content


def _preview(value: str) -> str:
    if len(value) > DESCRIPTION_PREVIEW_LENGTH:
        return f"{value[:DESCRIPTION_PREVIEW_LENGTH]}..."
    return value


def _field_finding(
    *,
    rule: str,
    label: str,
    file: str,
    value: str,
    owners: dict[str, list[str]],
) -> StructureFinding:
    others = [other for other in owners[value] if other != file]
    if not others:
        return StructureFinding(rule=rule, file=file, message=UNIQUE_MESSAGE, severity="pass")
    shown = _preview(value) if rule == UNIQUE_DESCRIPTION else value
    return StructureFinding(
        rule=rule,
        file=file,
        message=f'duplicate {label} "{shown}" (also in {", ".join(others)})',
        severity="error",
    )


def check_all(
    config: SkillsLintConfig,
    files: list[str],
    *,
    contents: Mapping[str, str] | None = None,
) -> list[StructureFinding]:
    """Flag files whose ``name`` or ``description`` duplicates another file's.

    Produces one finding per enabled rule per file (in file order), skipping
    files without frontmatter or without a non-empty value.  Returns an empty list
    when neither rule is enabled.
    """
    check_name = config.rules.unique_name
    check_description = config.rules.unique_description
    if not check_name and not check_description:
        return []

    values: list[tuple[str, str | None, str | None]] = []
    names: dict[str, list[str]] = {}
    descriptions: dict[str, list[str]] = {}

    for file in files:
        frontmatter = extract_frontmatter(file_content(file, contents))
        if frontmatter is None:
            continue
        fields = parse_frontmatter(frontmatter, source=file)

        name = frontmatter_field(frontmatter, "name", fields) if check_name else None
        description = frontmatter_field(frontmatter, "description", fields) if check_description else None
        if name is not None:
            names.setdefault(name, []).append(file)
        if description is not None:
            descriptions.setdefault(description, []).append(file)
        values.append((file, name, description))

    findings: list[StructureFinding] = []
    for file, name, description in values:
        if name is not None:
            findings.append(_field_finding(rule=UNIQUE_NAME, label="name", file=file, value=name, owners=names))
        if description is not None:
            findings.append(
                _field_finding(
                    rule=UNIQUE_DESCRIPTION,
                    label="description",
                    file=file,
                    value=description,
                    owners=descriptions,
                )
            )
    return findings
