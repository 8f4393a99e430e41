"""Tests for skill-structure and the unique-name/unique-description rules."""

from __future__ import annotations

from typing import Any

import pytest

from skills_lint.config import SkillsLintConfig, build_config
from skills_lint.model import StructureFinding
from skills_lint.rules import skill_structure, unique_fields


def _config(**toggles: bool) -> SkillsLintConfig:
    rules: dict[str, Any] = {"token-limit": {"models": {"gpt-4o": {"warning": 10, "error": 20}}}}
    rules.update({key.replace("_", "-"): value for key, value in toggles.items()})
    return build_config({"patterns": ["**/SKILL.md"], "rules": rules})


def _skill(name: str | None = "demo", description: str | None = "Does demo things", body: str = "Body") -> str:
    lines = ["---"]
    if name is not None:
        lines.append(f"name: {name}")
    if description is not None:
        lines.append(f"description: {description}")
    return "\n".join([*lines, "---", body]) + "\n"


def test_valid_skill_passes() -> None:
    finding = skill_structure.lint_file("a/SKILL.md", _skill())

    assert finding == StructureFinding(rule="skill-structure", file="a/SKILL.md", message="valid", severity="pass")


@pytest.mark.parametrize(
    ("content", "issues"),
    [
        pytest.param("# no frontmatter\n", ["invalid frontmatter"], id="no-frontmatter"),
        pytest.param("---\nname: x\nbody\n", ["invalid frontmatter"], id="unterminated"),
        pytest.param("---\nname: [oops\n---\nbody\n", ["missing description"], id="bad-yaml-fields-by-line"),
        pytest.param(_skill(name=None), ["missing name"], id="no-name"),
        pytest.param(_skill(description=None), ["missing description"], id="no-description"),
        pytest.param(_skill(body="   "), ["empty body"], id="blank-body"),
        pytest.param(
            _skill(name=None, description=None, body=""),
            ["missing name", "missing description", "empty body"],
            id="everything-missing",
        ),
        pytest.param("---\nname:\ndescription: d\n---\nbody\n", ["missing name"], id="empty-name"),
    ],
)
def test_check_content_reports_issues_in_order(content: str, issues: list[str]) -> None:
    assert skill_structure.check_content(content) == issues


@pytest.mark.parametrize(
    "frontmatter",
    [
        pytest.param(
            "name: pdf\ndescription: Extract PDF text. Use when: the user shares a PDF",
            id="colon-in-description",
        ),
        pytest.param("name: yes\ndescription: Answers yes or no", id="yaml-bool-name"),
        pytest.param("name: 2024\ndescription: Release notes", id="numeric-name"),
    ],
)
def test_plain_scalar_fields_are_valid(frontmatter: str) -> None:
    assert skill_structure.check_content(f"---\n{frontmatter}\n---\nbody\n") == []


def test_structure_errors_are_joined_into_one_finding() -> None:
    finding = skill_structure.lint_file("a/SKILL.md", _skill(name=None, body=""))

    assert finding.severity == "error"
    assert finding.message == "missing name, empty body"


def test_unique_rules_disabled_returns_nothing() -> None:
    contents = {"a/SKILL.md": _skill(), "b/SKILL.md": _skill()}

    assert unique_fields.check_all(_config(), list(contents), contents=contents) == []


def test_unique_name_flags_every_duplicate_owner() -> None:
    contents = {
        "a/SKILL.md": _skill(name="deploy", description="one"),
        "b/SKILL.md": _skill(name="deploy", description="two"),
        "c/SKILL.md": _skill(name="review", description="three"),
    }

    findings = unique_fields.check_all(_config(unique_name=True), list(contents), contents=contents)

    assert [(f.file, f.severity, f.message) for f in findings] == [
        ("a/SKILL.md", "error", 'duplicate name "deploy" (also in b/SKILL.md)'),
        ("b/SKILL.md", "error", 'duplicate name "deploy" (also in a/SKILL.md)'),
        ("c/SKILL.md", "pass", "unique"),
    ]
    assert {f.rule for f in findings} == {"unique-name"}


def test_unique_description_truncates_long_values() -> None:
    description = "Summarize pull requests and suggest reviewers for each change"
    contents = {
        "a/SKILL.md": _skill(name="a", description=description),
        "b/SKILL.md": _skill(name="b", description=description),
        "c/SKILL.md": _skill(name="c", description=description),
    }

    findings = unique_fields.check_all(_config(unique_description=True), list(contents), contents=contents)

    assert findings[0].rule == "unique-description"
    assert findings[0].message == (
        f'duplicate description "{description[:40]}..." (also in b/SKILL.md, c/SKILL.md)'
    )


def test_unique_fields_compare_trimmed_values() -> None:
    contents = {
        "a/SKILL.md": "---\nname: '  deploy '\ndescription: d1\n---\nbody\n",
        "b/SKILL.md": _skill(name="deploy", description="d2"),
    }

    findings = unique_fields.check_all(_config(unique_name=True), list(contents), contents=contents)

    assert [f.severity for f in findings] == ["error", "error"]


def test_unique_fields_emit_name_before_description_per_file() -> None:
    contents = {
        "a/SKILL.md": _skill(name="a", description="same"),
        "b/SKILL.md": _skill(name="b", description="same"),
    }

    findings = unique_fields.check_all(
        _config(unique_name=True, unique_description=True), list(contents), contents=contents
    )

    assert [(f.file, f.rule, f.severity) for f in findings] == [
        ("a/SKILL.md", "unique-name", "pass"),
        ("a/SKILL.md", "unique-description", "error"),
        ("b/SKILL.md", "unique-name", "pass"),
        ("b/SKILL.md", "unique-description", "error"),
    ]


def test_unique_fields_skip_files_without_a_value() -> None:
    contents = {
        "a/SKILL.md": "no frontmatter\n",
        "b/SKILL.md": "---\nname: [broken\n---\nbody\n",
        "c/SKILL.md": _skill(name=None),
        "d/SKILL.md": _skill(name="solo"),
    }

    findings = unique_fields.check_all(_config(unique_name=True), list(contents), contents=contents)

    assert [(f.file, f.message) for f in findings] == [("b/SKILL.md", "unique"), ("d/SKILL.md", "unique")]


def test_unique_name_reads_names_from_frontmatter_that_is_not_yaml() -> None:
    contents = {
        "a/SKILL.md": _skill(name="pdf", description="Extract text. Use when: a PDF is shared"),
        "b/SKILL.md": _skill(name="pdf", description="Fill forms"),
        "c/SKILL.md": _skill(name="yes", description="Answers"),
    }

    findings = unique_fields.check_all(_config(unique_name=True), list(contents), contents=contents)

    assert [(f.file, f.message) for f in findings] == [
        ("a/SKILL.md", 'duplicate name "pdf" (also in b/SKILL.md)'),
        ("b/SKILL.md", 'duplicate name "pdf" (also in a/SKILL.md)'),
        ("c/SKILL.md", "unique"),
    ]
