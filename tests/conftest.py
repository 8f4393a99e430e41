"""Shared pytest fixtures for skills-lint tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from skills_lint import tokenizer
from skills_lint.constants.models import SUPPORTED_ENCODINGS
from skills_lint.exceptions import UnknownEncodingError


class WhitespaceEncoding:
    """Offline stand-in for a BPE encoding: one token per whitespace-separated word."""

    def __init__(self, name: str) -> None:
        self.name = name

    def encode(self, text: str, *, allowed_special: object = ()) -> list[str]:
        return text.split()


def _fake_get_encoding(name: str) -> WhitespaceEncoding:
    if name not in SUPPORTED_ENCODINGS:
        raise UnknownEncodingError(name)
    return WhitespaceEncoding(name)


@pytest.fixture(autouse=True)
def offline_tokenizer(monkeypatch: pytest.MonkeyPatch) -> None:
    """Count tokens by words so tests never download BPE ranks."""
    monkeypatch.setattr(tokenizer, "get_encoding", _fake_get_encoding)


@pytest.fixture()
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty working directory (cache and globs are cwd-relative)."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def skill_markdown(
    *,
    name: str | None = "demo",
    description: str | None = "Does demo things",
    body: str = "Use this skill for demos.",
) -> str:
    """Build SKILL.md text with the given frontmatter fields."""
    lines = ["---"]
    if name is not None:
        lines.append(f"name: {name}")
    if description is not None:
        lines.append(f"description: {description}")
    lines.append("---")
    lines.append(body)
    return "\n".join(lines) + "\n"


@pytest.fixture()
def make_skill(tmp_path: Path):
    """Factory writing ``<rel>/SKILL.md`` under tmp_path and returning its path."""

    def _make(rel: str = "skill", content: str | None = None, **fields: str | None) -> Path:
        path = tmp_path / rel / "SKILL.md"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content if content is not None else skill_markdown(**fields), encoding="utf-8")
        return path

    return _make
