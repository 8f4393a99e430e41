"""Interactive prompts and rendering for ``skills-lint init``."""

from __future__ import annotations

import difflib
import json
from collections.abc import Callable
from typing import TypeAlias
from pathlib import Path

from skills_lint.constants.cache import CACHE_IGNORE_ENTRY
from skills_lint.constants.config import DEFAULT_PATTERN
from skills_lint.constants.models import STARTER_BUDGETS, STARTER_BUDGETS_FALLBACK, SUPPORTED_MODEL_NAMES
from skills_lint.constants.rules import (
    BUDGET_RULES,
    FRONTMATTER_LIMIT,
    OPTIONAL_RULES,
    SKILL_INDEX_BUDGET,
    TOKEN_LIMIT,
)
from skills_lint.exceptions import ConfigError
from skills_lint.types import InitConfigDraft, JsonObject

ReadFn: TypeAlias = Callable[[str], str]
WriteFn: TypeAlias = Callable[[str], None]

_NONE_ANSWERS: frozenset[str] = frozenset({"none", "-"})


def default_init_draft() -> InitConfigDraft:
    """Return the non-interactive defaults (every model, every rule)."""
    return InitConfigDraft()


def prompt_yes_no(question: str, *, default: bool, read: ReadFn, write: WriteFn) -> bool:
    """Ask a yes/no question until a recognizable answer is given."""
    suffix = "[Y/n]" if default else "[y/N]"
    while True:
        answer = read(f"{question} {suffix} ").strip().lower()
        if not answer:
            return default
        if answer in {"y", "yes"}:
            return True
        if answer in {"n", "no"}:
            return False
        write("Please answer 'y' or 'n'.")


def prompt_text(question: str, *, default: str, read: ReadFn) -> str:
    """Ask for free text, falling back to *default* on an empty answer."""
    answer = read(f"{question} [{default}]: ").strip()
    return answer or default


def prompt_multi_select(
    question: str,
    options: tuple[str, ...],
    *,
    read: ReadFn,
    write: WriteFn,
) -> tuple[str, ...]:
    """Ask the user to pick a subset of *options*.

    An empty answer selects everything, ``none`` selects nothing, otherwise the
    answer is a comma or space separated list of option numbers or names.
    Selections are returned in option order.
    """
    write(question)
    for index, option in enumerate(options, start=1):
        write(f"  {index}) {option}")

    while True:
        answer = read("Selection (enter for all, 'none' for nothing): ").strip()
        if not answer:
            return options
        if answer.lower() in _NONE_ANSWERS:
            return ()

        chosen: set[str] = set()
        invalid: list[str] = []
        for token in answer.replace(",", " ").split():
            if token.isdigit() and 1 <= int(token) <= len(options):
                chosen.add(options[int(token) - 1])
            elif token in options:
                chosen.add(token)
            else:
                invalid.append(token)
        if not invalid:
            return tuple(option for option in options if option in chosen)
        write(f"Unknown selection: {', '.join(invalid)}")


def collect_init_draft(*, read: ReadFn, write: WriteFn) -> InitConfigDraft:
    """Run the interactive prompts and return the collected draft."""
    pattern = prompt_text("Glob pattern for skill files", default=DEFAULT_PATTERN, read=read)
    models = prompt_multi_select("Models:", SUPPORTED_MODEL_NAMES, read=read, write=write)
    if not models:
        raise ConfigError("at least one model must be selected")
    rules = prompt_multi_select("Optional rules:", OPTIONAL_RULES, read=read, write=write)
    return InitConfigDraft(pattern=pattern, models=models, rules=rules)


def build_init_config(draft: InitConfigDraft) -> JsonObject:
    """Build the config payload for *draft* using per-model starter budgets.

    ``token-limit`` is always included.
    """
    rules: JsonObject = {TOKEN_LIMIT: _model_budgets(draft.models, TOKEN_LIMIT)}
    for rule in draft.rules:
        if rule in (FRONTMATTER_LIMIT, SKILL_INDEX_BUDGET):
            rules[rule] = _model_budgets(draft.models, rule)
        elif rule not in BUDGET_RULES:
            rules[rule] = True

    return {
        "patterns": [draft.pattern],
        "rules": rules,
    }


def render_init_json(payload: JsonObject) -> str:
    """Render a config payload as pretty-printed JSON with a trailing newline."""
    return json.dumps(payload, indent=2) + "\n"


def build_unified_diff(existing: str, rendered: str, path: Path) -> str:
    """Return a unified diff between an existing config and the generated one."""
    diff = difflib.unified_diff(
        existing.splitlines(keepends=True),
        rendered.splitlines(keepends=True),
        fromfile=f"{path} (current)",
        tofile=f"{path} (generated)",
    )
    return "".join(diff)


def update_gitignore(path: Path, *, write: WriteFn) -> None:
    """Append the cache directory to an existing ``.gitignore`` when missing."""
    tip = f"tip: add {CACHE_IGNORE_ENTRY} to your .gitignore"
    if not path.is_file():
        write(tip)
        return

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        write(tip)
        return

    if any(line.strip() == CACHE_IGNORE_ENTRY for line in content.splitlines()):
        return

    separator = "" if not content or content.endswith("\n") else "\n"
    try:
        path.write_text(f"{content}{separator}{CACHE_IGNORE_ENTRY}\n", encoding="utf-8")
    except OSError:
        write(tip)
        return
    write(f"done: added {CACHE_IGNORE_ENTRY} to {path.name}")


def _model_budgets(models: tuple[str, ...], rule: str) -> JsonObject:
    budgets: JsonObject = {}
    for model in models:
        warning, error = STARTER_BUDGETS.get(model, STARTER_BUDGETS_FALLBACK)[rule]
        budgets[model] = {"warning": warning, "error": error}
    return {"models": budgets}
