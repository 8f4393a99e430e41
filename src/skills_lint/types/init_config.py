"""Type definitions for ``skills-lint init`` configuration drafting."""

from __future__ import annotations

from dataclasses import dataclass

from skills_lint.constants.config import DEFAULT_PATTERN
from skills_lint.constants.models import SUPPORTED_MODEL_NAMES
from skills_lint.constants.rules import OPTIONAL_RULES


@dataclass(frozen=True)
class InitConfigDraft:
    """Collected answers used to render a starter config file."""

    pattern: str = DEFAULT_PATTERN
    models: tuple[str, ...] = SUPPORTED_MODEL_NAMES
    rules: tuple[str, ...] = OPTIONAL_RULES
