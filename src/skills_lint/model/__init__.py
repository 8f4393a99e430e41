"""Core data models for skills-lint."""

from .entities import LintFinding, LintReport, ResolvedBudget, SkillDocument, StructureFinding

__all__ = [
    "LintFinding",
    "LintReport",
    "ResolvedBudget",
    "SkillDocument",
    "StructureFinding",
]
