"""Frozen dataclasses for findings and lint reports."""

from __future__ import annotations

from dataclasses import dataclass, field

from skills_lint.constants.reporting import SCHEMA_VERSION
from skills_lint.constants.rules import AGGREGATE_LABEL
from skills_lint.constants.scoring import SEVERITY_RANK
from skills_lint.types import JsonObject, Severity


@dataclass(frozen=True)
class ResolvedBudget:
    """Fully resolved budget for a file x model pair."""

    encoding: str
    warning: int
    error: int

    def classify(self, token_count: int) -> Severity:
        """Map a token count onto a severity against this budget."""
        if token_count >= self.error:
            return "error"
        if token_count >= self.warning:
            return "warning"
        return "pass"


@dataclass(frozen=True)
class LintFinding:
    """A token-count finding for one file (or the skill index) and one model."""

    rule: str
    file: str
    model: str
    token_count: int
    warning_threshold: int
    error_threshold: int
    severity: Severity

    @property
    def is_aggregate(self) -> bool:
        return self.file == AGGREGATE_LABEL

    def to_dict(self) -> JsonObject:
        return {
            "rule": self.rule,
            "file": self.file,
            "model": self.model,
            "token_count": self.token_count,
            "warning_threshold": self.warning_threshold,
            "error_threshold": self.error_threshold,
            "severity": self.severity,
        }


@dataclass(frozen=True)
class StructureFinding:
    """A message-style finding produced by structural and uniqueness rules."""

    rule: str
    file: str
    message: str
    severity: Severity

    def to_dict(self) -> JsonObject:
        return {
            "rule": self.rule,
            "file": self.file,
            "message": self.message,
            "severity": self.severity,
        }


@dataclass(frozen=True)
class LintReport:
    """Aggregated results from a lint run."""

    findings: tuple[LintFinding, ...] = ()
    structure_findings: tuple[StructureFinding, ...] = field(default=())
    cache_hits: int = 0
    cache_misses: int = 0

    def _severities(self) -> list[Severity]:
        return [f.severity for f in self.findings] + [f.severity for f in self.structure_findings]

    def worst_severity(self) -> Severity:
        """Return the worst severity across all findings, ``pass`` when empty."""
        return max(self._severities(), key=lambda s: SEVERITY_RANK[s], default="pass")

    def count(self, severity: Severity) -> int:
        return sum(1 for s in self._severities() if s == severity)

    @property
    def total(self) -> int:
        return len(self.findings) + len(self.structure_findings)

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    @property
    def files(self) -> tuple[str, ...]:
        """Distinct linted file paths, sorted, excluding the aggregate label."""
        paths = {f.file for f in self.findings if not f.is_aggregate}
        paths.update(f.file for f in self.structure_findings)
        return tuple(sorted(paths))

    def to_dict(self) -> JsonObject:
        return {
            "schema_version": SCHEMA_VERSION,
            "summary": {
                "files": len(self.files),
                "passed": self.count("pass"),
                "warnings": self.count("warning"),
                "errors": self.count("error"),
                "worst_severity": self.worst_severity(),
            },
            "findings": [f.to_dict() for f in self.findings],
            "structure_findings": [f.to_dict() for f in self.structure_findings],
        }


@dataclass(frozen=True)
class SkillDocument:
    """A skill markdown file split at its frontmatter delimiters."""

    frontmatter: str
    body: str
