"""Human-readable stdout reporter for lint results."""

from __future__ import annotations

from skills_lint.constants.branding import ASCII_LOGO_LINES
from skills_lint.constants.reporting import (
    ANSI_BOLD,
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    SECTION_RULE_WIDTH,
    SEVERITY_COLORS,
    STATUS_SYMBOLS,
    TABLE_INDENT,
    TOKEN_TABLE_HEADERS,
)
from skills_lint.constants.rules import AGGREGATE_LABEL
from skills_lint.constants.scoring import SEVERITY_RANK
from skills_lint.model import LintFinding, LintReport, StructureFinding
from skills_lint.types import Severity
from skills_lint.utils import format_number


def _is_notable(severity: Severity) -> bool:
    return severity in ("warning", "error")


def _worst(severities: list[Severity]) -> Severity:
    return max(severities, key=lambda s: SEVERITY_RANK[s], default="pass")


class StdoutReporter:
    """Formats a :class:`LintReport` as grouped, per-file sections."""

    def __init__(
        self,
        report: LintReport,
        *,
        color: bool = True,
        verbose: bool = False,
        show_banner: bool = True,
    ) -> None:
        self._report = report
        self._color = color
        self._verbose = verbose
        self._show_banner = show_banner

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        lines: list[str] = []
        if self._show_banner:
            lines.extend(self._render_banner())

        if self._report.is_empty:
            lines.append(f"  {self._style('No files found to lint.', ANSI_DIM)}")
            lines.append("")
            return "\n".join(lines)

        sections = [self._render_file_section(path) for path in self._visible_files()]
        aggregate = self._render_aggregate_section()
        if aggregate:
            sections.append(aggregate)

        separator = ["", f"  {self._style('─' * SECTION_RULE_WIDTH, ANSI_DIM)}", ""]
        for index, section in enumerate(sections):
            if index > 0:
                lines.extend(separator)
            lines.extend(section)
        if sections:
            lines.append("")

        lines.append(self._render_summary())
        if self._verbose:
            lines.append(
                f"  {self._style('Cache:', ANSI_BOLD)} "
                f"{self._report.cache_hits} hits / {self._report.cache_misses} misses"
            )
        lines.append("")
        return "\n".join(lines)

    def _render_banner(self) -> list[str]:
        return ["", *(f"  {self._style(line, ANSI_BOLD)}" for line in ASCII_LOGO_LINES), ""]

    def _visible_files(self) -> list[str]:
        """Files in first-seen order; in non-verbose mode only those with issues."""
        ordered: list[str] = []
        for finding in self._report.structure_findings:
            if finding.file not in ordered:
                ordered.append(finding.file)
        for finding in self._report.findings:
            if not finding.is_aggregate and finding.file not in ordered:
                ordered.append(finding.file)

        if self._verbose:
            return ordered
        notable = {
            f.file
            for f in (*self._report.findings, *self._report.structure_findings)
            if _is_notable(f.severity)
        }
        return [path for path in ordered if path in notable]

    def _render_file_section(self, path: str) -> list[str]:
        structure = [
            f for f in self._report.structure_findings if f.file == path and (self._verbose or _is_notable(f.severity))
        ]
        token_groups = self._group_by_rule([f for f in self._report.findings if f.file == path])

        entries: list[tuple[str, object]] = [("structure", finding) for finding in structure]
        entries.extend(("tokens", group) for group in token_groups)

        lines = [f"  {self._style(path, ANSI_BOLD)}"]
        for index, (kind, payload) in enumerate(entries):
            is_last = index == len(entries) - 1
            if kind == "structure":
                assert isinstance(payload, StructureFinding)
                lines.extend(self._render_structure_row(payload, is_last=is_last))
            else:
                assert isinstance(payload, tuple)
                rule, findings = payload
                lines.extend(self._render_token_rule(rule, findings, is_last=is_last))
        return lines

    def _render_aggregate_section(self) -> list[str]:
        aggregate = [f for f in self._report.findings if f.is_aggregate]
        groups = self._group_by_rule(aggregate)
        if not groups:
            return []
        lines = [f"  {self._style(AGGREGATE_LABEL, ANSI_BOLD)}"]
        for index, (rule, findings) in enumerate(groups):
            lines.extend(self._render_token_rule(rule, findings, is_last=index == len(groups) - 1))
        return lines

    def _group_by_rule(self, findings: list[LintFinding]) -> list[tuple[str, list[LintFinding]]]:
        """Group visible findings by rule, preserving rule order of first appearance."""
        groups: dict[str, list[LintFinding]] = {}
        for finding in findings:
            if self._verbose or _is_notable(finding.severity):
                groups.setdefault(finding.rule, []).append(finding)
        return list(groups.items())

    def _render_structure_row(self, finding: StructureFinding, *, is_last: bool) -> list[str]:
        connector = "└─" if is_last else "├─"
        lines = [
            f"  {self._style(connector, ANSI_DIM)} "
            f"{self._rule_name(finding.rule, finding.severity)}   "
            f"{finding.message}   {self._status(finding.severity)}"
        ]
        if not is_last:
            lines.append(f"  {self._style('│', ANSI_DIM)}")
        return lines

    def _render_token_rule(self, rule: str, findings: list[LintFinding], *, is_last: bool) -> list[str]:
        worst = _worst([f.severity for f in findings])
        connector = "└─" if is_last else "├─"
        lines = [f"  {self._style(connector, ANSI_DIM)} {self._rule_name(rule, worst)}"]
        indent = TABLE_INDENT if is_last else f"  {self._style('│', ANSI_DIM)}  "
        lines.extend(f"{indent}{row}" for row in self._render_token_table(findings))
        if not is_last:
            lines.append(f"  {self._style('│', ANSI_DIM)}")
        return lines

    def _render_token_table(self, findings: list[LintFinding]) -> list[str]:
        """Render a rounded box table of model x token counts."""
        rows = [
            (
                f.model,
                format_number(f.token_count),
                format_number(f.warning_threshold),
                format_number(f.error_threshold),
                STATUS_SYMBOLS[f.severity],
                f.severity,
            )
            for f in findings
        ]
        widths = [len(header) for header in TOKEN_TABLE_HEADERS]
        for row in rows:
            for column in range(len(TOKEN_TABLE_HEADERS)):
                widths[column] = max(widths[column], len(row[column]))

        def _hline(left: str, fill: str, mid: str, right: str) -> str:
            return left + mid.join(fill * (width + 2) for width in widths) + right

        right_aligned = {1, 2, 3}
        header_cells = [
            self._style(h.rjust(widths[i]) if i in right_aligned else h.ljust(widths[i]), ANSI_BOLD)
            for i, h in enumerate(TOKEN_TABLE_HEADERS)
        ]
        lines = [
            _hline("╭", "─", "┬", "╮"),
            "│ " + " ┆ ".join(header_cells) + " │",
            _hline("╞", "═", "╪", "╡"),
        ]
        for model, tokens, warning, error, status, severity in rows:
            color = SEVERITY_COLORS[severity]
            cells = [
                model.ljust(widths[0]),
                self._style(tokens.rjust(widths[1]), color),
                self._style(warning.rjust(widths[2]), ANSI_DIM),
                self._style(error.rjust(widths[3]), ANSI_DIM),
                self._style(status.ljust(widths[4]), color),
            ]
            lines.append("│ " + " ┆ ".join(cells) + " │")
        lines.append(_hline("╰", "─", "┴", "╯"))
        return lines

    def _render_summary(self) -> str:
        report = self._report
        passed = report.count("pass")
        warnings = report.count("warning")
        errors = report.count("error")

        parts: list[str] = []
        if passed:
            parts.append(self._style(f"{passed} passed", ANSI_GREEN))
        if warnings:
            parts.append(self._style(f"{warnings} warnings", ANSI_YELLOW))
        if errors:
            parts.append(self._style(f"{errors} errors", ANSI_RED))

        file_count = len(report.files)
        noun = "file" if file_count == 1 else "files"
        return f"  {self._style('Results:', ANSI_BOLD)} {', '.join(parts)} across {file_count} {noun}"

    def _rule_name(self, rule: str, severity: Severity) -> str:
        return self._style(rule, SEVERITY_COLORS[severity])

    def _status(self, severity: Severity) -> str:
        return self._style(STATUS_SYMBOLS[severity], SEVERITY_COLORS[severity])

    def _style(self, text: str, code: str) -> str:
        if not self._color:
            return text
        return f"{code}{text}{ANSI_RESET}"
