"""JSON report writer."""

from __future__ import annotations

from pathlib import Path

from skills_lint.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX
from skills_lint.io import write_json_atomic
from skills_lint.model import LintReport


def write_json_report(path: Path, report: LintReport) -> None:
    """Write *report* as JSON to *path* atomically, creating parent directories."""
    write_json_atomic(
        path=path,
        payload=report.to_dict(),
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
        sort_keys=False,
    )
