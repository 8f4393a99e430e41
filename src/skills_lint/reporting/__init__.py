"""Report rendering and output writers."""

from .stdout import StdoutReporter
from .writer import write_json_report

__all__ = ["StdoutReporter", "write_json_report"]
