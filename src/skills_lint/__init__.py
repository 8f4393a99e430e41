"""Token-budget linter for agent skill markdown files."""

__version__ = "0.4.0"
