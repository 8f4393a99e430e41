"""Command-line interface for skills-lint."""
