"""Shared constants for skills-lint."""
