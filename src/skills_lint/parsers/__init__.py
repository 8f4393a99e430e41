"""Parsers for skill markdown documents."""

from .frontmatter import extract_frontmatter, frontmatter_field, parse_frontmatter, split_document

__all__ = ["extract_frontmatter", "frontmatter_field", "parse_frontmatter", "split_document"]
