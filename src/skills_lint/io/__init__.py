"""Shared file I/O helpers."""

from .files import read_skill_file
from .json_io import load_json_file, write_json_atomic, write_text_atomic

__all__ = ["load_json_file", "read_skill_file", "write_json_atomic", "write_text_atomic"]
