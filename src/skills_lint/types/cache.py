"""Typed cache payload structure."""

from __future__ import annotations

from typing import TypedDict


class CachePayload(TypedDict):
    """Top-level token cache payload persisted to disk."""

    v: int
    entries: dict[str, int]
