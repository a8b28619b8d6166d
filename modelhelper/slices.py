"""Helpers for lists of strings."""

from __future__ import annotations

from collections.abc import Iterable


def max_len(items: Iterable[str]) -> int:
    """Length of the longest string, 0 for an empty list."""
    return max((len(item) for item in items), default=0)


def contains(items: Iterable[str], value: str) -> bool:
    """Case-insensitive membership test."""
    wanted = value.lower()
    return any(item.lower() == wanted for item in items)