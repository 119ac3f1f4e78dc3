"""str_helpers.utils

Substring predicates and truncation shared across the str_helpers package.
"""
from __future__ import annotations

from typing import Iterable, Union

__all__ = [
    "starts_with_any",
    "contains_any",
    "ends_with_any",
    "truncate",
]

Needles = Union[str, Iterable[str]]

# Characters trimmed from the cut end of a truncated string.
_TRAILING_WS = " \t\n\r\0\x0b"


def _as_list(needles: Needles) -> list[str]:
    if isinstance(needles, str):
        return [needles]
    return list(needles)


def starts_with_any(needles: Needles, haystack: str) -> bool:
    """Return True if *haystack* starts with any non-empty needle."""
    return any(n != "" and haystack.startswith(n) for n in _as_list(needles))


def contains_any(needles: Needles, haystack: str) -> bool:
    """Return True if any non-empty needle occurs in *haystack*."""
    return any(n != "" and n in haystack for n in _as_list(needles))


def ends_with_any(needles: Needles, haystack: str) -> bool:
    """Return True if *haystack* ends with any needle.  ``""`` always matches."""
    return any(haystack.endswith(n) for n in _as_list(needles))


def truncate(value: str, limit: int = 100, end: str = "...") -> str:
    """Limit *value* to *limit* characters, appending *end* when it was cut."""
    if len(value) <= limit:
        return value
    return value[:limit].rstrip(_TRAILING_WS) + end
