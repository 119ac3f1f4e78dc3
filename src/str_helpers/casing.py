"""str_helpers.casing

Snake, camel and studly case conversions.  Results are memoized; the
functions are pure so the caches only affect speed.
"""
from __future__ import annotations

import re
from functools import lru_cache

__all__ = [
    "to_snake_case",
    "to_camel_case",
    "to_studly_case",
]

_LOWER_RE = re.compile(r"[a-z]+")
_BEFORE_UPPER_RE = re.compile(r"(.)(?=[A-Z])")
_WORD_START_RE = re.compile(r"(?:^|(?<=[ \t\r\n\f\v]))[^ \t\r\n\f\v]")


@lru_cache(maxsize=1024)
def to_snake_case(value: str, delimiter: str = "_") -> str:
    """Convert a string to snake case.

    ``"HelloWorld"`` becomes ``"hello_world"``.  A value made only of
    lowercase ASCII letters is returned untouched.
    """
    if not _LOWER_RE.fullmatch(value):
        value = _BEFORE_UPPER_RE.sub(lambda m: m.group(1) + delimiter, value).lower()
    return value


@lru_cache(maxsize=1024)
def to_studly_case(value: str) -> str:
    """Convert a value to studly caps case (``"hello-world"`` -> ``"HelloWorld"``)."""
    value = value.replace("-", " ").replace("_", " ")
    value = _WORD_START_RE.sub(lambda m: m.group(0).upper(), value)
    return value.replace(" ", "")


@lru_cache(maxsize=1024)
def to_camel_case(value: str) -> str:
    """Convert a value to camel case."""
    studly = to_studly_case(value)
    return studly[:1].lower() + studly[1:]
