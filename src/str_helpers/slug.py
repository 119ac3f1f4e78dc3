"""str_helpers.slug

URL-friendly slugs built on the transliteration table.
"""
from __future__ import annotations

import re

from .casing import to_snake_case
from .charmap import to_ascii

__all__ = [
    "slugify",
    "snake_case_safe",
]


def _punctuation_re(separator: str) -> re.Pattern[str]:
    # Letters, numbers, whitespace and the separator survive; ``\w`` also
    # matches "_", which only survives when it is the separator.
    pattern = r"[^%s\w\s]+" % re.escape(separator)
    if separator != "_":
        pattern += "|_+"
    return re.compile(pattern)


def slugify(title: str, separator: str = "-") -> str:
    """Return a lowercase ASCII slug of *title* joined by *separator*.

    >>> slugify("Héllo Wôrld!")
    'hello-world'
    """
    title = to_ascii(title)

    # Runs of the other separator character become the separator
    flip = "_" if separator == "-" else "-"
    title = re.sub(re.escape(flip) + "+", lambda _m: separator, title)

    title = _punctuation_re(separator).sub("", title.lower())

    # Separator characters and whitespace collapse into a single separator
    title = re.sub(r"[%s\s]+" % re.escape(separator), lambda _m: separator, title)

    return title.strip(separator)


def snake_case_safe(title: str, separator: str = "_") -> str:
    """Snake-case *title*, then slugify the result with *separator*."""
    return slugify(to_snake_case(title), separator)
