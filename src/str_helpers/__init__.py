# noqa: D104
"""Top-level package for str_helpers."""
from __future__ import annotations

from .casing import to_camel_case, to_snake_case, to_studly_case
from .charmap import lookup, to_ascii
from .jsonsniff import JsonObject, JsonParseFailure, JsonResult, parse_json_if_looks_like_json
from .slug import slugify, snake_case_safe
from .utils import contains_any, ends_with_any, starts_with_any, truncate

__version__ = "0.1.0"
__all__ = [
    "JsonObject",
    "JsonParseFailure",
    "JsonResult",
    "StringTools",
    "contains_any",
    "ends_with_any",
    "lookup",
    "parse_json_if_looks_like_json",
    "slugify",
    "snake_case_safe",
    "starts_with_any",
    "to_ascii",
    "to_camel_case",
    "to_snake_case",
    "to_studly_case",
    "truncate",
]


def __getattr__(name):  # type: ignore[override]
    if name == "StringTools":
        from .tools import StringTools

        return StringTools
    raise AttributeError(name)
