"""str_helpers.jsonsniff

Decode a string as JSON only when it looks like a JSON object literal.

Failures never raise: they come back as a :class:`JsonResult` whose
``failure`` names what went wrong, and a debug line is logged.  Checking
``result.ok`` (or the result's truthiness) keeps a decoded ``false`` apart
from a failed parse.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

__all__ = [
    "JsonObject",
    "JsonParseFailure",
    "JsonResult",
    "parse_json_if_looks_like_json",
]

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 512


class JsonParseFailure(Enum):
    """Why a JSON sniff failed; the value is the logged message."""

    DEPTH_EXCEEDED = "Maximum stack depth exceeded."
    STATE_MISMATCH = "Underflow or the modes mismatch."
    CONTROL_CHARACTER = "Unexpected control character found."
    SYNTAX_ERROR = "Syntax error, malformed JSON."
    INVALID_ENCODING = "Malformed UTF-8 characters, possibly incorrectly encoded."
    UNKNOWN = "Unknown error."
    GUARD_FAILED = "String does not start or end properly."


class JsonObject(dict):
    """A decoded JSON object that also allows ``obj.key`` access."""

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None


@dataclass(frozen=True)
class JsonResult:
    value: Any = None
    failure: Optional[JsonParseFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def __bool__(self) -> bool:
        return self.ok


class _NonStandardConstant(ValueError):
    """Raised for NaN, Infinity and -Infinity, which JSON does not allow."""


def _reject_constant(name: str) -> Any:
    raise _NonStandardConstant(name)


def _failed(failure: JsonParseFailure) -> JsonResult:
    logger.debug("parse_json_if_looks_like_json: %s", failure.value)
    return JsonResult(failure=failure)


def _classify(exc: json.JSONDecodeError) -> JsonParseFailure:
    if exc.msg.startswith("Invalid control character"):
        return JsonParseFailure.CONTROL_CHARACTER
    # A closing bracket where a delimiter was due: "]" closing an object or
    # "}" closing an array.
    if exc.msg.startswith("Expecting ',' delimiter") and exc.doc[exc.pos:exc.pos + 1] in ("]", "}"):
        return JsonParseFailure.STATE_MISMATCH
    return JsonParseFailure.SYNTAX_ERROR


def _nesting_depth(value: Any) -> int:
    deepest = 0
    stack = [(value, 1)]
    while stack:
        node, level = stack.pop()
        if isinstance(node, dict):
            children = list(node.values())
        elif isinstance(node, list):
            children = node
        else:
            continue
        deepest = max(deepest, level)
        stack.extend((child, level + 1) for child in children)
    return deepest


def parse_json_if_looks_like_json(
    text: Union[str, bytes],
    return_decoded: bool = True,
    as_array: bool = False,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> JsonResult:
    """Decode *text* if, once trimmed, it starts with ``{`` and ends with ``}``.

    Args:
        text: the candidate JSON document; ``bytes`` must be UTF-8.
        return_decoded: when False a successful result carries ``True``
            instead of the decoded document.
        as_array: decode JSON objects to plain ``dict`` instead of
            :class:`JsonObject`.
        max_depth: deepest container nesting accepted.

    Returns:
        A :class:`JsonResult`; ``failure`` is set when nothing was decoded.
    """
    stripped = text.strip()
    if isinstance(stripped, (bytes, bytearray)):
        looks_like_json = stripped.startswith(b"{") and stripped.endswith(b"}")
    else:
        looks_like_json = stripped.startswith("{") and stripped.endswith("}")
    if not looks_like_json:
        return _failed(JsonParseFailure.GUARD_FAILED)

    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError:
            return _failed(JsonParseFailure.INVALID_ENCODING)

    try:
        decoded = json.loads(
            text,
            object_hook=None if as_array else JsonObject,
            parse_constant=_reject_constant,
        )
    except RecursionError:
        return _failed(JsonParseFailure.DEPTH_EXCEEDED)
    except json.JSONDecodeError as exc:
        return _failed(_classify(exc))
    except _NonStandardConstant:
        return _failed(JsonParseFailure.SYNTAX_ERROR)
    except ValueError:
        return _failed(JsonParseFailure.UNKNOWN)

    if _nesting_depth(decoded) > max_depth:
        return _failed(JsonParseFailure.DEPTH_EXCEEDED)

    return JsonResult(value=decoded if return_decoded else True)
