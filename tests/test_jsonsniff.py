import logging
import sys

import pytest
from str_helpers.jsonsniff import JsonObject, JsonParseFailure, JsonResult, parse_json_if_looks_like_json


def test_decodes_object():
    result = parse_json_if_looks_like_json('{"a":1}')
    assert result.ok
    assert result.value == {"a": 1}
    assert isinstance(result.value, JsonObject)
    assert result.value.a == 1


def test_as_array_returns_plain_dicts():
    result = parse_json_if_looks_like_json('{"a": {"b": [1, 2]}}', as_array=True)
    assert type(result.value) is dict
    assert type(result.value["a"]) is dict


def test_return_decoded_false():
    result = parse_json_if_looks_like_json('{"a":1}', return_decoded=False)
    assert result.ok
    assert result.value is True


def test_surrounding_whitespace_is_allowed():
    assert parse_json_if_looks_like_json('  {"a": 1}\n').value == {"a": 1}


def test_falsy_values_are_not_failures():
    result = parse_json_if_looks_like_json('{"flag": false}')
    assert result
    assert result.value.flag is False
    assert JsonResult(value=False)


def test_missing_attribute_raises_attribute_error():
    value = parse_json_if_looks_like_json('{"a":1}').value
    with pytest.raises(AttributeError):
        value.missing


@pytest.mark.parametrize(
    "text, failure",
    [
        ("not json", JsonParseFailure.GUARD_FAILED),
        ("", JsonParseFailure.GUARD_FAILED),
        ("[1, 2]", JsonParseFailure.GUARD_FAILED),
        ("{invalid}", JsonParseFailure.SYNTAX_ERROR),
        ('{"a":1}}', JsonParseFailure.SYNTAX_ERROR),
        ('{"a": "x\ty"}', JsonParseFailure.CONTROL_CHARACTER),
        ('{"a": [1}', JsonParseFailure.STATE_MISMATCH),
        ('{"a": 1]}', JsonParseFailure.STATE_MISMATCH),
        ("{\"a\": NaN}", JsonParseFailure.SYNTAX_ERROR),
        ("{\"a\": Infinity}", JsonParseFailure.SYNTAX_ERROR),
        ("{\"a\": -Infinity}", JsonParseFailure.SYNTAX_ERROR),
        (b'{"a": "\xff"}', JsonParseFailure.INVALID_ENCODING),
    ],
)
def test_failures(text, failure):
    result = parse_json_if_looks_like_json(text)
    assert not result.ok
    assert not result
    assert result.failure is failure
    assert result.value is None


def test_bytes_input():
    assert parse_json_if_looks_like_json(b'{"a": 1}').value == {"a": 1}


@pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no int digit limit")
def test_unclassified_value_error_is_unknown():
    result = parse_json_if_looks_like_json('{"a": ' + "1" * 5000 + "}")
    assert result.failure is JsonParseFailure.UNKNOWN


def test_depth_limit():
    nested = '{"a": ' + "[" * 10 + "]" * 10 + "}"
    assert parse_json_if_looks_like_json(nested).ok
    result = parse_json_if_looks_like_json(nested, max_depth=5)
    assert result.failure is JsonParseFailure.DEPTH_EXCEEDED


def test_depth_beyond_recursion_limit():
    nested = '{"a": ' + "[" * 100000 + "]" * 100000 + "}"
    result = parse_json_if_looks_like_json(nested)
    assert result.failure is JsonParseFailure.DEPTH_EXCEEDED


def test_failures_are_logged_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="str_helpers.jsonsniff")
    parse_json_if_looks_like_json("not json")
    parse_json_if_looks_like_json("{invalid}")
    messages = [r.getMessage() for r in caplog.records]
    assert any("does not start or end properly" in m for m in messages)
    assert any("Syntax error" in m for m in messages)
    assert all(r.levelno == logging.DEBUG for r in caplog.records)
