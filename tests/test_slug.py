import re

import pytest
from str_helpers.slug import slugify, snake_case_safe

SAMPLES = [
    "",
    "Héllo Wôrld!",
    "  Multiple   Spaces_here--now ",
    "Ünïçödé Tëst",
    "__init__",
    "--a--b--",
    "Привет, мир",
    "C++ & C#",
    "日本語",
    "tab\tand\nnewline",
    "already-a-slug",
]


def test_slugify_examples():
    assert slugify("Héllo Wôrld!", "-") == "hello-world"
    assert slugify("  Multiple   Spaces_here--now ", "-") == "multiple-spaces-here-now"
    assert slugify("Ünïçödé Tëst", "_") == "unicode_test"


def test_slugify_default_separator():
    assert slugify("Hello World") == "hello-world"


def test_slugify_flips_other_separator():
    assert slugify("foo_bar-baz") == "foo-bar-baz"
    assert slugify("foo_bar-baz", "_") == "foo_bar_baz"


def test_slugify_transliterates_cyrillic():
    assert slugify("Привет, мир") == "privet-mir"


def test_slugify_drops_punctuation():
    assert slugify("C++ & C#") == "c-c"
    assert slugify("a -- b") == "a-b"


def test_slugify_empty_results():
    assert slugify("") == ""
    assert slugify("!!!") == ""
    assert slugify("日本語") == ""
    assert slugify("---", "-") == ""


def test_slugify_other_separator_drops_underscores():
    assert slugify("Hello World_x", ".") == "hello.worldx"


@pytest.mark.parametrize("sep", ["-", "_"])
@pytest.mark.parametrize("text", SAMPLES)
def test_slugify_is_idempotent(text, sep):
    once = slugify(text, sep)
    assert slugify(once, sep) == once


@pytest.mark.parametrize("sep", ["-", "_"])
@pytest.mark.parametrize("text", SAMPLES)
def test_slugify_output_shape(text, sep):
    slug = slugify(text, sep)
    if slug:
        assert re.fullmatch(r"[a-z0-9]+(?:%s[a-z0-9]+)*" % re.escape(sep), slug)


def test_snake_case_safe():
    assert snake_case_safe("HelloWorld") == "hello_world"
    assert snake_case_safe("Hello World") == "hello_world"
    assert snake_case_safe("ÜberCool") == "uber_cool"
    assert snake_case_safe("HelloWorld", "-") == "hello-world"
