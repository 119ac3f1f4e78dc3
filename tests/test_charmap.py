import pytest
from str_helpers.charmap import lookup, to_ascii


def test_table_starts_with_digits_and_ends_with_spaces():
    tokens = list(lookup())
    assert tokens[:10] == [str(d) for d in range(10)]
    assert tokens[10:36] == [chr(c) for c in range(ord("a"), ord("z") + 1)]
    assert tokens[-1] == " "


def test_table_entries_are_non_empty_ascii():
    for token, sources in lookup().items():
        assert token and token.isascii()
        assert sources
        assert all(sources)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        lookup()["a"] = ("x",)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Ärger", "Arger"),
        ("straße", "strasse"),
        ("Щука", "Shchuka"),
        ("Жук", "Zhuk"),
        ("чай", "chay"),
        ("Ψ", "Ps"),
        ("©2024", "(c)2024"),
        ("a b　c", "a b c"),
        ("°", "0"),
        ("x²", "x2"),
        ("ｆｕｌｌ", "full"),
    ],
)
def test_to_ascii_transliterates(value, expected):
    assert to_ascii(value) == expected


def test_earlier_token_wins():
    # "đ" is listed under both "d" and "dj"; the single letter comes first.
    assert to_ascii("đ") == "d"


def test_to_ascii_drops_unmapped_and_control_characters():
    assert to_ascii("日本") == ""
    assert to_ascii("tab\there\n") == "tabhere"
    assert to_ascii("plain ASCII ~!") == "plain ASCII ~!"


def test_to_ascii_empty():
    assert to_ascii("") == ""
