from __future__ import annotations

import pytest

from utilbelt.errors import IndexOutOfRange, InvalidPatternError, InvalidRangeError
from utilbelt.text import (
    append_path_component,
    char_at,
    deleting_prefix,
    deleting_suffix,
    graphemes,
    is_numeric,
    length,
    letters,
    lines,
    matches,
    replace_bounded,
    slice_closed,
    slice_from,
    slice_range,
    slice_through,
    slice_to,
    slugify,
    substitute_variables,
    trimmed,
    truncate,
    web_addresses,
    with_prefix,
    with_suffix,
    word_count,
)

# "e" followed by a combining acute accent is one user-perceived character.
CAFE = "cafe\u0301!"


def test_graphemes_group_combining_marks():
    assert length(CAFE) == 5
    assert graphemes(CAFE)[3] == "e\u0301"
    assert length("👍🏽ok") == 3
    assert letters(CAFE) == ["c", "a", "f", "e\u0301", "!"]


def test_char_at():
    assert char_at("hello", 1) == "e"
    assert char_at(CAFE, 3) == "e\u0301"
    with pytest.raises(IndexOutOfRange):
        char_at("hello", 5)
    with pytest.raises(IndexError):
        char_at("hello", -1)


def test_half_open_slices_are_lenient():
    assert slice_range("hello", 1, 3) == "el"
    assert slice_range("hello", 10, 12) == ""
    assert slice_range("hello", 1, 100) == "ello"
    assert slice_range("hello", 2, 2) == ""
    assert slice_range(CAFE, 2, 4) == "fe\u0301"


def test_closed_and_partial_slices():
    assert slice_closed("hello", 1, 3) == "ell"
    assert slice_closed("hello", 1, 99) == "ello"
    assert slice_closed("hello", 5, 9) == ""
    assert slice_from("hello", 2) == "llo"
    assert slice_from("hello", 9) == ""
    assert slice_to("hello", 2) == "he"
    assert slice_to("hello", 99) == "hello"
    assert slice_through("hello", 2) == "hel"
    assert slice_through("hello", 99) == "hello"


def test_slices_reject_bad_offsets():
    with pytest.raises(IndexOutOfRange):
        slice_range("hello", -1, 2)
    with pytest.raises(IndexOutOfRange):
        slice_through("hello", -1)
    with pytest.raises(InvalidRangeError):
        slice_range("hello", 3, 1)
    with pytest.raises(InvalidRangeError):
        slice_closed("hello", 3, 2)


def test_prefix_and_suffix_helpers():
    assert deleting_prefix("unhappy", "un") == "happy"
    assert deleting_prefix("happy", "un") == "happy"
    assert deleting_prefix("unun", "un") == "un"
    assert deleting_suffix("file.txt.txt", ".txt") == "file.txt"
    assert deleting_suffix("file", "") == "file"
    assert with_prefix("example.com", "https://") == "https://example.com"
    assert with_prefix("https://example.com", "https://") == "https://example.com"
    assert with_suffix("path", "/") == "path/"
    assert with_suffix(with_suffix("path", "/"), "/") == "path/"


def test_affix_helpers_respect_combining_marks():
    eclair = "e\u0301clair"
    assert deleting_prefix(eclair, "e") == eclair
    assert deleting_prefix(eclair, "e\u0301") == "clair"
    assert deleting_suffix("cafe\u0301", "\u0301") == "cafe\u0301"
    assert deleting_suffix("cafe\u0301", "e\u0301") == "caf"
    assert with_prefix(eclair, "e") == "e" + eclair
    assert with_suffix("cafe\u0301", "\u0301") == "cafe\u0301\u0301"
    assert with_suffix("cafe\u0301", "e\u0301") == "cafe\u0301"


def test_truncate():
    assert truncate("hello world", 5, True) == "hello..."
    assert truncate("hello world", 5) == "hello"
    assert truncate("hi", 5, False) == "hi"
    assert truncate("hello", 5, True) == "hello"
    assert truncate(CAFE, 4, True) == "cafe\u0301..."


def test_replace_bounded():
    assert replace_bounded("a-b-c-d", "-", "+", 2) == "a+b+c-d"
    assert replace_bounded("a-b", "-", "+", 10) == "a+b"
    assert replace_bounded("a-b", "-", "+", 0) == "a-b"
    assert replace_bounded("aaaa", "aa", "b", 1) == "baa"
    assert replace_bounded("abc", "", "x", 3) == "abc"
    with pytest.raises(ValueError):
        replace_bounded("abc", "b", "x", -1)


def test_substitute_variables():
    assert substitute_variables("{$x}", {"x": "42"}) == "42"
    assert substitute_variables("{$missing}", {}) == ""
    assert substitute_variables("no vars here", {}) == "no vars here"
    assert (
        substitute_variables("{$name} has {$count} items, {$name}!", {"name": "Ada", "count": 3})
        == "Ada has 3 items, Ada!"
    )
    assert substitute_variables("cost: {$price}", {"price": 2.5}) == "cost: 2.5"
    assert substitute_variables("{$}", {"": "x"}) == "{$}"
    assert substitute_variables("{$a}", {"a": "{$b}", "b": "no"}) == "{$b}"
    assert substitute_variables("on={$on} off={$off}", {"on": True, "off": False}) == "on=true off=false"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello, World!", "hello-world"),
        ("  Crème brûlée  ", "creme-brulee"),
        ("Привет мир", "privet-mir"),
        ("already-a-slug", "already-a-slug"),
        ("!!!", None),
        ("", None),
    ],
)
def test_slugify(text, expected):
    assert slugify(text) == expected


def test_matches():
    assert matches("Hello World", r"wor") is False
    assert matches("Hello World", r"wor", case_insensitive=True) is True
    assert matches("abc123", r"\d+") is True
    with pytest.raises(InvalidPatternError):
        matches("abc", "(unclosed")


def test_is_numeric():
    assert is_numeric("3.14")
    assert is_numeric("-2e10")
    assert not is_numeric("")
    assert not is_numeric(" 3")
    assert not is_numeric("1_000")
    assert not is_numeric("three")


def test_small_string_helpers():
    assert lines("a\nb\n") == ["a", "b", ""]
    assert trimmed("\n  padded \t") == "padded"
    assert word_count("The quick, brown fox!") == 4
    assert word_count("") == 0


def test_web_addresses():
    text = "Visit https://example.com/page, or www.example.org. Mail jo@example.net."
    assert web_addresses(text) == [
        "https://example.com/page",
        "www.example.org",
        "jo@example.net",
    ]
    assert web_addresses("nothing to see") == []


def test_append_path_component():
    assert append_path_component("https://example.com/api", "users") == "https://example.com/api/users"
    assert append_path_component("https://example.com/api/", "/users") == "https://example.com/api/users"
    assert append_path_component("https://example.com/api?q=1", "a b") == "https://example.com/api/a%20b?q=1"
