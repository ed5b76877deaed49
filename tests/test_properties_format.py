"""Tests for the properties mapping format."""

import pytest

from headermap.properties_format import format_property, parse_properties


def test_separators_and_comments() -> None:
    """Verify the accepted separators and ignored lines."""
    text = (
        "# comment\n"
        "! another comment\n"
        "\n"
        "   com.a.Eq=a/Eq.h\n"
        "com.a.Colon:a/Colon.h\n"
        "com.a.Space   a/Space.h\n"
        "com.a.Padded =  a/Padded.h\n"
    )
    assert parse_properties(text) == [
        ("com.a.Eq", "a/Eq.h"),
        ("com.a.Colon", "a/Colon.h"),
        ("com.a.Space", "a/Space.h"),
        ("com.a.Padded", "a/Padded.h"),
    ]


def test_line_continuation() -> None:
    """Verify that a trailing backslash joins the next line."""
    text = "com.a.Long=some/\\\n    deep/path.h\ncom.a.Next=n.h"
    assert parse_properties(text) == [
        ("com.a.Long", "some/deep/path.h"),
        ("com.a.Next", "n.h"),
    ]


def test_escaped_backslash_is_not_continuation() -> None:
    """Verify that an even number of trailing backslashes ends the line."""
    assert parse_properties("k=dir\\\\\nj=v\n") == [("k", "dir\\"), ("j", "v")]


def test_escapes() -> None:
    """Verify character and unicode escapes."""
    assert parse_properties("a\\=b=tab\\there\\u00e9\n") == [("a=b", "tab\there\u00e9")]


def test_crlf_line_endings() -> None:
    """Verify Windows line endings are handled."""
    assert parse_properties("a=1\r\nb=2\r\n") == [("a", "1"), ("b", "2")]


def test_key_without_value() -> None:
    """Verify that a bare key maps to the empty string."""
    assert parse_properties("lonely\n") == [("lonely", "")]


def test_malformed_unicode_escape() -> None:
    """Verify that a broken unicode escape is rejected."""
    with pytest.raises(ValueError, match="Malformed"):
        parse_properties("k=\\u12\n")


def test_format_plain_entry() -> None:
    """Verify that ordinary entries are written unescaped."""
    assert format_property("com.x.Y", "com/x/Y.h") == "com.x.Y=com/x/Y.h"


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("!bang", "v"),
        ("with space", "v"),
        ("k:colon", "a=b:c"),
        ("k", "  padded"),
        ("k", "ends\\"),
        ("k", "multi\nline"),
    ],
)
def test_format_parses_back(key: str, value: str) -> None:
    """Verify that escaped entries parse back unchanged."""
    assert parse_properties(format_property(key, value) + "\n") == [(key, value)]


def test_escaped_surrogate_pair_joined() -> None:
    """Verify that a UTF-16 escape pair decodes to one code point."""
    assert parse_properties("com.x.\\uD83D\\uDE00=\\uD83D\\uDE00.h\n") == [
        ("com.x.\U0001f600", "\U0001f600.h")
    ]


def test_lone_surrogate_escaped_on_format() -> None:
    """Verify that lone surrogates are written as unicode escapes."""
    line = format_property("k", "a\ud83db")
    assert line == "k=a\\uD83Db"
    assert parse_properties(line + "\n") == [("k", "a\ud83db")]
