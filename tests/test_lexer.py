from __future__ import annotations

from collections.abc import Iterator

import pytest

from pyinireader.ini.consts import MAX_LINE_LENGTH, NONAME, LineKind
from pyinireader.ini.lexer import IniLine, classify_line, split_lines, tokenize


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("[a]\nx=1\n[b]\ny=2\n", ["[a]", "x=1", "[b]", "y=2"]),
        ("[a]\r\nx=1\r\ny=2\r\n", ["[a]", "x=1", "y=2"]),
        ("[a]\rx=1\ry=2", ["[a]", "x=1", "y=2"]),
        ("a\n\nb\n", ["a", "", "b"]),
        ("", []),
    ],
    ids=["lf", "crlf", "cr-only", "blank-line", "empty"],
)
def test_split_lines(text: str, expected: list[str]):
    assert list(split_lines(text)) == expected


def test_split_lines_uses_cr_with_a_single_lf():
    # only one '\n' in the whole text, so '\r' is the delimiter.
    assert list(split_lines("[a]\rx=1\r\ny=2\r")) == ["[a]", "x=1", "\ny=2"]


def test_split_lines_is_lazy():
    lines = split_lines("[a]\nx=1\ny=2\n")
    assert isinstance(lines, Iterator)
    assert next(lines) == "[a]"
    assert list(lines) == ["x=1", "y=2"]


def test_section_header_is_verbatim():
    assert classify_line("[General]") == IniLine(LineKind.SECTION, "General")
    assert classify_line("[ spaced ]") == IniLine(LineKind.SECTION, " spaced ")


def test_header_wins_over_item():
    assert classify_line("[a=b]") == IniLine(LineKind.SECTION, "a=b")


@pytest.mark.parametrize(
    ("line", "key", "value"),
    [
        ("key=value", "key", "value"),
        ("  key  =  value  ", "key", "value"),
        ("k=v=w", "k", "v=w"),
        ("empty=", "empty", ""),
        ("=orphan", "", "orphan"),
    ],
)
def test_item_lines(line: str, key: str, value: str):
    assert classify_line(line) == IniLine(LineKind.ITEM, key, value)


@pytest.mark.parametrize(
    "line",
    ["", "; comment", "# comment", "x" * (MAX_LINE_LENGTH + 1) + "=1"],
    ids=["blank", "semicolon", "hash", "overlong"],
)
def test_ignored_lines(line: str):
    assert classify_line(line, store_any_line=True) is None


def test_line_at_length_limit_is_kept():
    line = "k=" + "v" * (MAX_LINE_LENGTH - 2)
    assert len(line) == MAX_LINE_LENGTH
    assert classify_line(line).kind is LineKind.ITEM


def test_freeform_line_only_when_asked():
    assert classify_line("  just some text") is None
    assert classify_line("  just some text", store_any_line=True) == IniLine(
        LineKind.FREEFORM, NONAME, "  just some text")


def test_tokenize_reports_line_numbers():
    tokens = list(tokenize("[a]\n; note\n\nx = 1\n"))
    assert tokens == [
        (1, IniLine(LineKind.SECTION, "a")),
        (4, IniLine(LineKind.ITEM, "x", "1")),
    ]
