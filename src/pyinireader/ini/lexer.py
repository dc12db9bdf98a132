# -*- encoding: utf-8 -*-
# @File   : lexer.py
# @Time   : 2024/10/12 20:51:37

"""Turns raw INI text into classified lines.

Only one line terminator is used per text:

- `'\\n'` normally;
- `'\\r'` if the whole text holds no more than one `'\\n'`,
which is how old Mac-style files end up here.

Stray `'\\r'`s are removed from every line afterwards.
"""

from typing import Iterator, NamedTuple

from .consts import (
    COMMENT_MARKS,
    ITEM_PATTERN,
    MAX_LINE_LENGTH,
    NONAME,
    SECTION_PATTERN,
    LineKind,
)


class IniLine(NamedTuple):
    kind: LineKind
    key: str    # section name for headers
    value: str = ''


def split_lines(text: str) -> Iterator[str]:
    delimiter = '\r' if text.count('\n') <= 1 else '\n'
    pos, end = 0, len(text)
    while pos < end:
        nxt = text.find(delimiter, pos)
        if nxt == -1:
            nxt = end
        yield text[pos:nxt].replace('\r', '')
        pos = nxt + 1


def is_ignored(line: str) -> bool:
    """Blank, overlong and comment lines never reach the classifier."""
    return (
        not line
        or len(line) > MAX_LINE_LENGTH
        or line.startswith(COMMENT_MARKS)
    )


def classify_line(line: str, store_any_line: bool = False) -> IniLine | None:
    if is_ignored(line):
        return None
    if (m := SECTION_PATTERN.fullmatch(line)) is not None:
        # section names are kept verbatim.
        return IniLine(LineKind.SECTION, m.group(1))
    if (m := ITEM_PATTERN.fullmatch(line)) is not None:
        return IniLine(LineKind.ITEM, m.group(1).strip(), m.group(2).strip())
    if store_any_line:
        return IniLine(LineKind.FREEFORM, NONAME, line)
    return None


def tokenize(
    text: str, store_any_line: bool = False
) -> Iterator[tuple[int, IniLine]]:
    """Yield `(line_no, line)` for every meaningful line, 1-based."""
    for line_no, raw in enumerate(split_lines(text), 1):
        if (line := classify_line(raw, store_any_line)) is not None:
            yield line_no, line
