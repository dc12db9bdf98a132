# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 21:40:03

"""Errors raised by the INI reader.

Parsing errors abort the whole `parse()` call, leaving the document empty.
Lookup errors are only raised where an empty result would be ambiguous,
other reads just return a blank value.
"""


class IniError(Exception):
    """Base of all errors of this package."""
    pass


class IniParseError(IniError):
    """The text can not be turned into a document."""
    def __init__(self, message: str, line_no: int = 0) -> None:
        super().__init__(
            message if line_no <= 0 else f'line {line_no}: {message}')
        self.line_no = line_no


class ItemOutsideSection(IniParseError):
    def __init__(self, line_no: int = 0) -> None:
        super().__init__('item outside any section', line_no)


class DuplicateSection(IniParseError):
    def __init__(self, section: str, line_no: int = 0) -> None:
        super().__init__(f'duplicate section [{section}]', line_no)
        self.section = section


class SectionNotFound(IniError, LookupError):
    def __init__(self, section: str) -> None:
        super().__init__(f'section [{section}] not found')
        self.section = section


class NoCurrentSection(IniError):
    def __init__(self) -> None:
        super().__init__('no current section is set')


class ParseNotYetRun(IniError):
    def __init__(self) -> None:
        super().__init__('nothing parsed or set yet')
