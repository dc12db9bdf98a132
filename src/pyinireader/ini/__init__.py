# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:16:53

from .consts import MAX_LINE_LENGTH, NONAME
from .errors import (
    DuplicateSection,
    IniError,
    IniParseError,
    ItemOutsideSection,
    NoCurrentSection,
    ParseNotYetRun,
    SectionNotFound,
)
from .filters import SectionFilter
from .model import IniDocument, IniItem, IniSection
from .parser import (
    IniParser,
    ParseOptions,
    parse_text,
    read_text,
    render,
    transcode_text,
    write_text,
)
from .reader import CurrentSection, IniReader
