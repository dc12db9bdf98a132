# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/10 01:15:56

from enum import Enum
from re import compile as regex

# lines longer than this are dropped, not truncated.
MAX_LINE_LENGTH = 4096

# reserved key of lines which are neither items nor headers.
NONAME = '{NONAME}'

COMMENT_MARKS = (';', '#')

# both are used with `fullmatch()`.
SECTION_PATTERN = regex(r'\[(.*?)\]')
ITEM_PATTERN = regex(r'(.*?)=(.*?)')


class LineKind(str, Enum):
    SECTION = 'section'
    ITEM = 'item'
    FREEFORM = 'freeform'
