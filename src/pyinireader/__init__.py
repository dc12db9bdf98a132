# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:20:12

import logging

from .ini import (
    DuplicateSection,
    IniDocument,
    IniError,
    IniItem,
    IniParseError,
    IniParser,
    IniReader,
    IniSection,
    ItemOutsideSection,
    NoCurrentSection,
    ParseNotYetRun,
    ParseOptions,
    SectionFilter,
    SectionNotFound,
)

__version__ = '0.1.0'

__all__ = [
    'IniReader', 'IniParser', 'ParseOptions', 'SectionFilter',
    'IniDocument', 'IniSection', 'IniItem',
    'IniError', 'IniParseError', 'ItemOutsideSection', 'DuplicateSection',
    'SectionNotFound', 'NoCurrentSection', 'ParseNotYetRun',
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
