# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45

"""Text <-> `IniDocument` conversion, plus the file boundary.

The whole text is parsed in one pass. Items are collected into a pending
group, which is only stored when the next header shows up (or the text ends),
so a section header followed by nothing is never stored at all.
"""

import logging
import warnings
from dataclasses import dataclass, field, fields
from os import PathLike
from typing import TypeAlias

import chardet
import yaml

from ..abstract import FileHandler
from .consts import NONAME, LineKind
from .errors import ItemOutsideSection
from .filters import SectionFilter
from .lexer import tokenize
from .model import IniDocument, IniSection

StrPath: TypeAlias = str | PathLike[str]


@dataclass(kw_only=True)
class ParseOptions:
    """Switches of one parse run.

    `store_any_line` keeps lines like `a line without equal sign`
    as `{NONAME} = a line without equal sign`.
    `transcode` narrows the text to `target_codec` before parsing.
    """
    store_any_line: bool = False
    transcode: bool = False
    target_codec: str = 'gbk'
    encoding: str | None = None
    sections: SectionFilter = field(default_factory=SectionFilter)

    @classmethod
    def from_yaml(cls, path: StrPath) -> 'ParseOptions':
        """Load options from a YAML mapping, like:

        ```yaml
        store_any_line: true
        encoding: utf-8
        include: [General, Audio]
        exclude: [Debug]
        ```
        """
        with open(path, 'r', encoding='utf-8') as fp:
            raw = yaml.load(fp, yaml.FullLoader) or {}
        if not isinstance(raw, dict):
            raise ValueError(f'{path}: options must be a YAML mapping.')

        sections = SectionFilter(
            raw.pop('include', None) or (),
            raw.pop('exclude', None) or ())
        known = {i.name for i in fields(cls)} - {'sections'}
        for i in raw.keys() - known:
            warnings.warn(f'{path}: unknown option "{i}" ignored.')
        return cls(
            sections=sections,
            **{k: v for k, v in raw.items() if k in known})


def transcode_text(text: str, codec: str = 'gbk') -> str:
    """Keep only what `codec` could encode, the rest turns into `?`."""
    return text.encode(codec, errors='replace').decode(codec)


def _decode_file(filename: StrPath) -> str:
    with open(filename, 'rb') as fp:
        raw = fp.read()

    codec = chardet.detect(raw)
    if codec is None or codec['encoding'] is None \
            or codec['confidence'] < 0.8:
        codec = {'encoding': 'utf-8'}
    else:
        logging.info(f'{filename}: guessed {codec["encoding"]} '
                     f'({codec["confidence"]:.2f})')

    # fallbacks
    try:
        return raw.decode(codec['encoding'])
    except UnicodeDecodeError:
        logging.warning(f'{filename}: not {codec["encoding"]}, try gbk.')
        return raw.decode('gbk')


def read_text(path: StrPath, encoding: str | None = None) -> str:
    """Read a whole file as text.

    When `encoding` is None, `open()` falls back to system default,
    and if decoding goes wrong we let `chardet` guess instead.

    CAUTION:
        May raise `OSError`.
    """
    try:
        with open(path, 'r', encoding=encoding, newline='') as fp:
            return fp.read()
    except UnicodeDecodeError:
        logging.warning(f'{path}: undecodable as {encoding or "default"}.')
        return _decode_file(path)


def write_text(path: StrPath, text: str, encoding: str = 'utf-8') -> bool:
    try:
        with open(path, 'w', encoding=encoding, newline='') as fp:
            fp.write(text)
    except OSError as e:
        logging.warning(f'Unable to write INI:\n  {e}')
        return False
    return True


def parse_text(
    text: str,
    document: IniDocument,
    options: ParseOptions | None = None
) -> list[str]:
    """Parse `text` into `document`, which is cleared first.

    Returns names of the sections actually stored, in reading order.

    Raises:
        ItemOutsideSection: an item shows up before any header.
        DuplicateSection: a non-empty section is declared twice.
    In both cases `document` is left empty.
    """
    if options is None:
        options = ParseOptions()
    sect_filter = options.sections
    document.clear()
    if options.transcode:
        text = transcode_text(text, options.target_codec)

    read_sections: list[str] = []
    cur_section, pending = '', IniSection()
    skipping = False

    def flush(line_no: int) -> None:
        if cur_section and len(pending):
            document.insert(cur_section, pending, line_no)
            read_sections.append(cur_section)

    try:
        for line_no, line in tokenize(text, options.store_any_line):
            match line.kind:
                case LineKind.ITEM:
                    if skipping:
                        continue
                    if not cur_section:
                        raise ItemOutsideSection(line_no)
                    pending.add(line.key, line.value)
                case LineKind.SECTION:
                    flush(line_no)
                    pending = IniSection()
                    cur_section = line.key
                    skipping = sect_filter.should_skip(cur_section)
                    if skipping:
                        logging.debug(f'skipping [{cur_section}]')
                case LineKind.FREEFORM:
                    if not skipping and cur_section:
                        pending.add(NONAME, line.value)
            if sect_filter.satisfied_by(read_sections):
                logging.debug(f'all wanted sections read at line {line_no}')
                break
        # the last section has no header after it.
        flush(0)
    except Exception:
        document.clear()
        raise

    logging.debug(f'{len(read_sections)} section(s) read')
    return read_sections


def render(document: IniDocument) -> str:
    buf: list[str] = []
    for sect, items in document.items():
        buf.append(f'[{sect}]\n')
        for key, val in items:
            buf.append(f'{val}\n' if key == NONAME else f'{key} = {val}\n')
        buf.append('\n')
    return ''.join(buf)


class IniParser(FileHandler[IniDocument]):
    """Reads and writes one INI file as a standalone `IniDocument`.

    For cursor based access, see `IniReader`.
    """
    def __init__(
        self,
        filename: StrPath,
        encoding: str | None = None,
        options: ParseOptions | None = None
    ) -> None:
        super().__init__(filename)
        self.options = options or ParseOptions(encoding=encoding)
        self._codec = encoding or self.options.encoding

    def read(self) -> IniDocument:
        ret = IniDocument()
        parse_text(read_text(self._fn, self._codec), ret, self.options)
        return ret

    def write(self, instance: IniDocument) -> bool:
        return write_text(self._fn, render(instance), self._codec or 'utf-8')

    def __str__(self) -> str:
        return f'INI file: {super().__str__()} ({self._codec})'
