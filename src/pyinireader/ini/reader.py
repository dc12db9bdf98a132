# -*- encoding: utf-8 -*-
# @File   : reader.py
# @Time   : 2024/10/13 14:26:08

"""Cursor based access over a parsed `IniDocument`.

```python
ini = IniReader()
ini.exclude_section('Debug')
ini.parse_file('config.ini')

ini.get('General', 'name')          # qualified
ini.enter_section('General')
ini.current.get('name')             # same thing, via the cursor
```

Reads returning a value (`get`, `get_bool`, `item_count`, ...) fall back to
a blank result when anything is missing. `get_items()`, `get_all()` and all
mutations raise instead, see `errors`.
"""

import logging
from collections.abc import MutableSequence
from typing import Iterable

from .errors import NoCurrentSection, ParseNotYetRun, SectionNotFound
from .model import IniDocument, IniItem, IniSection
from .parser import (
    ParseOptions,
    StrPath,
    parse_text,
    read_text,
    render,
    write_text,
)


class IniReader:
    def __init__(
        self,
        filename: StrPath | None = None, *,
        options: ParseOptions | None = None
    ) -> None:
        """Init an empty reader, or parse `filename` right away."""
        self.options = options or ParseOptions()
        self.read_sections: list[str] = []
        self.__doc = IniDocument()
        self.__parsed = False
        self.__current = ''
        # (name, live section). no copy, so mutations are seen directly.
        self.__cache: tuple[str, IniSection] | None = None
        if filename is not None:
            self.parse_file(filename)

    @property
    def parsed(self) -> bool:
        return self.__parsed

    @property
    def current_section(self) -> str:
        return self.__current

    @property
    def current(self) -> 'CurrentSection':
        """Accessors working on the current section."""
        return CurrentSection(self)

    # -- parsing --

    def exclude_section(self, section: str) -> None:
        self.options.sections.exclude_section(section)

    def include_section(self, section: str) -> None:
        self.options.sections.include_section(section)

    def parse(self, content: str) -> None:
        """Parse INI text, replacing everything held before.

        Raises:
            IniParseError: reader is left empty and unparsed.
        """
        self.erase_all()
        self.read_sections = parse_text(content, self.__doc, self.options)
        self.__parsed = True

    def parse_file(self, path: StrPath) -> None:
        """CAUTION: May raise `OSError` as well."""
        self.parse(read_text(path, self.options.encoding))

    # -- sections & cursor --

    def exists(self, section: str) -> bool:
        return section in self.__doc

    def section_count(self) -> int:
        return len(self.__doc)

    def sections(self) -> list[str]:
        return list(self.__doc)

    def set_current_section(self, section: str) -> None:
        self.__current = section

    def enter_section(self, section: str) -> bool:
        """Set current section, only if it exists. Also warms the cache."""
        if self.__fetch(section) is None:
            return False
        self.__current = section
        return True

    def __fetch(self, section: str) -> IniSection | None:
        if self.__cache is not None and self.__cache[0] == section:
            return self.__cache[1]
        if (ret := self.__doc.get(section)) is not None:
            self.__cache = (section, ret)
        return ret

    def __require(self, section: str) -> IniSection:
        if not self.__parsed:
            raise ParseNotYetRun
        if (ret := self.__fetch(section)) is None:
            raise SectionNotFound(section)
        return ret

    # -- reading --

    def item_count(self, section: str) -> int:
        if not self.__parsed or (items := self.__fetch(section)) is None:
            return 0
        return len(items)

    def item_exists(self, section: str, key: str) -> bool:
        items = self.__fetch(section)
        return items is not None and key in items

    def item_prefix_exists(self, section: str, prefix: str) -> bool:
        items = self.__fetch(section)
        return items is not None and items.has_prefix(prefix)

    def get_items(self, section: str) -> list[IniItem]:
        return list(self.__require(section))

    def get_all(self, section: str, prefix: str) -> list[str]:
        """Values of every item whose key starts with `prefix`.

        An empty list means no match, while a missing section raises.
        """
        return self.__require(section).startswith(prefix)

    def get(
        self, section: str, key: str, default: str | None = ''
    ) -> str | None:
        """Value of the first item named `key`.

        Pass `default=None` to tell a missing item from an empty value.
        """
        if not self.__parsed or (items := self.__fetch(section)) is None:
            return default
        return items.first(key, default)

    def get_bool(self, section: str, key: str) -> bool:
        return self.get(section, key) == 'true'

    def get_first(self, section: str, prefix: str) -> str:
        try:
            values = self.get_all(section, prefix)
        except (ParseNotYetRun, SectionNotFound):
            return ''
        return values[0] if values else ''

    def get_int_array(
        self,
        section: str,
        key: str,
        separator: str,
        target: MutableSequence[int]
    ) -> MutableSequence[int]:
        """Fill `target` with integers split from one item, zero the rest.

        Values beyond `len(target)` are dropped.

        Raises:
            ValueError: on a non-numeric piece.
        """
        value = self.get(section, key)
        pieces = value.split(separator) if value else []
        for idx in range(len(target)):
            target[idx] = int(pieces[idx]) if idx < len(pieces) else 0
        return target

    # -- writing --

    def set(self, section: str, key: str, value: str) -> None:
        """Append an item. Duplicated keys are kept, never replaced."""
        self.__parsed = True
        self.__doc.add_item(section, key, value)

    def set_bool(self, section: str, key: str, value: bool) -> None:
        self.set(section, key, 'true' if value else 'false')

    def set_double(self, section: str, key: str, value: float) -> None:
        self.set(section, key, str(float(value)))

    def set_long(self, section: str, key: str, value: int) -> None:
        self.set(section, key, str(int(value)))

    def set_array(
        self, section: str, key: str, separator: str, values: Iterable[object]
    ) -> None:
        self.set(section, key, separator.join(str(i) for i in values))

    def erase(self, section: str, key: str) -> int:
        """Remove all items named `key`, returning how many were removed."""
        if (items := self.__fetch(section)) is None:
            raise SectionNotFound(section)
        return items.remove(key)

    def erase_first(self, section: str, key: str) -> bool:
        if (items := self.__fetch(section)) is None:
            raise SectionNotFound(section)
        return items.remove_first(key)

    def erase_all(self) -> None:
        self.__doc.clear()
        self.__cache = None
        self.__parsed = False
        self.read_sections = []

    # -- exporting --

    def to_dict(self) -> dict[str, list[tuple[str, str]]]:
        return self.__doc.to_dict()

    def to_text(self) -> str:
        return render(self.__doc) if self.__parsed else ''

    def to_file(self, path: StrPath) -> bool:
        ok = write_text(path, self.to_text(), self.options.encoding or 'utf-8')
        if ok:
            logging.debug(f'{self.section_count()} section(s) saved to {path}')
        return ok

    def __repr__(self) -> str:
        return (f'<IniReader: {self.section_count()} sections, '
                f'current [{self.__current}]>')


class CurrentSection:
    """Unqualified accessors, all aimed at `reader.current_section`.

    Without a current section, value reads give blank results and
    everything else raises `NoCurrentSection`.
    """
    def __init__(self, reader: IniReader) -> None:
        self._reader = reader

    @property
    def name(self) -> str:
        return self._reader.current_section

    def __section(self) -> str:
        if not (ret := self._reader.current_section):
            raise NoCurrentSection
        return ret

    def item_count(self) -> int:
        return self._reader.item_count(self.name) if self.name else 0

    def item_exists(self, key: str) -> bool:
        return bool(self.name) and self._reader.item_exists(self.name, key)

    def item_prefix_exists(self, prefix: str) -> bool:
        return (bool(self.name)
                and self._reader.item_prefix_exists(self.name, prefix))

    def get_items(self) -> list[IniItem]:
        return self._reader.get_items(self.__section())

    def get_all(self, prefix: str) -> list[str]:
        return self._reader.get_all(self.__section(), prefix)

    def get(self, key: str, default: str | None = '') -> str | None:
        if not self.name:
            return default
        return self._reader.get(self.name, key, default)

    def get_bool(self, key: str) -> bool:
        return bool(self.name) and self._reader.get_bool(self.name, key)

    def get_first(self, prefix: str) -> str:
        return self._reader.get_first(self.name, prefix) if self.name else ''

    def get_int_array(
        self, key: str, separator: str, target: MutableSequence[int]
    ) -> MutableSequence[int]:
        if not self.name:
            return target
        return self._reader.get_int_array(self.name, key, separator, target)

    def set(self, key: str, value: str) -> None:
        self._reader.set(self.__section(), key, value)

    def set_bool(self, key: str, value: bool) -> None:
        self._reader.set_bool(self.__section(), key, value)

    def set_double(self, key: str, value: float) -> None:
        self._reader.set_double(self.__section(), key, value)

    def set_long(self, key: str, value: int) -> None:
        self._reader.set_long(self.__section(), key, value)

    def set_array(
        self, key: str, separator: str, values: Iterable[object]
    ) -> None:
        self._reader.set_array(self.__section(), key, separator, values)

    def erase(self, key: str) -> int:
        return self._reader.erase(self.__section(), key)

    def erase_first(self, key: str) -> bool:
        return self._reader.erase_first(self.__section(), key)

    def __repr__(self) -> str:
        return f'[{self.name}]'
