# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10

"""
INI structure allowing duplicated keys.

```ini
[section]
key = val
key = another val   ; both are kept, in order.
a line without '='  ; kept as `{NONAME}` if asked to.
```

Section names are unique though. See `IniDocument.insert()`.
"""

from collections.abc import MutableMapping, Sequence
from typing import Iterable, Iterator, NamedTuple, overload

from .errors import DuplicateSection


class IniItem(NamedTuple):
    key: str
    value: str


class IniSection(Sequence[IniItem]):
    """An ordered multimap of `key = value` items.

    Unlike a dict, the same key may appear many times.
    `key in section` tests keys, as a mapping would.
    """
    def __init__(self, items: Iterable[tuple[str, str]] = ()) -> None:
        self.__items: list[IniItem] = [IniItem(k, v) for k, v in items]

    @overload
    def __getitem__(self, index: int) -> IniItem: ...
    @overload
    def __getitem__(self, index: slice) -> list[IniItem]: ...

    def __getitem__(self, index: int | slice) -> IniItem | list[IniItem]:
        return self.__items[index]

    def __len__(self) -> int:
        return len(self.__items)

    def __iter__(self) -> Iterator[IniItem]:
        return iter(self.__items)

    def __contains__(self, key: object) -> bool:
        return any(i.key == key for i in self.__items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IniSection):
            return self.__items == other.__items
        return NotImplemented

    def __repr__(self) -> str:
        return f'IniSection({self.__items!r})'

    def add(self, key: str, value: str) -> None:
        self.__items.append(IniItem(key, value))

    def first(self, key: str, default: str | None = None) -> str | None:
        """Value of the first item with exactly this key."""
        for i in self.__items:
            if i.key == key:
                return i.value
        return default

    def getall(self, key: str) -> list[str]:
        return [i.value for i in self.__items if i.key == key]

    def startswith(self, prefix: str) -> list[str]:
        """Values of all items whose key starts with `prefix`."""
        return [i.value for i in self.__items if i.key.startswith(prefix)]

    def has_prefix(self, prefix: str) -> bool:
        return any(i.key.startswith(prefix) for i in self.__items)

    def remove(self, key: str) -> int:
        """Drop every item with this key, returning how many were dropped."""
        kept = [i for i in self.__items if i.key != key]
        removed = len(self.__items) - len(kept)
        self.__items[:] = kept
        return removed

    def remove_first(self, key: str) -> bool:
        for idx, i in enumerate(self.__items):
            if i.key == key:
                del self.__items[idx]
                return True
        return False

    def keys(self) -> list[str]:
        return [i.key for i in self.__items]

    def to_list(self) -> list[tuple[str, str]]:
        return [tuple(i) for i in self.__items]


class IniDocument(MutableMapping[str, IniSection]):
    """... is simply a group of `IniSection`s, keyed by section name."""
    def __init__(self) -> None:
        self.__raw: dict[str, IniSection] = {}

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[key]

    def __setitem__(
        self, key: str, value: IniSection | Iterable[tuple[str, str]]
    ) -> None:
        if not key:
            raise ValueError('section name must not be empty')
        self.__raw[key] = (
            value if isinstance(value, IniSection) else IniSection(value))

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __len__(self) -> int:
        return len(self.__raw)

    def __repr__(self) -> str:
        return f'IniDocument({self.__raw!r})'

    def insert(self, section: str, items: IniSection, line_no: int = 0):
        """Add a freshly parsed section, which must not exist yet."""
        if section in self.__raw:
            raise DuplicateSection(section, line_no)
        self[section] = items

    def add_item(self, section: str, key: str, value: str) -> IniSection:
        """Append an item, creating the section if needed."""
        if section not in self.__raw:
            self[section] = IniSection()
        ret = self.__raw[section]
        ret.add(key, value)
        return ret

    def clear(self) -> None:
        self.__raw.clear()

    def to_dict(self) -> dict[str, list[tuple[str, str]]]:
        """A plain copy, mostly for comparing documents."""
        return {k: v.to_list() for k, v in self.__raw.items()}
