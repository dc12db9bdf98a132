# -*- encoding: utf-8 -*-
# @File   : filters.py
# @Time   : 2024/10/12 21:02:44

from typing import Collection, Iterable


class SectionFilter:
    """Name based include/exclude lists, only consulted while parsing.

    A section is kept if the include list is empty or names it,
    and the exclude list doesn't.
    """
    def __init__(
        self,
        include: Iterable[str] = (),
        exclude: Iterable[str] = ()
    ) -> None:
        self.include: set[str] = set(include)
        self.exclude: set[str] = set(exclude)

    def include_section(self, section: str) -> None:
        self.include.add(section)

    def exclude_section(self, section: str) -> None:
        self.exclude.add(section)

    def clear(self) -> None:
        self.include.clear()
        self.exclude.clear()

    def should_skip(self, section: str) -> bool:
        included = not self.include or section in self.include
        return section in self.exclude or not included

    def satisfied_by(self, read_sections: Collection[str]) -> bool:
        """Whether every wanted section has been read already.

        Never true without an include list.
        """
        return bool(self.include) and set(read_sections) == self.include

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SectionFilter):
            return (self.include == other.include
                    and self.exclude == other.exclude)
        return NotImplemented

    def __repr__(self) -> str:
        return (f'SectionFilter(include={sorted(self.include)!r}, '
                f'exclude={sorted(self.exclude)!r})')
