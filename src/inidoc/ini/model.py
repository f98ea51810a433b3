# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10
# @Author : Kariko Lin

"""
Basically INI Structure: a header of free pairs and named sections.

```ini
key = val  ; use `doc.header` to access pairs not belong to any section.

[section]
key233 = val666
```

Both are READ ONLY once built. See `ini.parser` for how they get filled.
"""

from collections.abc import Mapping
from typing import Iterator


class IniSection(Mapping[str, str]):
    """A group of key-value pairs, i.e. one INI section (or the header).

    All pairs SHOULD be `str: str` (even if the value is an empty string),
    however in runtime we wouldn't limit that much.
    """
    def __init__(
        self, section_name: str | None, /,
        pairs: Mapping[str, str] | None = None
    ) -> None:
        # None for the header, which is never declared in file.
        self._name = section_name
        # shouldn't keep ptr to external dict.
        self._data: dict[str, str] = dict(pairs) if pairs else {}

    @property
    def name(self) -> str | None:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IniSection):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other.items())
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return '' if self._name is None else f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (
            '; header' if self._name is None else self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        """A writable copy of the pairs."""
        return self._data.copy()

    def dump_lines(self) -> Iterator[str]:
        for k, v in self._data.items():
            yield f'{k}={v}\n'


class IniDocument(Mapping[str, IniSection]):
    """INI file representation, a mapping of section names to `IniSection`.

    Pairs placed before any section declaration live in `self.header`.

    Re-opened sections were already merged while parsing, so each name
    appears once here. Iteration order is NOT something to rely on.
    """
    def __init__(
        self,
        header: Mapping[str, str] | None = None,
        sections: Mapping[str, Mapping[str, str]] | None = None
    ) -> None:
        """Init a document, both parts default to empty.

        Like `IniDocument({'k': 'v'})`,
        or `IniDocument(sections={'sect': {'k': 'v'}})`.
        """
        self.__header = IniSection(None, header)
        self.__sections: dict[str, IniSection] = {
            name: IniSection(name, pairs)
            for name, pairs in (sections or {}).items()
        }

    @property
    def header(self) -> IniSection:
        """Pairs located at file head, which belong to no section."""
        return self.__header

    def __getitem__(self, key: str) -> IniSection:
        return self.__sections[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniDocument):
            return NotImplemented
        return (self.__header == other.__header
                and self.__sections == other.__sections)

    __hash__ = None  # type: ignore[assignment]

    def find_value(
        self, key: str, section: str | None = None,
        default: str | None = None
    ) -> str | None:
        """Look up `key` in the header (`section=None`) or in `section`.

        Returns `default` if either the section or the key is missing.
        """
        group = (self.__header if section is None
                 else self.__sections.get(section))
        if group is None:
            return default
        return group.get(key, default)

    def dump(self) -> str:
        """Debug text of the whole document, header pairs first.

        NOT guaranteed to be parsed back into the same document.
        """
        buf = list(self.__header.dump_lines())
        for sect in self.__sections.values():
            buf.append(f'{sect}\n')
            buf.extend(sect.dump_lines())
        return ''.join(buf)

    def __str__(self) -> str:
        return self.dump()

    def __repr__(self) -> str:
        return '<IniDocument { .header = %d, .sections = %d }>' % (
            len(self.__header), len(self.__sections))
