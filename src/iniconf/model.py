# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/02 22:10:44
# @Author : Kariko Lin

"""
Plain INI structure: sections of `key = value` pairs, all values raw `str`.

Both mappings are read-only to users. Only `IniParser` fills them,
via the underscored helpers.
"""

from collections.abc import Mapping
from typing import Iterator, NamedTuple

from .consts import DEFAULT_SECTION, IniMark


class IniKeyPath(NamedTuple):
    """A resolved `section::key` lookup."""
    section: str
    key: str

    @classmethod
    def parse(cls, path: str) -> 'IniKeyPath':
        """`"game01::score"` -> `("game01", "score")`,
        `"server_id"` -> `("default", "server_id")`.

        Only the whole path gets stripped. Halves are taken literally,
        since section names aren't stripped while parsing either.
        """
        path = path.strip()
        section, sep, key = path.partition(IniMark.PATH_SEP)
        if not sep:
            return cls(DEFAULT_SECTION, path)
        return cls(section, key)

    def __str__(self) -> str:
        return f'{self.section}{IniMark.PATH_SEP.value}{self.key}'


class IniSection(Mapping[str, str]):
    def __init__(self, name: str, pairs: dict[str, str] | None = None) -> None:
        self._name = name
        # shared with IniDocument, so parser writes show up here.
        self._data: dict[str, str] = {} if pairs is None else pairs

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()


class IniDocument(Mapping[str, IniSection]):
    """一个 INI 文件的全部内容。

        ```ini
        # 首个小节之前的键值对，归入 "default" 小节
        key = val
        [section]
        key = val
        ```
    """
    def __init__(self) -> None:
        self.__raw: dict[str, dict[str, str]] = {}

    @property
    def header(self) -> IniSection:
        """Pairs declared before any section header."""
        return IniSection(DEFAULT_SECTION,
                          self.__raw.get(DEFAULT_SECTION, {}))

    def __getitem__(self, key: str) -> IniSection:
        return IniSection(key, self.__raw[key])

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __repr__(self) -> str:
        return f'<IniDocument sections={list(self.__raw)!r}>'

    @property
    def entries(self) -> int:
        """Number of pairs over all sections."""
        return sum(len(i) for i in self.__raw.values())

    def find(self, path: IniKeyPath | str) -> str | None:
        """Raw value at `path`, or `None` if section or key is absent."""
        if isinstance(path, str):
            path = IniKeyPath.parse(path)
        pairs = self.__raw.get(path.section)
        if pairs is None:
            return None
        return pairs.get(path.key)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {k: v.copy() for k, v in self.__raw.items()}

    def _setdefault(self, section: str) -> dict[str, str]:
        """for IniParser reading."""
        return self.__raw.setdefault(section, {})

    def _update(self, another: 'IniDocument') -> None:
        """Merge `another` into self, later pairs win."""
        for sect, pairs in another.__raw.items():
            self._setdefault(sect).update(pairs)
