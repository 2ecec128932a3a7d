# -*- encoding: utf-8 -*-
# @File   : config.py
# @Time   : 2024/11/03 00:40:51
# @Author : Kariko Lin

"""Typed accessors over a parsed INI file.

```python
conf = IniConfig()
conf.parse('server.ini')
conf.getint('server_id')           # [default] section
conf.getstrings('game01::player_list')
```

Missing keys read as `""`, so `getstring()` never fails while numeric and
boolean getters raise `IniConversionError`. Use `lookup()`, `in` or `get()`
when a missing key must be told apart from an empty one.
"""

from os import PathLike
from typing import Any, Callable, TypeVar

from .convert import to_bool, to_float, to_int, to_list
from .errors import IniConversionError
from .model import IniDocument, IniKeyPath
from .parser import IniParser

T = TypeVar('T')


class IniConfig:
    def __init__(self, encoding: str | None = None) -> None:
        self._codec = encoding
        self._fn: str | None = None
        self.__doc = IniDocument()

    @property
    def document(self) -> IniDocument:
        return self.__doc

    @property
    def filename(self) -> str | None:
        """Path of the latest successful `parse()`."""
        return self._fn

    def parse(self, filename: str | PathLike[str]) -> None:
        """Read an INI file, layering its pairs over what's already loaded.

        Nothing is merged unless the whole file parses.

        Raises:
            OSError: the file can't be opened or read.
            IniFormatError: a line is not `key = value`.
        """
        parser = IniParser(filename, self._codec)
        self.__doc._update(parser.read())
        self._fn = parser.filename

    def sections(self) -> list[str]:
        return list(self.__doc)

    def lookup(self, key: str) -> str | None:
        """Raw value, `None` if absent."""
        return self.__doc.find(IniKeyPath.parse(key))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None

    def _convert(
        self, key: str, converter: Callable[[str], T], target: str
    ) -> T:
        raw = self.getstring(key)
        try:
            return converter(raw)
        except ValueError as e:
            raise IniConversionError(key, raw, target) from e

    def getstring(self, key: str) -> str:
        ret = self.lookup(key)
        return '' if ret is None else ret

    def getint(self, key: str) -> int:
        return self._convert(key, to_int, 'int')

    def getint32(self, key: str) -> int:
        return self._convert(key, lambda x: to_int(x, 32), 'int32')

    def getint64(self, key: str) -> int:
        return self._convert(key, to_int, 'int64')

    def getuint32(self, key: str) -> int:
        return self._convert(key, lambda x: to_int(x, 32, False), 'uint32')

    def getuint64(self, key: str) -> int:
        return self._convert(key, lambda x: to_int(x, 64, False), 'uint64')

    def getfloat(self, key: str) -> float:
        return self._convert(key, to_float, 'float')

    def getbool(self, key: str) -> bool:
        return self._convert(key, to_bool, 'bool')

    def getstrings(self, key: str) -> list[str]:
        return to_list(self.getstring(key))

    def get(
        self, key: str,
        converter: Callable[[str], Any] = str,
        default: Any = None
    ) -> Any:
        """`default` if the key is absent, otherwise the converted value.

        `int`, `float`, `bool` and `list` go through the typed getters above,
        e.g. `bool` accepts `yes`/`no` rather than Python truthiness.
        """
        if key not in self:
            return default
        if converter is int:
            return self.getint(key)
        elif converter is float:
            return self.getfloat(key)
        elif converter is bool:
            return self.getbool(key)
        elif converter is list:
            return self.getstrings(key)
        return self._convert(key, converter,
                             getattr(converter, '__name__', repr(converter)))

    def __repr__(self) -> str:
        return f'<IniConfig {self._fn!r} {self.__doc!r}>'


def load(
    filename: str | PathLike[str], encoding: str | None = None
) -> IniConfig:
    """Shortcut of `IniConfig(encoding)` plus `parse(filename)`."""
    ret = IniConfig(encoding)
    ret.parse(filename)
    return ret
