# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/02 22:41:09
# @Author : Kariko Lin

"""Reads a plain INI file into an `IniDocument`.

Accepted lines (after stripping):
- empty lines,
- `# comment`, whole line only,
- `[section]`, name is taken literally between the brackets,
- `key = value`, value optionally wrapped in `"`.

Anything else aborts the whole parse with `IniFormatError`.
"""

import logging
from io import StringIO, TextIOBase
from os import PathLike

import chardet

from .abstract import FileHandler
from .consts import DEFAULT_SECTION, UTF8_BOM, IniMark
from .errors import IniFormatError
from .model import IniDocument

_log = logging.getLogger(__name__)


def _unquote(val: str) -> str:
    # one leading, then at most one trailing quote.
    if not val.startswith(IniMark.QUOTE):
        return val
    return val[1:].removesuffix(IniMark.QUOTE)


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def readstream(
        buf: TextIOBase,
        document: IniDocument | None = None,
        filename: str | None = None
    ) -> IniDocument:
        """读取解码好的字符串流。

        如没有特殊需求，直接调用`self.read()`便是。
        传入`document`时，键值对将直接写入该实例（同名键后者覆盖前者）。
        """
        if document is None:
            document = IniDocument()
        section = DEFAULT_SECTION
        for lineno, i in enumerate(buf, 1):
            i = i.strip()
            if not i or i.startswith(IniMark.COMMENT):
                continue
            if (i.startswith(IniMark.SECTION_START)
                    and i.endswith(IniMark.SECTION_END)):
                section = i[1:-1]
                document._setdefault(section)
                continue

            key, sep, val = i.partition(IniMark.PAIRING)
            if not sep:
                raise IniFormatError(lineno, i, filename)
            key = key.strip()
            pairs = document._setdefault(section)
            if key in pairs:
                _log.debug('[%s] %s redefined at line %d, overriding.',
                           section, key, lineno)
            pairs[key] = _unquote(val.strip())
        return document

    def _decode(self, raw: bytes) -> str:
        codec = self._codec or 'utf-8'
        try:
            return raw.decode(codec)
        except UnicodeDecodeError:
            _log.warning('%s is not valid %s, guessing its encoding.',
                         self._fn, codec)

        guess = chardet.detect(raw)
        if guess['encoding'] is not None and guess['confidence'] >= 0.8:
            try:
                return raw.decode(guess['encoding'])
            except (UnicodeDecodeError, LookupError):
                pass
        # chardet is rarely sure about short CJK files.
        try:
            return raw.decode('gbk')
        except UnicodeDecodeError:
            pass
        # last resort, maps every byte.
        _log.warning('no confident guess for %s, falling back to latin-1.',
                     self._fn)
        return raw.decode('latin-1')

    def read(self) -> IniDocument:
        """读取`IniParser`实例指定的文件。

        Raises:
            OSError: the file can't be opened or read.
            IniFormatError: a line is not `key = value`.
        """
        with open(self._fn, 'rb') as fp:
            raw = fp.read()
        if raw.startswith(UTF8_BOM):
            raw = raw[len(UTF8_BOM):]
        # newline='\n' keeps `\r` and friends from splitting lines.
        buf = StringIO(self._decode(raw), newline='\n')
        ret = self.readstream(buf, filename=self._fn)
        _log.info('loaded %s: %d section(s), %d key(s).',
                  self._fn, len(ret), ret.entries)
        return ret

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
