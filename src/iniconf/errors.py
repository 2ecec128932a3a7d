# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/11/02 21:52:03
# @Author : Kariko Lin


class IniError(Exception):
    """Base of all errors raised by `iniconf`."""
    pass


class IniFormatError(IniError, ValueError):
    """A line is neither blank, a comment, a section header
    nor a `key = value` pair. The whole parse is abandoned."""

    def __init__(
        self, lineno: int, line: str, filename: str | None = None
    ) -> None:
        self.lineno = lineno
        self.line = line
        self.filename = filename
        where = f'{filename}:{lineno}' if filename else f'line {lineno}'
        super().__init__(
            f'{where}: malformed content "{line}", should be `key = val`.')


class IniConversionError(IniError, ValueError):
    def __init__(self, key: str, value: str, target: str) -> None:
        self.key = key
        self.value = value
        self.target = target
        super().__init__(
            f'cannot convert "{key}" = {value!r} to {target}.')
