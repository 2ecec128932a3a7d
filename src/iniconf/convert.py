# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2024/11/03 00:12:26
# @Author : Kariko Lin

"""Raw value converters. Every one of them raises `ValueError` on failure,
`IniConfig` wraps it into `IniConversionError` with the key attached."""

import math
from re import compile as regex

from .consts import FALSE_LITERALS, TRUE_LITERALS, IniMark

_SIGNED = regex(r'[+-]?[0-9]+')
_UNSIGNED = regex(r'[0-9]+')


def to_int(raw: str, bits: int = 64, signed: bool = True) -> int:
    """Base-10 integer, checked against the given width.

    No whitespace, no `_` separators, unlike builtin `int()`.
    """
    if not (_SIGNED if signed else _UNSIGNED).fullmatch(raw):
        raise ValueError(f'invalid base-10 integer: {raw!r}')
    ret = int(raw)
    if signed:
        lo, hi = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        lo, hi = 0, (1 << bits) - 1
    if not lo <= ret <= hi:
        raise ValueError(f'{raw} out of range for {bits}-bit integer')
    return ret


def to_float(raw: str) -> float:
    # builtin `float()` takes full-width and other non-ASCII digits too.
    if not raw.isascii() or raw != raw.strip() or '_' in raw:
        raise ValueError(f'invalid float: {raw!r}')
    ret = float(raw)  # '' raises here as well
    # `float('1e400')` silently gives inf.
    if math.isinf(ret) and 'inf' not in raw.lower():
        raise ValueError(f'{raw} out of range for float')
    return ret


def to_bool(raw: str) -> bool:
    lowered = raw.lower()
    if lowered in TRUE_LITERALS:
        return True
    if lowered in FALSE_LITERALS:
        return False
    raise ValueError(f'invalid boolean: {raw!r}')


def to_list(raw: str) -> list[str]:
    # '' still gives [''], callers treat it as "no data".
    return raw.split(IniMark.LIST_SEP)
