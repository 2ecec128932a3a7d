# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/11/02 21:40:17
# @Author : Kariko Lin

from codecs import BOM_UTF8
from enum import Enum

# pairs declared before any `[section]` header fall into here.
DEFAULT_SECTION = 'default'

UTF8_BOM = BOM_UTF8  # b'\xef\xbb\xbf'


class IniMark(str, Enum):
    COMMENT = '#'
    SECTION_START = '['
    SECTION_END = ']'
    PAIRING = '='
    QUOTE = '"'
    LIST_SEP = ';'
    PATH_SEP = '::'


TRUE_LITERALS = frozenset(('1', 't', 'true', 'y', 'yes', 'on'))
FALSE_LITERALS = frozenset(('0', 'f', 'false', 'n', 'no', 'off'))
