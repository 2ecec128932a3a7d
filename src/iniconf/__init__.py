# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 21:38:12
# @Author : Kariko Lin

import logging

from .config import IniConfig, load
from .consts import DEFAULT_SECTION
from .errors import IniConversionError, IniError, IniFormatError
from .model import IniDocument, IniKeyPath, IniSection
from .parser import IniParser

__all__ = [
    'IniConfig', 'load', 'DEFAULT_SECTION',
    'IniError', 'IniFormatError', 'IniConversionError',
    'IniDocument', 'IniSection', 'IniKeyPath', 'IniParser'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
