# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2023/11/14 20:01:52
# @Author : Chloride

from .errors import (
    IniError, FileOpenError, UnknownEncodingError, UsageError
)
from .ini import (
    IniSection, IniDocument, IniDocumentBuilder, IniParser,
    parse, parse_string
)

__all__ = [
    'IniSection', 'IniDocument', 'IniDocumentBuilder', 'IniParser',
    'parse', 'parse_string',
    'IniError', 'FileOpenError', 'UnknownEncodingError', 'UsageError'
]

__version__ = '0.1.0'
