# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:16:53
# @Author : Kariko Lin

from .model import IniSection, IniDocument
from .parser import (
    LineKind,
    IniLine,
    classify_line,
    FeedResult,
    IniDocumentBuilder,
    IniParser,
    parse,
    parse_string
)
from .text import trim, trim_start, trim_end
