# -*- encoding: utf-8 -*-
# @File   : text.py
# @Time   : 2024/10/12 22:41:07
# @Author : Kariko Lin

"""Whitespace trimming over half-open `[first, last)` ranges.

Only the ASCII whitespace of C `isspace()` counts here,
so `str.strip()` (which also eats `\\xa0` and friends) is not used.
"""

WHITESPACE = ' \t\n\v\f\r'


def _bounds(text: str, first: int, last: int | None) -> tuple[int, int]:
    if last is None or last > len(text):
        last = len(text)
    return min(max(first, 0), last), last


def trim_start(text: str, first: int = 0, last: int | None = None) -> int:
    """Index of the first non-whitespace char in range, or `last`."""
    first, last = _bounds(text, first, last)
    while first < last and text[first] in WHITESPACE:
        first += 1
    return first


def trim_end(text: str, first: int = 0, last: int | None = None) -> int:
    """One past the last non-whitespace char in range, or `first`."""
    first, last = _bounds(text, first, last)
    while last > first and text[last - 1] in WHITESPACE:
        last -= 1
    return last


def trim(text: str, first: int = 0, last: int | None = None) -> str:
    first = trim_start(text, first, last)
    return text[first:trim_end(text, first, last)]
