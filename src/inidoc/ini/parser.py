# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45
# @Author : Kariko Lin

"""Note: This parser is **lenient**, it never raises on malformed lines.

Each line is handled as follows:
1. Cut off the comment, i.e. everything from the first `;`.
2. Trim the rest, skip it if nothing left.
3. `[name]` opens (or re-opens) a section, name kept untrimmed.
4. `key = value` goes into the current section.
The first value of a key wins, later duplicates are dropped.

Anything else is silently ignored.
"""

import codecs
import logging
from enum import Enum
from io import StringIO
from typing import Iterable, NamedTuple, TextIO

import chardet

from ..abstract import FileReader
from ..errors import FileOpenError, UnknownEncodingError
from .model import IniDocument
from .text import trim, trim_end, trim_start

__all__ = [
    'LineKind', 'IniLine', 'classify_line',
    'FeedResult', 'IniDocumentBuilder',
    'parse', 'parse_string', 'IniParser'
]

logger = logging.getLogger(__name__)


class LineKind(str, Enum):
    """What a single line is."""
    BLANK = 'blank'
    SECTION = 'section'
    PAIR = 'pair'
    UNMATCHED = 'unmatched'


class IniLine(NamedTuple):
    kind: LineKind
    name: str | None = None  # section name, or key
    value: str | None = None


def classify_line(line: str) -> IniLine:
    last = line.find(';')
    if last < 0:
        last = len(line)
    first = trim_start(line, 0, last)
    last = trim_end(line, first, last)

    if first == last:
        return IniLine(LineKind.BLANK)

    if line[first] == '[' and line[last - 1] == ']':
        return IniLine(LineKind.SECTION, line[first + 1:last - 1])

    split = line.find('=', first, last)
    if split < 0:
        return IniLine(LineKind.UNMATCHED)
    return IniLine(
        LineKind.PAIR,
        trim(line, first, split),
        trim(line, split + 1, last))


class FeedResult(str, Enum):
    """What the builder did with a line."""
    SECTION_OPENED = 'section_opened'
    PAIR_INSERTED = 'pair_inserted'
    IGNORED = 'ignored'


class IniDocumentBuilder:
    """Folds lines into an `IniDocument` one by one.

    The current section is tracked by its name (None for the header)
    and looked up on every insert, instead of holding the dict itself.
    """
    def __init__(self) -> None:
        self._header: dict[str, str] = {}
        self._sections: dict[str, dict[str, str]] = {}
        self._current: str | None = None
        self._lineno = 0

    @property
    def current_section(self) -> str | None:
        return self._current

    def _target(self) -> dict[str, str]:
        if self._current is None:
            return self._header
        return self._sections[self._current]

    def feed(self, line: str) -> FeedResult:
        self._lineno += 1
        if self._lineno == 1:
            # UTF-8 BOM, kept by a plain `utf-8` decode.
            line = line.removeprefix('\ufeff')
        parsed = classify_line(line)
        match parsed.kind:
            case LineKind.SECTION:
                self._sections.setdefault(parsed.name, {})
                self._current = parsed.name
                return FeedResult.SECTION_OPENED
            case LineKind.PAIR if parsed.name:
                target = self._target()
                if parsed.name in target:
                    logger.debug(
                        'line %d: "%s" already set in %s, dropped.',
                        self._lineno, parsed.name,
                        'header' if self._current is None
                        else f'[{self._current}]')
                    return FeedResult.IGNORED
                target[parsed.name] = parsed.value
                return FeedResult.PAIR_INSERTED
            case LineKind.BLANK:
                return FeedResult.IGNORED
            case _:
                logger.debug('line %d ignored: %r', self._lineno, line)
                return FeedResult.IGNORED

    def build(self) -> IniDocument:
        # IniDocument copies, so the builder may keep feeding.
        return IniDocument(self._header, self._sections)


def parse(buf: TextIO | Iterable[str]) -> IniDocument:
    """Parse a decoded text stream (or any iterable of lines).

    A plain `str` is refused, it would be walked char by char.
    """
    if isinstance(buf, str):
        raise TypeError(
            'parse() takes a text stream, use parse_string() for str')
    builder = IniDocumentBuilder()
    for line in buf:
        builder.feed(line)
    return builder.build()


def parse_string(text: str) -> IniDocument:
    return parse(StringIO(text))


class IniParser(FileReader[IniDocument]):
    def __init__(
        self, filename: str, encoding: str | None = None, *,
        min_confidence: float = 0.8,
        fallback_encoding: str = 'latin-1'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self._min_confidence = min_confidence
        self._fallback = fallback_encoding

    @staticmethod
    def readstream(buf: TextIO | Iterable[str]) -> IniDocument:
        """Read an already decoded text stream.

        Just call `self.read()` if there is no special need.
        """
        return parse(buf)

    def _decode_file(self) -> StringIO:
        with open(self._fn, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if (codec is None or codec['encoding'] is None
                or codec['confidence'] < self._min_confidence):
            codec = {'encoding': 'utf-8', 'confidence': 0.0}
        logger.info('"%s" decoded as %s (confidence %.2f).',
                    self._fn, codec['encoding'], codec['confidence'])

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            logger.warning('"%s" is not %s, falling back to %s.',
                           self._fn, codec['encoding'], self._fallback)
            buf = raw.decode(self._fallback, errors='replace')
        return StringIO(buf)

    def read(self) -> IniDocument:
        """Read the INI file this `IniParser` was created for.

        Raises `FileOpenError` if the file is missing or unreadable,
        `UnknownEncodingError` if `encoding` is not a codec at all.
        """
        if self._codec is not None:
            try:
                codecs.lookup(self._codec)
            except LookupError as e:
                raise UnknownEncodingError(self._codec) from e
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            try:
                with open(self._fn, 'r', encoding=self._codec) as fp:
                    return self.readstream(fp)
            except UnicodeDecodeError:
                return self.readstream(self._decode_file())
        except OSError as e:
            raise FileOpenError(self._fn, e.strerror or str(e)) from e

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f" ({self._codec})"
