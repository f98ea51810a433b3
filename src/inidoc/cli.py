# -*- encoding: utf-8 -*-
# @File   : cli.py
# @Time   : 2024/10/13 00:12:46
# @Author : Kariko Lin

"""Parse an INI file and print what has been read.

    inidoc [-e ENCODING] [-v] INIFILE
"""

import argparse
import logging
import sys
from typing import Sequence

from .errors import FileOpenError, UnknownEncodingError, UsageError
from .ini import IniParser

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_OPEN = 2
EXIT_ENCODING = 3

USAGE = 'Usage: inidoc INIFILE'


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='inidoc', description='Parse an INI file and dump it.')
    # optional here, missing path is reported by `UsageError` instead.
    parser.add_argument('path', nargs='?', help='Path to the INI file')
    parser.add_argument(
        '-e', '--encoding', default=None,
        help='File encoding, guessed by chardet if wrong')
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='Also log ignored lines')
    return parser


def run(path: str | None, encoding: str | None = None) -> str:
    if path is None:
        raise UsageError(USAGE)
    return IniParser(path, encoding).read().dump()


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='[%(asctime)s] %(levelname)s: %(message)s')
    try:
        sys.stdout.write(run(args.path, args.encoding))
    except UsageError as e:
        print(e, file=sys.stderr)
        return EXIT_USAGE
    except FileOpenError as e:
        logging.error(e)
        return EXIT_OPEN
    except UnknownEncodingError as e:
        logging.error(e)
        return EXIT_ENCODING
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
