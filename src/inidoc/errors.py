# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 23:05:18
# @Author : Kariko Lin

# the parser itself never raises on malformed lines,
# these only belong to file reading and the command line.


class IniError(Exception):
    """Base of everything raised by `inidoc`."""
    pass


class FileOpenError(IniError, OSError):
    """To record an INI file that is missing or unreadable."""
    def __init__(self, path: str, reason: str = '') -> None:
        super().__init__(
            f"Could not open '{path}'" + (f": {reason}" if reason else ''))
        # not `filename`, OSError.__str__ would pick that up.
        self.path = path
        self.reason = reason


class UsageError(IniError):
    """Command line invoked without an INI file."""
    pass


class UnknownEncodingError(IniError, LookupError):
    """The codec asked for does not exist."""
    def __init__(self, encoding: str) -> None:
        super().__init__(f"Unknown encoding '{encoding}'")
        self.encoding = encoding
