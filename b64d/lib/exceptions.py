"""
Exception types raised by the b64d pipeline. Every error except `b64d.lib.exceptions.DecodeError`
is fatal to a run: it propagates to the command line driver, which reports it and terminates with
a non-zero exit code. A `b64d.lib.exceptions.DecodeError` only ever concerns a single candidate
and is handled by the scanner.
"""
from __future__ import annotations


class B64dException(Exception):
    """
    Base class for all exceptions raised by b64d.
    """


class B64dUsageError(B64dException):
    """
    The command line could not be parsed, or the required input file name was not given.
    """


class FileTooLargeError(B64dException):
    """
    The input file exceeds the configured maximum size; it is rejected before it is opened.
    """
    def __init__(self, size: int, limit: int):
        super().__init__(F'file too large ({size} bytes, max {limit})')
        self.size = size
        self.limit = limit


class StatError(B64dException):
    def __init__(self, error: OSError):
        super().__init__(F'cannot stat file: {error!s}')


class OpenError(B64dException):
    def __init__(self, error: OSError):
        super().__init__(F'cannot open file: {error!s}')


class ReadError(B64dException):
    def __init__(self, error: BaseException):
        super().__init__(F'read error: {error!s}')


class BufferOverflowError(ReadError):
    """
    Raised when a single input line does not fit into the line buffer.
    """
    def __init__(self, line: int, limit: int):
        B64dException.__init__(self, F'read error: line {line} exceeds the buffer size of {limit} bytes')
        self.line = line
        self.limit = limit


class DecodeError(B64dException, ValueError):
    """
    None of the attempted base64 variants could decode a candidate.
    """
    def __init__(self, message: str = 'invalid base64'):
        super().__init__(message)
