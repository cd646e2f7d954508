"""
Line oriented input handling. The input file is checked against the size limit before it is
opened, and it is then consumed one line at a time through a bounded line buffer.
"""
from __future__ import annotations

import os

from typing import BinaryIO, Iterator

from b64d.lib.config import CHUNK_SIZE
from b64d.lib.exceptions import (
    BufferOverflowError,
    FileTooLargeError,
    OpenError,
    ReadError,
    StatError,
)


def open_input(path: str | os.PathLike, max_size: int) -> BinaryIO:
    """
    Open the given file for binary reading after verifying that it is no larger than `max_size`
    bytes. The returned handle should be used as a context manager.
    """
    try:
        size = os.stat(path).st_size
    except OSError as E:
        raise StatError(E) from E
    if size > max_size:
        raise FileTooLargeError(size, max_size)
    try:
        return open(path, 'rb')
    except OSError as E:
        raise OpenError(E) from E


class LineReader:
    """
    Iterates the lines of a binary stream without their terminators. A line ends at a line feed,
    and a carriage return directly before it is removed as well. Any line that does not fit into
    a buffer of `buffer_size` bytes, terminator included, causes a
    `b64d.lib.exceptions.BufferOverflowError`.
    """

    def __init__(self, stream: BinaryIO, buffer_size: int = CHUNK_SIZE):
        self.stream = stream
        self.buffer_size = buffer_size
        self.line_number = 0

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        try:
            line = self.stream.readline(self.buffer_size)
        except OSError as E:
            raise ReadError(E) from E
        if not line:
            raise StopIteration
        self.line_number += 1
        if line.endswith(B'\n'):
            line = line[:-1]
        elif len(line) >= self.buffer_size:
            raise BufferOverflowError(self.line_number, self.buffer_size)
        if line.endswith(B'\r'):
            line = line[:-1]
        return line
