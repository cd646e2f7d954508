"""
Library of regular expression patterns used to locate base64 candidates.
"""
from __future__ import annotations

import enum
import functools
import re

from typing import Iterator


def _sized_suffix(lower: int):
    if lower <= 0:
        return '*'
    if lower == 1:
        return '+'
    return F'{{{lower},}}'


class pattern:
    """
    A wrapper for regular expression pattern objects created from re.compile, which can be
    applied to both text and binary input. The text and binary variants are compiled lazily.
    """
    str_pattern: str
    bin_pattern: bytes

    def __init__(self, pattern: str, flags: int = 0):
        self.str_pattern = pattern
        self.bin_pattern = pattern.encode('ascii')
        self.flags = flags

    @functools.cached_property
    def bin(self) -> re.Pattern[bytes]:
        return re.compile(self.bin_pattern, flags=self.flags)

    @functools.cached_property
    def str(self) -> re.Pattern[str]:
        return re.compile(self.str_pattern, flags=self.flags)

    def _select(self, string):
        return self.str if isinstance(string, str) else self.bin

    def finditer(self, string, pos: int = 0) -> Iterator[re.Match]:
        return self._select(string).finditer(string, pos)

    def findall(self, string) -> list:
        """
        Return the full text of all greedy, non-overlapping matches from left to right.
        """
        return [match[0] for match in self.finditer(string)]

    def fullmatch(self, string):
        return self._select(string).fullmatch(string)


class alphabet(pattern):
    """
    A pattern object representing strings of at least `lower` letters from a given alphabet,
    followed by an optional suffix.
    """
    def __init__(self, repeat: str, suffix: str = '', lower: int = 1, flags: int = 0):
        self.repeat = repeat
        self.suffix = suffix
        self.lower = lower
        pattern.__init__(self, F'(?:{repeat}){_sized_suffix(lower)}{suffix}', flags)


class formats(enum.Enum):
    """
    An enumeration of the base64 patterns that the scanner can search for.
    """
    b64 = alphabet(R'[A-Za-z0-9+/]', suffix='={0,2}', lower=4)
    "Base64 encoded strings using the standard alphabet"
    b64u = alphabet(R'[A-Za-z0-9\-_]', suffix='={0,2}', lower=4)
    "Base64 encoded strings using the URL-safe alphabet"

    def __getattr__(self, name):
        if name in ('finditer', 'findall', 'fullmatch', 'bin', 'str'):
            return getattr(self.value, name)
        raise AttributeError(name)
