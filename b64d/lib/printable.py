"""
Heuristic test that decides whether decoded data is readable text.
"""
from __future__ import annotations

import codecs

PRINTABLE_RATIO = 0.75
"""Minimum share of printable characters in decoded text that is reported."""

_COMMON_WHITESPACE = frozenset('\n\r\t')
_INFORMATION_SEPARATORS = frozenset('\x1c\x1d\x1e\x1f')


def is_readable(decoded: bytes | str, threshold: float = PRINTABLE_RATIO) -> bool:
    """
    The input is decoded as UTF-8 with invalid sequences replaced by U+FFFD. Every character is
    then put in one of three classes:

    - printable characters together with line feed, carriage return and tab count as readable,
    - any other whitespace character is neutral, except for the information separators U+001C
      through U+001F, which Python considers whitespace,
    - everything else rejects the entire input immediately.

    The input is readable if it is not empty and the share of readable characters among all
    characters reaches the threshold.
    """
    if isinstance(decoded, (bytes, bytearray, memoryview)):
        text = codecs.decode(decoded, 'utf8', 'replace')
    else:
        text = decoded
    if not text:
        return False
    printable = 0
    for character in text:
        if character.isprintable() or character in _COMMON_WHITESPACE:
            printable += 1
        elif not character.isspace() or character in _INFORMATION_SEPARATORS:
            return False
    return printable / len(text) >= threshold
