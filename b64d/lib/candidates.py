"""
Locates substrings of a line that could be base64 encoded data.
"""
from __future__ import annotations

from b64d.lib.config import Configuration
from b64d.lib.patterns import formats


def has_valid_length(candidate: bytes) -> bool:
    """
    Base64 data without its padding always has a length that is congruent to 0, 2, or 3 modulo
    4; a remainder of 1 can not be produced by any encoder.
    """
    return len(candidate.rstrip(B'=')) % 4 != 1


def find_candidates(line: bytes, config: Configuration) -> list[bytes]:
    """
    Return all distinct base64 candidates in the given line in the order of their first
    occurrence. Matches of the standard alphabet come first; when URL-safe scanning is enabled,
    the matches of the URL-safe alphabet follow, except for those that were already reported.
    """
    candidates: list[bytes] = []
    seen: set[bytes] = set()
    patterns = [formats.b64]
    if config.url_safe:
        patterns.append(formats.b64u)
    for p in patterns:
        for match in p.findall(line):
            if len(match) < config.min_length or not has_valid_length(match):
                continue
            if match in seen:
                continue
            seen.add(match)
            candidates.append(match)
    return candidates
