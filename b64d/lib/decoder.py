"""
Decoding of base64 candidates. A candidate is tried against an ordered list of base64 variants
and the first variant that accepts it determines the result:

1. `std`: the standard alphabet with mandatory padding,
2. `url`: the URL-safe alphabet with mandatory padding,
3. `url-raw`: the URL-safe alphabet without padding,
4. `std-raw`: the standard alphabet without padding.

The two URL-safe variants are only attempted when URL-safe scanning is enabled.
"""
from __future__ import annotations

import base64
import binascii
import dataclasses

from b64d.lib.config import Configuration
from b64d.lib.exceptions import DecodeError
from b64d.lib.patterns import alphabet

_STD_ALPHABET = alphabet(R'[A-Za-z0-9+/]', lower=0)
_URL_ALPHABET = alphabet(R'[A-Za-z0-9\-_]', lower=0)


@dataclasses.dataclass(frozen=True)
class DecodeVariant:
    name: str
    altchars: bytes | None
    padded: bool
    url_safe: bool = False

    @property
    def charset(self) -> alphabet:
        return _URL_ALPHABET if self.url_safe else _STD_ALPHABET

    def decode(self, candidate: bytes) -> bytes:
        """
        Decode the candidate according to this variant, or raise `binascii.Error` if it is not
        valid for it.
        """
        if self.padded:
            if len(candidate) % 4:
                raise binascii.Error('incorrect padding')
            body = candidate.rstrip(B'=')
            if len(candidate) - len(body) > 2:
                raise binascii.Error('excess padding')
        else:
            body = candidate
            if len(body) % 4 == 1:
                raise binascii.Error('invalid length')
        if not self.charset.fullmatch(body):
            raise binascii.Error(F'invalid character for the {self.name} alphabet')
        if not self.padded:
            candidate = body + B'=' * (-len(body) % 4)
        return base64.b64decode(candidate, altchars=self.altchars, validate=True)


STD = DecodeVariant('std', None, padded=True)
URL = DecodeVariant('url', B'-_', padded=True, url_safe=True)
URL_RAW = DecodeVariant('url-raw', B'-_', padded=False, url_safe=True)
STD_RAW = DecodeVariant('std-raw', None, padded=False)

VARIANTS = (STD, URL, URL_RAW, STD_RAW)


def variants(config: Configuration) -> tuple[DecodeVariant, ...]:
    """
    The decode variants to attempt for the given configuration, in order.
    """
    if config.url_safe:
        return VARIANTS
    return tuple(v for v in VARIANTS if not v.url_safe)


def decode_with_variant(candidate: bytes, config: Configuration) -> tuple[DecodeVariant, bytes]:
    """
    Decode the candidate with the first variant that accepts it and return that variant along
    with the decoded data. Raises `b64d.lib.exceptions.DecodeError` if no variant applies.
    """
    for variant in variants(config):
        try:
            return variant, variant.decode(candidate)
        except ValueError:
            continue
    raise DecodeError('invalid base64')
