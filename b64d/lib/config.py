"""
The immutable run configuration together with the fixed limits of the scanner.
"""
from __future__ import annotations

import dataclasses

MAX_FILE_SIZE = 100 * 1024 * 1024
"""Default value for `b64d.lib.config.Configuration.max_size`."""
MAX_MATCHES = 10000
"""Maximum number of candidates that are processed in one run."""
MIN_B64_LENGTH = 4
"""Default value for `b64d.lib.config.Configuration.min_length`."""
CHUNK_SIZE = 64 * 1024
"""Size of the line buffer; no input line may exceed it."""


@dataclasses.dataclass(frozen=True)
class Configuration:
    """
    Settings for one run of the scanner. An instance is created once from the command line and
    handed to every stage of the pipeline that depends on it.
    """
    url_safe: bool = False
    min_length: int = MIN_B64_LENGTH
    max_size: int = MAX_FILE_SIZE
    verbose: bool = False
    show_offset: bool = False

    def __post_init__(self):
        if self.min_length < 0:
            raise ValueError(F'the minimum length must not be negative, got {self.min_length}')
        if self.max_size < 0:
            raise ValueError(F'the maximum size must not be negative, got {self.max_size}')
