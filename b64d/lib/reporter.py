"""
Output of accepted decodings and of the run statistics.
"""
from __future__ import annotations

import dataclasses
import os
import sys

from typing import BinaryIO, TextIO

from b64d.lib.config import Configuration
from b64d.lib.environment import environment


@dataclasses.dataclass
class ScanStatistics:
    total_found: int = 0
    total_decoded: int = 0
    truncated: bool = False


class Reporter:
    """
    Writes every accepted decoding as one line to the binary `output` stream, prefixed with its
    line number if the configuration requests it. The decoded bytes are written unaltered and may
    themselves contain line breaks. Statistics are written to the text stream `errors`.
    """

    def __init__(self, config: Configuration, output: BinaryIO | None = None, errors: TextIO | None = None):
        self.config = config
        self.output = output if output is not None else sys.stdout.buffer
        self.errors = errors if errors is not None else sys.stderr

    def _colorize(self, stream) -> bool:
        if environment.colorless.value:
            return False
        try:
            return stream.isatty()
        except (AttributeError, ValueError):
            return False

    def report(self, line_number: int, decoded: bytes) -> None:
        if self.config.show_offset:
            self.output.write(B'Line %d: ' % line_number)
        self.output.write(decoded)
        self.output.write(B'\n')

    def statistics(self, stats: ScanStatistics) -> None:
        errors = self.errors
        heading = 'Statistics:'
        if self._colorize(errors):
            import colorama
            if os.name == 'nt':
                errors = colorama.AnsiToWin32(errors).stream
            heading = F'{colorama.Style.BRIGHT}{heading}{colorama.Style.RESET_ALL}'
        print(file=errors)
        print(heading, file=errors)
        print(F'  Total patterns found: {stats.total_found}', file=errors)
        print(F'  Successfully decoded: {stats.total_decoded}', file=errors)

    def flush(self) -> None:
        self.output.flush()
