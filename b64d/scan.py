"""
The scanner connects all stages of the pipeline: it reads the input line by line, extracts the
base64 candidates of each line, decodes them, and hands readable results to a
`b64d.lib.reporter.Reporter`. Within Python code, the scanner can be used as follows:

    from b64d import Configuration, Scanner

    with open('server.log', 'rb') as stream:
        stats = Scanner(Configuration(url_safe=True)).scan(stream)

The scanners share one logger. Unless a log level has been set on it, the first scanner detaches
it, so that nothing but the decoded results is reported.
"""
from __future__ import annotations

import os

from typing import TYPE_CHECKING, BinaryIO

from b64d.lib.candidates import find_candidates
from b64d.lib.config import CHUNK_SIZE, MAX_MATCHES, Configuration
from b64d.lib.decoder import decode_with_variant
from b64d.lib.environment import Logger, LogLevel, logger
from b64d.lib.exceptions import DecodeError
from b64d.lib.printable import is_readable
from b64d.lib.reader import LineReader, open_input
from b64d.lib.reporter import Reporter, ScanStatistics
from b64d.lib.tools import truncate

if TYPE_CHECKING:
    from typing import Self


class Scanner:
    """
    Runs the extraction pipeline for one `b64d.lib.config.Configuration`. The run-scoped counters
    are returned as a `b64d.lib.reporter.ScanStatistics` object from each call to
    `b64d.scan.Scanner.scan`.
    """

    name = 'b64d'

    def __init__(
        self,
        config: Configuration,
        reporter: Reporter | None = None,
        max_matches: int = MAX_MATCHES,
        buffer_size: int = CHUNK_SIZE,
    ):
        self.config = config
        self.reporter = reporter or Reporter(config)
        self.max_matches = max_matches
        self.buffer_size = buffer_size
        if self.logger.level == LogLevel.NOTSET:
            self.log_detach()

    @property
    def logger(self) -> Logger:
        return logger(self.name)

    @property
    def log_level(self) -> LogLevel:
        return LogLevel(self.logger.getEffectiveLevel())

    @log_level.setter
    def log_level(self, value: int | LogLevel) -> None:
        if not isinstance(value, LogLevel):
            value = LogLevel.FromVerbosity(value)
        self.logger.setLevel(value)

    def log_detach(self) -> Self:
        self.log_level = LogLevel.DETACHED
        return self

    def log_info(self, *messages) -> bool:
        rv = self.logger.isEnabledFor(LogLevel.INFO)
        if rv and messages:
            self.logger.info(' '.join(str(m) for m in messages))
        return rv

    def log_debug(self, *messages) -> bool:
        rv = self.logger.isEnabledFor(LogLevel.DEBUG)
        if rv and messages:
            self.logger.debug(' '.join(str(m) for m in messages))
        return rv

    def scan(self, stream: BinaryIO) -> ScanStatistics:
        """
        Process all lines of the given binary stream. Processing ends early when the number of
        candidates reaches the match limit; the remaining input is not read in that case.
        """
        try:
            stats = self._process(stream)
        finally:
            self.reporter.flush()
        if self.config.verbose:
            self.reporter.statistics(stats)
        return stats

    def _process(self, stream: BinaryIO) -> ScanStatistics:
        config = self.config
        stats = ScanStatistics()
        reader = LineReader(stream, self.buffer_size)
        for line in reader:
            lno = reader.line_number
            for candidate in find_candidates(line, config):
                if stats.total_found >= self.max_matches:
                    stats.truncated = True
                    self.log_info(F'reached maximum match limit ({self.max_matches})')
                    return stats
                stats.total_found += 1
                try:
                    variant, decoded = decode_with_variant(candidate, config)
                except DecodeError as E:
                    if config.verbose:
                        text = truncate(candidate, 20).decode('latin1')
                        self.log_info(F"Line {lno}: decode error for '{text}': {E!s}")
                    continue
                if not is_readable(decoded):
                    self.log_debug(F'Line {lno}: discarding unreadable {variant.name} decoding of {len(decoded)} bytes')
                    continue
                self.log_debug(F'Line {lno}: accepted {variant.name} decoding of {len(decoded)} bytes')
                stats.total_decoded += 1
                self.reporter.report(lno, decoded)
        return stats

    def scan_file(self, path: str | os.PathLike) -> ScanStatistics:
        """
        Check the size of the given file against the configured maximum, then scan it.
        """
        with open_input(path, self.config.max_size) as stream:
            return self.scan(stream)
