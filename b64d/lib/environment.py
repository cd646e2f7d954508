"""
Settings that can be changed through environment variables, and the logging setup of b64d. All
environment variables use the prefix `B64D_` and are read once when this module is imported:

- `B64D_VERBOSITY`: overrides the log level chosen on the command line; accepts a level name like
  `debug` or a verbosity count like `2`.
- `B64D_TERM_SIZE`: the width used for help output when the terminal size cannot be determined.
- `B64D_COLORLESS`: disables highlighting of the statistics.
"""
from __future__ import annotations

import os
import logging

from enum import IntEnum
from typing import Optional, TypeVar, Generic

_T = TypeVar('_T')

Logger = logging.Logger


class LogLevel(IntEnum):
    """
    The log levels of the standard library, extended by a level above critical.
    """
    DETACHED = logging.CRITICAL + 100
    """
    The scanner is used as a library. Nothing is logged and fatal problems surface as exceptions.
    """

    NOTSET   = logging.NOTSET    # noqa
    CRITICAL = logging.CRITICAL  # noqa
    ERROR    = logging.ERROR     # noqa
    WARNING  = logging.WARNING   # noqa
    INFO     = logging.INFO      # noqa
    DEBUG    = logging.DEBUG     # noqa

    @classmethod
    def FromVerbosity(cls, verbosity: int) -> LogLevel:
        """
        Map the number of verbosity flags to a log level; negative values detach.
        """
        if verbosity < 0:
            return cls.DETACHED
        if verbosity == 0:
            return cls.WARNING
        if verbosity == 1:
            return cls.INFO
        return cls.DEBUG


class B64dFormatter(logging.Formatter):

    NAMES = {
        logging.CRITICAL : 'failure',
        logging.ERROR    : 'failure',
        logging.WARNING  : 'warning',
        logging.INFO     : 'comment',
        logging.DEBUG    : 'verbose',
    }

    def formatMessage(self, record: logging.LogRecord) -> str:
        record.custom_level_name = self.NAMES.get(record.levelno, 'message')
        return super().formatMessage(record)


def logger(name: str) -> Logger:
    """
    Obtain a logger that writes to stderr in the b64d format. The logger does not propagate.
    """
    log = logging.getLogger(name)
    if not log.hasHandlers():
        handler = logging.StreamHandler()
        handler.setFormatter(B64dFormatter(
            '({asctime}) {custom_level_name} in {name}: {message}',
            style='{',
            datefmt='%H:%M:%S',
        ))
        log.addHandler(handler)
    log.propagate = False
    return log


class EnvironmentVariableSetting(Generic[_T]):
    key: str
    value: Optional[_T]
    default: Optional[_T] = None

    def __init__(self, name: str):
        self.key = F'B64D_{name}'
        raw = os.environ.get(self.key)
        self.value = self.default if raw is None else self.parse(raw.strip())

    def parse(self, raw: str) -> Optional[_T]:
        raise NotImplementedError


class EVBool(EnvironmentVariableSetting[bool]):
    default = False

    def parse(self, raw: str):
        raw = raw.lower()
        if not raw:
            return False
        if raw.isdigit():
            return bool(int(raw))
        return raw not in {'no', 'off', 'false'}


class EVInt(EnvironmentVariableSetting[int]):
    default = 0

    def parse(self, raw: str):
        try:
            return int(raw, 0)
        except ValueError:
            return 0


class EVLog(EnvironmentVariableSetting[LogLevel]):

    def parse(self, raw: str):
        if raw.isdigit():
            return LogLevel.FromVerbosity(int(raw))
        try:
            return LogLevel[raw.upper()]
        except KeyError:
            levels = ', '.join(level.name for level in LogLevel)
            logger(__name__).warning(
                F'ignoring unknown verbosity {raw!r}; pick from: {levels}')
            return None


class environment:
    verbosity = EVLog('VERBOSITY')
    term_size = EVInt('TERM_SIZE')
    colorless = EVBool('COLORLESS')
