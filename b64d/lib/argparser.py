"""
Provides the customized argument parser used by the b64d command line interface.
"""
from __future__ import annotations

from argparse import (
    Action,
    ArgumentParser,
    RawDescriptionHelpFormatter,
)
from typing import TYPE_CHECKING, NoReturn, Sequence

if TYPE_CHECKING:
    from _typeshed import SupportsWrite

import sys

from b64d.lib.exceptions import B64dUsageError
from b64d.lib.tools import get_terminal_size, terminalfit


class ArgparseError(B64dUsageError):
    """
    This custom exception type is thrown from the custom argument parser rather than terminating
    program execution immediately. The `parser` parameter is a reference to the argument parser
    that threw the original argument parsing exception with the given `message`.
    """
    def __init__(self, parser: ArgumentParserWithUsageExit, message: str):
        self.parser = parser
        super().__init__(message)


class LineWrapRawTextHelpFormatter(RawDescriptionHelpFormatter):
    """
    The b64d help text formatter uses the full width of the terminal and prints the metavar of an
    option only once, after its last spelling.
    """

    def __init__(self, prog, indent_increment=2, max_help_position=30, width=None):
        super().__init__(prog, indent_increment, max_help_position, width=get_terminal_size(80))

    def add_text(self, text):
        if isinstance(text, str):
            text = terminalfit(text, width=get_terminal_size(80))
        return super().add_text(text)

    def _format_action_invocation(self, action: Action):
        if not action.option_strings:
            metavar, = self._metavar_formatter(action, action.dest)(1)
            return metavar
        parts = [str(option) for option in action.option_strings]
        if action.nargs != 0:
            default = action.dest.upper()
            parts[-1] += F' {self._format_args(action, default)}'
        return ', '.join(parts)


class ArgumentParserWithUsageExit(ArgumentParser):
    """
    The b64d argument parser raises `b64d.lib.argparser.ArgparseError` instead of exiting, so
    that the caller decides how a usage error terminates the program. Help output is written to
    the diagnostic stream.
    """

    USAGE_EXIT_CODE = 1

    def __init__(self, prog=None, description=None, usage=None):
        super().__init__(
            prog=prog,
            usage=usage,
            description=description,
            add_help=False,
            allow_abbrev=False,
            formatter_class=LineWrapRawTextHelpFormatter,
        )
        if sys.version_info >= (3, 14):
            self.color = False

    def print_help(self, file: SupportsWrite[str] | None = None) -> None:
        super().print_help(file=file or sys.stderr)

    def error(self, message: str) -> NoReturn:
        raise ArgparseError(self, message)

    def error_commandline(self, message: str) -> NoReturn:
        """
        Print the error message followed by the full help text and terminate the process with the
        usage exit code.
        """
        if message:
            sys.stderr.write(F'{self.prog}: error: {message}\n\n')
        self.print_help()
        sys.exit(self.USAGE_EXIT_CODE)

    def parse(self, args: Sequence[str]):
        return self.parse_args(args=list(args))
