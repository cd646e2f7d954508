"""
Scans a text file line by line for substrings that look like base64 encoded data, decodes them,
and prints every decoding that looks like readable text. Candidates are runs of at least four
characters from the base64 alphabet, optionally followed by up to two padding characters. Each
candidate is decoded with standard base64 first and, if that fails, with the URL-safe variants
(when enabled) and finally with unpadded standard base64. A decoding is printed if at least 75%
of its characters are printable.

Every option can be given with a single or with a double dash; values can be attached with an
equals sign, as in -min=8.
"""
from __future__ import annotations

import sys

from typing import Sequence

from b64d import __version__
from b64d.lib.argparser import ArgparseError, ArgumentParserWithUsageExit
from b64d.lib.config import MAX_FILE_SIZE, MIN_B64_LENGTH, Configuration
from b64d.lib.environment import environment
from b64d.lib.exceptions import B64dException
from b64d.lib.tools import documentation, exception_to_string
from b64d.scan import Scanner

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def argparser() -> ArgumentParserWithUsageExit:
    argp = ArgumentParserWithUsageExit(
        prog='b64d',
        usage='%(prog)s [flags] <filename>',
        description=documentation(sys.modules[__name__]),
    )
    argp.add_argument('filename', metavar='filename', help='The text file to scan.')
    argp.add_argument('-url', '--url', dest='url_safe', action='store_true',
        help='Also decode URL-safe base64 (with -_ instead of +/).')
    argp.add_argument('-min', '--min', dest='min_length', type=int, default=MIN_B64_LENGTH, metavar='N',
        help='Minimum base64 string length to decode; the default is %(default)s.')
    argp.add_argument('-max-size', '--max-size', dest='max_size', type=int, default=MAX_FILE_SIZE, metavar='N',
        help='Maximum file size to process in bytes; the default is %(default)s.')
    argp.add_argument('-offset', '--offset', dest='show_offset', action='store_true',
        help='Prefix every decoded string with the number of the line where it was found.')
    argp.add_argument('-v', '--verbose', action='count', default=0,
        help='Show decode errors and statistics. Specify twice to trace every candidate.')
    argp.add_argument('-h', '--help', action='help', help='Show this help message and exit.')
    argp.add_argument('--version', action='version', version=F'%(prog)s {__version__}',
        help='Show the version number and exit.')
    return argp


def configure(argv: Sequence[str]) -> tuple[str, Configuration, int]:
    """
    Parse the command line into the input file name, a `b64d.lib.config.Configuration`, and a
    verbosity level. Raises `b64d.lib.argparser.ArgparseError` for invalid command lines.
    """
    argp = argparser()
    args = argp.parse(argv)
    try:
        config = Configuration(
            url_safe=args.url_safe,
            min_length=args.min_length,
            max_size=args.max_size,
            verbose=bool(args.verbose),
            show_offset=args.show_offset,
        )
    except ValueError as E:
        argp.error(str(E))
    return args.filename, config, args.verbose


def run(argv: Sequence[str] | None = None) -> int:
    """
    Implements command line execution and returns the exit code.
    """
    argv = sys.argv[1:] if argv is None else argv

    try:
        filename, config, verbosity = configure(argv)
    except ArgparseError as ap:
        ap.parser.error_commandline(str(ap))

    scanner = Scanner(config)
    scanner.log_level = verbosity
    if loglevel := environment.verbosity.value:
        scanner.log_level = loglevel

    try:
        scanner.scan_file(filename)
    except B64dException as E:
        scanner.logger.critical(F'Error: {exception_to_string(E)}')
        return EXIT_FAILURE
    except BrokenPipeError:
        pass
    except KeyboardInterrupt:
        scanner.logger.warning('aborting due to keyboard interrupt')
        return EXIT_FAILURE
    return EXIT_SUCCESS


def main() -> None:
    sys.exit(run())
