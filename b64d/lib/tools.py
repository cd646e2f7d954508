#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Miscellaneous helper functions.
"""
from __future__ import annotations

import inspect
import os
import sys

from typing import TypeVar

_S = TypeVar('_S', str, bytes)


def get_terminal_size(default=0):
    """
    Returns the size of the currently attached terminal. If the environment variable
    `B64D_TERM_SIZE` is set to an integer value, it takes precedence. If the width of the
    terminal cannot be determined or if the width is less than 2 characters, the function
    returns the default.
    """
    from b64d.lib.environment import environment
    ev_terminal_size = environment.term_size.value
    if ev_terminal_size and ev_terminal_size > 0:
        return ev_terminal_size
    width = default
    for stream in (sys.stderr, sys.stdout):
        if stream.isatty():
            try:
                width = os.get_terminal_size(stream.fileno()).columns
            except Exception:
                width = default
            else:
                break
    return default if width < 2 else width - 1


def terminalfit(text: str, width: int = 0, parsep: str = '\n\n', **kw) -> str:
    """
    Reformats text paragraph by paragraph to fit the given width. Paragraphs that begin with a
    space or a bullet are assumed to be preformatted and remain untouched.
    """
    import textwrap

    width = width or get_terminal_size(80)

    def fitted(paragraphs):
        for p in paragraphs:
            if p.startswith(' ') or p.startswith('-'):
                yield p
            else:
                yield '\n'.join(textwrap.wrap(p, width, **kw))

    return parsep.join(fitted(text.replace('\r', '').split('\n\n')))


def documentation(obj):
    """
    Return the documentation string of a given object as it should be displayed on the command
    line. Backtick references of the form `b64d.lib.module.name` are reduced to the final name.
    """
    import re
    docs = inspect.getdoc(obj) or ''
    docs = re.sub(R'`b64d\.(?:\w+\.)*(\w+)`', R'\1', docs)
    return docs.replace('`', '')


def exception_to_string(exception: BaseException, default=None) -> str:
    """
    Attempts to convert a given exception to a good description that can be exposed to the user.
    """
    if not exception.args:
        return exception.__class__.__name__
    it = (a for a in exception.args if isinstance(a, str))
    if default is None:
        default = str(exception)
    return max(it, key=len, default=default).strip()


def truncate(string: _S, length: int) -> _S:
    """
    Shorten the input to the given length and append an ellipsis if anything was cut off.
    """
    if len(string) <= length:
        return string
    ellipsis = '...' if isinstance(string, str) else B'...'
    return string[:length] + ellipsis
