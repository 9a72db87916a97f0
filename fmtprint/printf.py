"""Formatting and printing with a printf-style format string."""

from __future__ import annotations

import re
import sys
from typing import Any, Iterator, Optional, TextIO

from .convert import render
from .spec import parse_spec

_DIRECTIVE = re.compile(r"%[-0]*(?:\*|[0-9]+)?(?:\.(?:\*|[0-9]*))?[csdiuxXp%]")


class FormatError(ValueError):
    """Raised for a format string holding a malformed directive."""


def is_valid_format(fmt: str) -> bool:
    """Return True when every '%' in ``fmt`` starts a well-formed directive."""
    pos = 0
    while True:
        start = fmt.find("%", pos)
        if start < 0:
            return True
        match = _DIRECTIVE.match(fmt, start)
        if match is None:
            return False
        pos = match.end()


def _pieces(fmt: str, args: Iterator[Any]) -> Iterator[str]:
    pos = 0
    while pos < len(fmt):
        start = fmt.find("%", pos)
        if start < 0:
            yield fmt[pos:]
            return
        yield fmt[pos:start]
        spec, pos = parse_spec(fmt, start, args)
        yield render(spec, args)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its directives replaced by the formatted ``args``.

    Surplus arguments are ignored; too few raise TypeError.
    """
    if not is_valid_format(fmt):
        raise FormatError(f"invalid format string: {fmt!r}")
    return "".join(_pieces(fmt, iter(args)))


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    (sys.stdout if file is None else file).write(text)
    return len(text)