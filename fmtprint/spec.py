"""Parsing of a single conversion directive such as ``%-08.3d``."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator

from .chars import is_digit


class Conversion(Enum):
    """The conversion characters a directive may end with."""

    CHAR = "c"
    STRING = "s"
    DECIMAL = "d"
    INTEGER = "i"
    UNSIGNED = "u"
    HEX_LOWER = "x"
    HEX_UPPER = "X"
    POINTER = "p"
    PERCENT = "%"


@dataclass(frozen=True)
class ConversionSpec:
    """A parsed directive: flags, field width, precision and conversion.

    ``fill`` is the character used to pad the field, derived from the flags.
    """

    conversion: Conversion
    left_align: bool = False
    zero_pad: bool = False
    fill: str = " "
    width: int = 0
    has_precision: bool = False
    precision: int = 0


def _next_int(args: Iterator[Any]) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    return operator.index(value)


def _scan_number(fmt: str, pos: int) -> tuple[int, int]:
    end = pos
    while end < len(fmt) and is_digit(fmt[end]):
        end += 1
    return int(fmt[pos:end]), end


def parse_spec(
    fmt: str, pos: int, args: Iterator[Any]
) -> tuple[ConversionSpec, int]:
    """Parse the directive starting at ``fmt[pos]``, which must be '%'.

    Values for '*' width or precision are taken from the iterator ``args``.
    Returns the spec and the index just past the conversion character.
    """
    if fmt[pos : pos + 1] != "%":
        raise ValueError(f"no directive at position {pos}")
    length = len(fmt)
    i = pos + 1
    left_align = zero_pad = False
    while i < length and fmt[i] in "-0":
        if fmt[i] == "-":
            left_align = True
        else:
            zero_pad = True
        i += 1

    width = 0
    if i < length and fmt[i] == "*":
        width = _next_int(args)
        i += 1
    elif i < length and is_digit(fmt[i]):
        width, i = _scan_number(fmt, i)
    if width < 0:
        left_align = True
        width = -width

    has_precision = False
    precision = 0
    if i < length and fmt[i] == ".":
        has_precision = True
        i += 1
        if i < length and fmt[i] == "*":
            precision = _next_int(args)
            i += 1
        elif i < length and is_digit(fmt[i]):
            precision, i = _scan_number(fmt, i)
        if precision < 0:
            has_precision = False
            precision = 0
        else:
            zero_pad = False

    if i >= length:
        raise ValueError("incomplete conversion directive")
    try:
        conversion = Conversion(fmt[i])
    except ValueError:
        raise ValueError(f"unknown conversion {fmt[i]!r}") from None

    fill = "0" if zero_pad and not left_align else " "
    if conversion in (Conversion.DECIMAL, Conversion.INTEGER) and has_precision:
        fill = " "
    spec = ConversionSpec(
        conversion=conversion,
        left_align=left_align,
        zero_pad=zero_pad,
        fill=fill,
        width=width,
        has_precision=has_precision,
        precision=precision,
    )
    return spec, i + 1