"""Rendering of a parsed directive together with its argument."""

from __future__ import annotations

import operator
from dataclasses import replace
from typing import Any, Callable, Iterator

from .numbers import itoa, to_base
from .spec import Conversion, ConversionSpec

_DIGIT_SETS = {
    Conversion.UNSIGNED: "0123456789",
    Conversion.HEX_LOWER: "0123456789abcdef",
    Conversion.HEX_UPPER: "0123456789ABCDEF",
}
_NULL_TEXT = "(null)"


def pad(text: str, spec: ConversionSpec) -> str:
    """Keep ``spec.precision`` leading characters and pad to ``spec.width``.

    Padding uses ``spec.fill`` and goes after the text when ``spec.left_align``
    is set, before it otherwise. The result never exceeds ``spec.width``.
    """
    width = max(spec.width, 0)
    keep = max(spec.precision, 0)
    if spec.left_align:
        return (text[:keep] + spec.fill * max(width - keep, 0))[:width]
    leading = max(width - keep, 0)
    return spec.fill * leading + text[: width - leading]


def _take(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c requires a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _zero_extend(digits: str, spec: ConversionSpec) -> str:
    if spec.precision <= len(digits):
        return digits
    widened = replace(
        spec, left_align=False, width=spec.precision, precision=len(digits), fill="0"
    )
    return pad(digits, widened)


def _is_invisible_zero(value: int, spec: ConversionSpec) -> bool:
    return value == 0 and spec.has_precision and spec.precision == 0


def _fit(text: str, spec: ConversionSpec, invisible: bool) -> str:
    if invisible:
        return pad(text, replace(spec, precision=spec.precision))
    return pad(text, replace(spec, width=max(spec.width, len(text)), precision=len(text)))


def _render_char(spec: ConversionSpec, args: Iterator[Any]) -> str:
    char = "%" if spec.conversion is Conversion.PERCENT else _as_char(_take(args))
    return pad(char, replace(spec, width=max(spec.width, 1), precision=1))


def _render_string(spec: ConversionSpec, args: Iterator[Any]) -> str:
    value = _take(args)
    if value is None:
        value = _NULL_TEXT
    elif not isinstance(value, str):
        raise TypeError(f"%s requires a string, got {type(value).__name__}")
    text = value.split("\0", 1)[0]
    keep = spec.precision
    if not spec.has_precision or keep > len(text):
        keep = len(text)
    return pad(text, replace(spec, width=max(spec.width, keep), precision=keep))


def _render_signed(spec: ConversionSpec, args: Iterator[Any]) -> str:
    number = _to_int32(operator.index(_take(args)))
    invisible = _is_invisible_zero(number, spec)
    negative = number < 0
    digits = _zero_extend(itoa(abs(number)), spec)
    if negative and (spec.fill != "0" or spec.width <= len(digits)):
        digits = "-" + digits
    out = _fit(digits, spec, invisible)
    if negative and spec.fill == "0":
        out = "-" + out[1:]
    return out


def _render_unsigned(spec: ConversionSpec, args: Iterator[Any]) -> str:
    number = operator.index(_take(args)) & 0xFFFFFFFF
    invisible = _is_invisible_zero(number, spec)
    digits = _zero_extend(to_base(number, _DIGIT_SETS[spec.conversion]), spec)
    return _fit(digits, spec, invisible)


def _render_pointer(spec: ConversionSpec, args: Iterator[Any]) -> str:
    value = _take(args)
    address = 0 if value is None else operator.index(value)
    digits = to_base(address, _DIGIT_SETS[Conversion.HEX_LOWER])
    invisible = digits[0] == "0" and spec.has_precision and spec.precision == 0
    text = "0x" + _zero_extend(digits, spec)
    if not invisible:
        return _fit(text, spec, False)
    width = 2 if spec.width < len(text) else spec.width
    return pad(text, replace(spec, width=width, precision=2))


_RENDERERS: dict[Conversion, Callable[[ConversionSpec, Iterator[Any]], str]] = {
    Conversion.CHAR: _render_char,
    Conversion.PERCENT: _render_char,
    Conversion.STRING: _render_string,
    Conversion.DECIMAL: _render_signed,
    Conversion.INTEGER: _render_signed,
    Conversion.UNSIGNED: _render_unsigned,
    Conversion.HEX_LOWER: _render_unsigned,
    Conversion.HEX_UPPER: _render_unsigned,
    Conversion.POINTER: _render_pointer,
}


def render(spec: ConversionSpec, args: Iterator[Any]) -> str:
    """Render ``spec``, taking its value (if any) from the iterator ``args``."""
    return _RENDERERS[spec.conversion](spec, args)