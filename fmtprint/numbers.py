"""Conversions between integers and their text representations."""

from __future__ import annotations

from itertools import takewhile

_SPACES = " \t\n\v\f\r"
_WORD_MODULUS = 1 << 64


def natoi(text: str, limit: int) -> int:
    """Parse a signed decimal integer from at most ``limit`` leading characters.

    Leading whitespace is skipped, one optional sign is read, and digits are
    consumed until the first non-digit. Text without digits gives 0.
    """
    rest = text[: max(limit, 0)].lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: "0" <= ch <= "9", rest))
    return sign * int(digits) if digits else 0


def atoi(text: str) -> int:
    """Parse a signed decimal integer from the start of ``text``."""
    return natoi(text, len(text))


def itoa(number: int) -> str:
    """Return the decimal text of ``number``, with a leading '-' if negative."""
    return f"{int(number)}"


def to_base(number: int, digits: str) -> str:
    """Write ``number`` as an unsigned 64-bit value using the given digit set.

    The base is the length of ``digits``; negative numbers wrap around to
    their unsigned 64-bit value.
    """
    base = len(digits)
    if base < 2:
        raise ValueError("a digit set needs at least two symbols")
    value = number % _WORD_MODULUS
    out = []
    while True:
        value, remainder = divmod(value, base)
        out.append(digits[remainder])
        if not value:
            break
    return "".join(reversed(out))