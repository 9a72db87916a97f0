"""Character classification and case conversion for ASCII codes."""

from __future__ import annotations


def _code(code: int | str) -> int:
    """Return the integer code of an int or a one-character string."""
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError(f"expected a single character, got {code!r}")
        return ord(code)
    return code


def is_lower(code: int | str) -> bool:
    """Return True for an ASCII lower-case letter."""
    value = _code(code)
    return ord("a") <= value <= ord("z")


def is_upper(code: int | str) -> bool:
    """Return True for an ASCII upper-case letter."""
    value = _code(code)
    return ord("A") <= value <= ord("Z")


def is_alpha(code: int | str) -> bool:
    """Return True for an ASCII letter of either case."""
    return is_lower(code) or is_upper(code)


def is_digit(code: int | str) -> bool:
    """Return True for an ASCII decimal digit."""
    value = _code(code)
    return ord("0") <= value <= ord("9")


def is_alnum(code: int | str) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int | str) -> bool:
    """Return True for a code in the 7-bit ASCII range."""
    return 0 <= _code(code) <= 127


def is_print(code: int | str) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(code) <= 126


def to_upper(code: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; other codes pass unchanged.

    The result has the same type as the argument.
    """
    value = _code(code)
    result = value - 32 if is_lower(value) else value
    return chr(result) if isinstance(code, str) else result


def to_lower(code: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; other codes pass unchanged.

    The result has the same type as the argument.
    """
    value = _code(code)
    result = value + 32 if is_upper(value) else value
    return chr(result) if isinstance(code, str) else result