"""String helpers: searching, comparing, bounded copies, splitting and trimming."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional

_NUL = "\0"


def chr_pos(char: str, text: str) -> int:
    """Return the index of the first ``char`` in ``text``, or -1 if absent."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return text.find(char)


def strndup(text: str, limit: int) -> str:
    """Return a copy of at most ``limit`` leading characters of ``text``."""
    return text[: max(limit, 0)]


def strchr(text: str, char: str) -> Optional[int]:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    index = text.find(char)
    if index >= 0:
        return index
    return len(text) if char == _NUL else None


def strrchr(text: str, char: str) -> Optional[int]:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters of two strings.

    Returns zero when they match, otherwise the difference of the character
    codes at the first mismatch; the end of a string counts as code 0.
    """
    if limit <= 0:
        return 0
    for a, b in zip_longest(first[:limit], second[:limit], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            return 0
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the end mark.

    Returns the copied text and the full length of ``src``; a copy shorter
    than that length means the source was cut off.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the result would have had
    without the size limit (or ``size + len(src)`` when ``dst`` already fills
    the buffer).
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dst, len(src)
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strnstr(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Find ``needle`` wholly inside the first ``limit`` characters.

    Returns its index, 0 for an empty needle, or None when not found.
    """
    if not needle:
        return 0
    index = haystack[: max(limit, 0)].find(needle)
    return index if index >= 0 else None


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    if first is None or second is None:
        raise TypeError("both strings are required")
    return first + second


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, chars: Optional[str]) -> str:
    """Remove characters in ``chars`` from both ends of ``text``.

    With ``chars`` of None the text is returned unchanged.
    """
    if chars is None:
        return text
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end gives an empty string.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if start > len(text):
        return ""
    return text[start : start + max(length, 0)]