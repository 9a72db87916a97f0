"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(char: int | str, fd: int) -> None:
    """Write one character (a one-character string or a byte code) to ``fd``."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        data = char.encode("utf-8")
    else:
        data = bytes([char & 0xFF])
    _write_all(fd, data)


def put_str(text: Optional[str], fd: int) -> None:
    """Write ``text`` to ``fd``; a negative ``fd`` or None text writes nothing."""
    if fd < 0 or text is None:
        return
    _write_all(fd, text.encode("utf-8"))


def put_endl(text: Optional[str], fd: int) -> None:
    """Write ``text`` and a newline to ``fd``; skipped like :func:`put_str`."""
    if fd < 0 or text is None:
        return
    put_str(text, fd)
    put_char("\n", fd)


def put_nbr(number: int, fd: int) -> None:
    """Write the decimal text of ``number`` to ``fd``."""
    _write_all(fd, f"{int(number)}".encode("ascii"))