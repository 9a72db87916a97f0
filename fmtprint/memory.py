"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Optional


def _require(count: int, *buffers: bytes | bytearray) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(f"count {count} exceeds buffer length {len(buffer)}")


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (mod 256)."""
    _require(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Zero the first ``count`` bytes of ``buffer``."""
    memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count`` elements of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dest: bytearray, src: bytes | bytearray, count: int) -> bytearray:
    """Copy ``count`` bytes from ``src`` to the start of ``dest``."""
    _require(count, dest, src)
    dest[:count] = src[:count]
    return dest


def memccpy(
    dest: bytearray, src: bytes | bytearray, stop: int, count: int
) -> Optional[int]:
    """Copy bytes until ``stop`` has been copied or ``count`` bytes are done.

    Returns the offset in ``dest`` just past the copied stop byte, or None
    when the stop byte does not occur in the first ``count`` bytes.
    """
    _require(count, dest, src)
    target = stop & 0xFF
    for offset, byte in enumerate(src[:count]):
        dest[offset] = byte
        if byte == target:
            return offset + 1
    return None


def memchr(data: bytes | bytearray, value: int, count: int) -> Optional[int]:
    """Return the offset of ``value`` in the first ``count`` bytes, or None."""
    _require(count, data)
    offset = bytes(data[:count]).find(value & 0xFF)
    return None if offset < 0 else offset


def memcmp(first: bytes | bytearray, second: bytes | bytearray, count: int) -> int:
    """Compare ``count`` bytes; return the difference at the first mismatch."""
    _require(count, first, second)
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def memmove(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Copy ``count`` bytes inside ``buffer`` from offset ``src`` to ``dest``.

    Overlapping ranges are handled correctly.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _require(count)
    if max(dest, src) + count > len(buffer):
        raise ValueError("range exceeds buffer length")
    buffer[dest : dest + count] = buffer[src : src + count]
    return buffer