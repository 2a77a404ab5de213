"""Byte-buffer primitives working on ``bytearray`` and other byte sequences."""

from __future__ import annotations

from typing import Optional

INT_MAX = 2147483647


def _check_count(n: int, *buffers: object) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):  # type: ignore[arg-type]
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")  # type: ignore[arg-type]


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` truncated to a byte."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return memset(buf, 0, n)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``buffer`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled correctly.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if max(dest, src) + n > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(buf: bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` in ``buf[:n]``, or None."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair."""
    _check_count(n, a, b)
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    A request for zero elements or zero-sized elements yields a single zero
    byte. Requests above ``INT_MAX`` bytes raise ``MemoryError``.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray(1)
    if count > INT_MAX or size > INT_MAX or count * size > INT_MAX:
        raise MemoryError(f"allocation of {count} x {size} bytes is too large")
    return bytearray(count * size)