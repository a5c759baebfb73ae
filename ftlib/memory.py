"""Byte-buffer operations over ``bytearray`` and other bytes-like objects.

Lengths that reach past the end of a buffer raise ``ValueError`` instead of
running off its end.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_count(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def _check_span(buf: BytesLike, offset: int, n: int) -> None:
    if offset < 0 or offset + n > len(buf):
        raise ValueError(
            f"span [{offset}, {offset + n}) is outside buffer of length {len(buf)}"
        )


def bzero(buf: WritableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)


def memset(buf: WritableBuffer, value: int, count: int) -> WritableBuffer:
    """Fill the first ``count`` bytes of ``buf`` with ``value`` truncated to a byte."""
    _check_count(count, buf)
    buf[:count] = bytes([value & 0xFF]) * count
    return buf


def memcpy(dest: WritableBuffer, src: BytesLike, n: int) -> WritableBuffer:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: WritableBuffer, dest: int, src: int, n: int) -> WritableBuffer:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    _check_span(buf, src, n)
    _check_span(buf, dest, n)
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(buf: BytesLike, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` within the first ``n`` bytes."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_count(n, a, b)
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)