"""String scanning, comparison and integer conversion.

Positions are returned as indices into the string, or ``None`` when nothing
is found. Searching for the NUL character finds the end of the string, as
the terminator is taken to be part of it.
"""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[str, int]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_NUL = "\0"


def _char(c: CharLike) -> str:
    """Turn a one-character string or an int code into a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected a one-character string or an int, got {type(c).__name__}")


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _parse_integer(s: str) -> int:
    """Parse leading whitespace, an optional sign and decimal digits."""
    i = 0
    length = len(s)
    while i < length and s[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < length and s[i] in "+-":
        if s[i] == "-":
            sign = -1
        i += 1
    start = i
    while i < length and s[i] in _DIGITS:
        i += 1
    digits = s[start:i]
    return sign * int(digits) if digits else 0


def atoi(s: str) -> int:
    """Convert the leading decimal number in ``s`` to a 32-bit signed integer.

    Values that do not fit wrap around. Text without a number gives 0.
    """
    return _wrap(_parse_integer(s), 32)


def atol(s: str) -> int:
    """Convert the leading decimal number in ``s`` to a 64-bit signed integer.

    Values that do not fit wrap around. Text without a number gives 0.
    """
    return _wrap(_parse_integer(s), 64)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of ``c`` in ``s``."""
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of ``c`` in ``s``."""
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def _compare(s1: str, s2: str, limit: Optional[int]) -> int:
    pairs = zip(s1, s2)
    count = 0
    for a, b in pairs:
        if limit is not None and count >= limit:
            return 0
        if a != b:
            return ord(a) - ord(b)
        count += 1
    if limit is not None and count >= limit:
        return 0
    if len(s1) == len(s2):
        return 0
    # One string has ended; its terminator compares as 0.
    if len(s1) > len(s2):
        return ord(s1[count])
    return -ord(s2[count])


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings character by character.

    Returns the difference of the first differing character codes, or 0
    when the strings are equal.
    """
    return _compare(s1, s2, None)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings."""
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    return _compare(s1, s2, n)


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Find ``little`` lying wholly within the first ``n`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if not little:
        return 0
    index = big[:n].find(little)
    return None if index < 0 else index


def strndup(s: str, n: int) -> Optional[str]:
    """Return a copy of at most the first ``n`` characters of ``s``.

    A length of 0 gives ``None``.
    """
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if n == 0:
        return None
    return s[:n]