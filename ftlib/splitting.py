"""Splitting, trimming, bounded copying and per-character mapping of strings."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, TypeVar

_T = TypeVar("_T")

_QUOTES = frozenset("'\"")


def _single_char(c: str, what: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{what} must be a single character, got {c!r}")
    return c


def _non_negative(value: int, what: str) -> int:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")
    return value


def split(s: str, c: str) -> List[str]:
    """Split ``s`` on the character ``c``, dropping empty words."""
    sep = _single_char(c, "separator")
    return [word for word in s.split(sep) if word]


def _quoted_segment(s: str, i: int) -> Tuple[str, int]:
    """Read a quoted segment starting at the quote at ``s[i]``.

    Returns the segment without its quotes and the index just past it. When
    the closing quote is missing, the segment runs to the end of the string
    minus its final character.
    """
    quote = s[i]
    start = i + 1
    close = s.find(quote, start)
    if close >= 0:
        return s[start:close], close + 1
    end = len(s)
    return s[start:max(start, end - 1)], end


def _plain_word(s: str, i: int, sep: str) -> Tuple[str, int]:
    start = i
    while i < len(s) and s[i] != sep and s[i] not in _QUOTES:
        i += 1
    return s[start:i], i


def split_quotes(s: str, sep: str) -> List[str]:
    """Split ``s`` on ``sep``, keeping single- or double-quoted text together.

    A quoted segment becomes one word without its quotes, separators
    included. A quote also ends a plain word that runs into it.
    """
    sep = _single_char(sep, "separator")
    words: List[str] = []
    i = 0
    length = len(s)
    while i < length:
        while i < length and s[i] == sep:
            i += 1
        if i >= length:
            break
        if s[i] in _QUOTES:
            word, i = _quoted_segment(s, i)
        else:
            word, i = _plain_word(s, i, sep)
        words.append(word)
    return words


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end of the string gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` characters including the terminator.

    Returns the copied text and the length of ``src``; a copy shorter than
    that length means it was truncated.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a total of ``size`` characters with terminator.

    Returns the resulting text and the length the full concatenation would
    have had. When ``size`` does not exceed the length of ``dst``, ``dst`` is
    left unchanged and the length reported is ``size`` plus that of ``src``.
    """
    _non_negative(size, "size")
    dst_len = len(dst)
    if size <= dst_len:
        return dst, size + len(src)
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to each character."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(s: MutableSequence[_T], f: Callable[[int, _T], Optional[_T]]) -> None:
    """Call ``f(index, item)`` on each item of ``s`` in order.

    A result other than ``None`` replaces the item in place.
    """
    for i, item in enumerate(s):
        result = f(i, item)
        if result is not None:
            s[i] = result