"""Character classification and case conversion limited to ASCII.

Every function accepts either a one-character string or an integer code.
Predicates return ``bool``. The case converters return the same kind of
value they were given.
"""

from __future__ import annotations

from typing import TypeVar, Union

CharLike = Union[str, int]
_C = TypeVar("_C", str, int)

_UPPER_FIRST = 65
_UPPER_LAST = 90
_LOWER_FIRST = 97
_LOWER_LAST = 122
_CASE_OFFSET = 32


def _code(c: CharLike) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected a one-character string or an int, got {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return _UPPER_FIRST <= code <= _UPPER_LAST


def _is_lower(code: int) -> bool:
    return _LOWER_FIRST <= code <= _LOWER_LAST


def is_alpha(c: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for the printable ASCII range, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def is_space(c: CharLike) -> bool:
    """True for space and the control characters 9 through 13."""
    code = _code(c)
    return code == 32 or 9 <= code <= 13


def to_lower(c: _C) -> _C:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if _is_upper(code):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def to_upper(c: _C) -> _C:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code