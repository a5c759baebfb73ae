"""A small ``printf`` supporting the conversions c, s, p, d, i, u, x, X and %.

Integers wrap as their C counterparts would: ``%d`` and ``%i`` to a signed
32-bit value, ``%u``, ``%x`` and ``%X`` to an unsigned 32-bit value and
``%p`` to an unsigned 64-bit address. An unknown conversion character is
dropped together with its ``%`` and consumes no argument; a ``%`` at the
very end of the format is written as it is.
"""

from __future__ import annotations

import re
import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

_FORMAT_PIECE = re.compile(r"%(.)|%|[^%]+", re.DOTALL)

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value >= 1 << 31 else value


def _conv_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _conv_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string or None, got {type(value).__name__}")
    return value


def _conv_pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    return "0x" + format(_as_int(value, "p") & _MASK64, "x")


def _conv_signed(spec: str) -> Callable[[Any], str]:
    return lambda value: str(_signed32(_as_int(value, spec)))


def _conv_unsigned(value: Any) -> str:
    return str(_as_int(value, "u") & _MASK32)


def _conv_hex_lower(value: Any) -> str:
    return format(_as_int(value, "x") & _MASK32, "x")


def _conv_hex_upper(value: Any) -> str:
    return format(_as_int(value, "X") & _MASK32, "X")


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _conv_char,
    "s": _conv_string,
    "p": _conv_pointer,
    "d": _conv_signed("d"),
    "i": _conv_signed("i"),
    "u": _conv_unsigned,
    "x": _conv_hex_lower,
    "X": _conv_hex_upper,
}


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise ValueError(f"not enough arguments for %{spec}") from None


def format_printf(fmt: str, *args: Any) -> str:
    """Return the text that ``printf`` would write for ``fmt`` and ``args``."""
    remaining = iter(args)
    pieces = []
    for match in _FORMAT_PIECE.finditer(fmt):
        spec = match.group(1)
        if spec is None:
            pieces.append(match.group(0))
        elif spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            pieces.append(_CONVERSIONS[spec](_next_arg(remaining, spec)))
    return "".join(pieces)


def dprintf(stream: Optional[TextIO], fmt: str, *args: Any) -> int:
    """Write the formatted text to ``stream`` and return its length."""
    text = format_printf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    return dprintf(sys.stdout, fmt, *args)