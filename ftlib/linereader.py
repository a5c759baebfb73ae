"""Reading a file descriptor one line at a time.

Lines are returned as ``bytes`` and keep their trailing newline, if any.
The final line of the input may lack one. ``None`` marks the end of the
input. Once the end has been reached, a later call reads again, so data
that arrives afterwards is still returned.
"""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

DEFAULT_BUFFER_SIZE = 1024
FD_MAX = 1024

_NEWLINE = b"\n"


class LineReader:
    """Reads lines from a file descriptor in chunks of ``buffer_size`` bytes."""

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(fd, bool) or not isinstance(fd, int):
            raise TypeError(f"file descriptor must be an int, got {type(fd).__name__}")
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def __repr__(self) -> str:
        return f"LineReader(fd={self.fd}, buffer_size={self.buffer_size})"

    def _fill(self) -> None:
        """Read until a newline is buffered or a read returns no data."""
        while _NEWLINE not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                return
            self._pending.extend(chunk)

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or ``None`` when no data is left.

        Raises ``OSError`` if reading fails; anything buffered is discarded.
        """
        self._fill()
        if not self._pending:
            return None
        end = self._pending.find(_NEWLINE)
        cut = len(self._pending) if end < 0 else end + 1
        line = bytes(self._pending[:cut])
        del self._pending[:cut]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line from ``fd``, keeping unread data per descriptor.

    Descriptors must lie in ``range(FD_MAX)``. When the input is exhausted
    the data kept for ``fd`` is dropped and ``None`` is returned.
    """
    if isinstance(fd, bool) or not isinstance(fd, int):
        raise TypeError(f"file descriptor must be an int, got {type(fd).__name__}")
    if not 0 <= fd < FD_MAX:
        raise ValueError(f"file descriptor must be in [0, {FD_MAX}), got {fd}")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line