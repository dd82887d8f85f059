"""Line-by-line reading from a file descriptor or binary stream."""

from __future__ import annotations

import os
from typing import BinaryIO, Callable, Iterator

BUFFER_SIZE = 42


class LineReader:
    """Reads lines, newline included, from a descriptor or a binary file object.

    Data is read in chunks of ``buffer_size`` bytes; what follows a returned
    line is kept for the next call.
    """

    def __init__(self, source: int | BinaryIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if isinstance(source, int):
            if source < 0:
                raise ValueError("invalid file descriptor")
            self._read: Callable[[int], bytes] = lambda size: os.read(source, size)
        else:
            self._read = source.read
        self._size = buffer_size
        self._pending = b""

    def _fill(self) -> None:
        while b"\n" not in self._pending:
            try:
                chunk = self._read(self._size)
            except OSError:
                self._pending = b""
                raise
            if not chunk:
                return
            self._pending += chunk

    def next_line(self) -> bytes | None:
        """Return the next line, or None once the input is exhausted."""
        self._fill()
        if not self._pending:
            return None
        line, newline, rest = self._pending.partition(b"\n")
        self._pending = rest
        return line + newline

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.next_line()) is not None:
            yield line