"""Line-by-line reading from file descriptors and file objects."""

from __future__ import annotations

import os
from typing import Any, Callable, Iterator, Optional, Union

BUFFER_SIZE = 42
MAX_FD = 1024

Source = Union[int, Any]


class LineReader:
    """Read a source one line at a time through a fixed-size read buffer.

    ``fd`` is either an open file descriptor or an object with a ``read``
    method returning bytes or str. Each line is returned with its trailing
    newline; the last line of the source may lack one.
    """

    def __init__(self, fd: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError(f"buffer_size must be an int, not {type(buffer_size).__name__}")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._read: Callable[[int], Union[bytes, str]]
        if isinstance(fd, bool):
            raise TypeError("fd must be a file descriptor or a readable object, not bool")
        if isinstance(fd, int):
            if fd < 0:
                raise ValueError(f"file descriptor must not be negative, got {fd}")
            self._read = lambda n: os.read(fd, n)
        elif callable(getattr(fd, "read", None)):
            self._read = fd.read
        else:
            raise TypeError(f"cannot read lines from {type(fd).__name__}")
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def _read_chunk(self) -> bytes:
        chunk = self._read(self.buffer_size)
        if isinstance(chunk, str):
            return chunk.encode("utf-8", errors="surrogateescape")
        return bytes(chunk or b"")

    def _fill(self) -> None:
        if b"\n" in self._pending:
            return
        while True:
            chunk = self._read_chunk()
            if not chunk:
                return
            self._pending += chunk
            if b"\n" in chunk:
                return

    def read_line(self) -> Optional[str]:
        """Return the next line, or None once the source is exhausted."""
        try:
            self._fill()
        except OSError:
            self._pending.clear()
            raise
        if not self._pending:
            return None
        newline = self._pending.find(b"\n")
        end = newline + 1 if newline >= 0 else len(self._pending)
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line.decode("utf-8", errors="surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line read from file descriptor ``fd``, or None at its end.

    Unread data is kept per descriptor between calls, so several
    descriptors can be read in turn.
    """
    if isinstance(fd, bool) or not isinstance(fd, int):
        raise TypeError(f"fd must be an int, not {type(fd).__name__}")
    if not 0 <= fd < MAX_FD:
        raise ValueError(f"file descriptor out of range: {fd}")
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