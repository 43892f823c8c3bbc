"""Reading text line by line from several file descriptors at once."""

from __future__ import annotations

import operator
import os

DEFAULT_BUFFER_SIZE = 4096


class LineReader:
    """Hands out lines from file descriptors, keeping unread data per descriptor.

    Each descriptor has its own pending buffer, so reads from different
    descriptors can be interleaved freely.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        buffer_size = operator.index(buffer_size)
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be at least 1, got {buffer_size}")
        self._buffer_size = buffer_size
        self._pending: dict[int, bytes] = {}

    def read_line(self, fd: int, clear: bool = False) -> bytes | None:
        """Return the next line from ``fd``, newline included when present.

        The last line of the input may lack a newline. ``None`` means there
        is nothing left. With ``clear`` set, whatever was read past the
        returned line is discarded. Raises ``ValueError`` for a negative
        descriptor and ``OSError`` when the descriptor cannot be read.
        """
        fd = operator.index(fd)
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        os.read(fd, 0)
        pending = bytearray(self._pending.get(fd, b""))
        while b"\n" not in pending:
            chunk = os.read(fd, self._buffer_size)
            if not chunk:
                break
            pending += chunk
        end = pending.find(b"\n")
        if end >= 0:
            line, rest = bytes(pending[: end + 1]), bytes(pending[end + 1 :])
        else:
            line, rest = bytes(pending), b""
        if end < 0 or clear:
            self._pending.pop(fd, None)
        else:
            self._pending[fd] = rest
        return line or None

    def forget(self, fd: int) -> None:
        """Drop any data kept for ``fd``."""
        self._pending.pop(operator.index(fd), None)