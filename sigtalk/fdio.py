"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import os


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _as_bytes(text: str | bytes) -> bytes:
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


def put_char(c: str | int, fd: int) -> None:
    """Write one character (a one-character string or a byte value) to ``fd``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes([c])
    _write_all(fd, data)


def put_str(text: str | bytes | None, fd: int) -> None:
    """Write ``text`` to ``fd``; ``None`` writes nothing."""
    if text is None:
        return
    _write_all(fd, _as_bytes(text))


def put_endl(text: str | bytes | None, fd: int) -> None:
    """Write ``text`` followed by a newline to ``fd``."""
    put_str(text, fd)
    put_char("\n", fd)


def put_nbr(n: int, fd: int) -> None:
    """Write the decimal form of ``n`` to ``fd``."""
    put_str(str(int(n)), fd)