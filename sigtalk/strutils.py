"""String and byte-buffer helpers with C string-library semantics.

Positions are returned as indices into the argument, or ``None`` where the
C counterpart would return a null pointer. Functions that in C fill a
caller's buffer return the new text instead.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from typing import Any

_NUL = "\0"


def _char(c: str | int) -> str:
    """Return ``c`` as a one-character string; ints are taken as a byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _check_count(name: str, value: int) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def memchr(data: bytes | bytearray | memoryview, byte: int, n: int) -> int | None:
    """Return the index of ``byte`` within the first ``n`` bytes of ``data``.

    ``byte`` is reduced to an unsigned char first. ``None`` if not found.
    """
    n = _check_count("n", n)
    if n > len(data):
        raise ValueError(f"n ({n}) exceeds the buffer length ({len(data)})")
    target = operator.index(byte) & 0xFF
    index = bytes(data[:n]).find(target)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray | memoryview, b: bytes | bytearray | memoryview, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b`` as unsigned values.

    Returns the difference of the first differing pair, or 0 if equal.
    """
    n = _check_count("n", n)
    if n > len(a) or n > len(b):
        raise ValueError(f"n ({n}) exceeds the length of a buffer")
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0


def strchr(text: str, c: str | int) -> int | None:
    """Index of the first ``c`` in ``text``.

    Searching for the NUL character finds the terminator, at ``len(text)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: str | int) -> int | None:
    """Index of the last ``c`` in ``text``; NUL finds ``len(text)``."""
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    The end of a string compares as code 0. Returns the difference of the
    codes at the first differing position, or 0.
    """
    n = _check_count("n", n)
    for pos in range(n):
        left = ord(a[pos]) if pos < len(a) else 0
        right = ord(b[pos]) if pos < len(b) else 0
        if left != right or left == 0:
            return left - right
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    length = _check_count("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and ``len(src)``; truncation happened when the
    length is at least ``size``.
    """
    size = _check_count("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had. If ``size`` does not exceed ``len(dst)``, ``dst`` is left as is and
    the length returned is ``len(src) + size``.
    """
    size = _check_count("size", size)
    dst_len = len(dst)
    if size <= dst_len:
        return dst, len(src) + size
    room = size - 1 - dst_len
    return dst + src[:room], len(src) + dst_len


def strjoin(a: str, b: str) -> str:
    """Concatenate ``a`` and ``b``."""
    if a is None or b is None:
        raise TypeError("strjoin needs two strings")
    return a + b


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``.

    A start past the end yields an empty string.
    """
    start = _check_count("start", start)
    length = _check_count("length", length)
    if start > len(text):
        return ""
    return text[start : start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        raise TypeError("strtrim needs two strings")
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: str | int) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    if text is None:
        raise TypeError("split needs a string")
    ch = _char(sep)
    return [word for word in text.split(ch) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Call ``func(index, item)`` on each element of a mutable sequence.

    Where ``func`` returns something other than ``None``, that value
    replaces the element in place.
    """
    for index, item in enumerate(list(text)):
        replacement = func(index, item)
        if replacement is not None:
            text[index] = replacement