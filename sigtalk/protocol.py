"""The one-bit-per-signal wire protocol shared by client and server.

Each byte travels most significant bit first: ``SIGNAL_ONE`` carries a 1,
``SIGNAL_ZERO`` a 0. A message ends with a NUL byte. The server answers
every bit with ``SIGNAL_ONE`` and, once the NUL has arrived, sends
``SIGNAL_ZERO`` as a receipt just before that last answer.
"""

from __future__ import annotations

import operator
import signal

from sigtalk.chars import atoi

PID_MAX = 4194304
BITS_PER_BYTE = 8

SIGNAL_ONE = signal.SIGUSR1
SIGNAL_ZERO = signal.SIGUSR2
SIGNALS = frozenset({SIGNAL_ONE, SIGNAL_ZERO})


def char_bits(byte: int) -> tuple[bool, ...]:
    """The eight bits of ``byte``, most significant first."""
    value = operator.index(byte) & 0xFF
    return tuple(bool(value >> shift & 1) for shift in reversed(range(BITS_PER_BYTE)))


def encode_message(message: str | bytes) -> list[bool]:
    """All bits of ``message`` followed by the terminating NUL byte.

    Text is encoded as UTF-8. An embedded NUL would end the message early
    and is rejected with ``ValueError``.
    """
    data = message.encode("utf-8", "surrogateescape") if isinstance(message, str) else bytes(message)
    if 0 in data:
        raise ValueError("message must not contain a NUL byte")
    return [bit for byte in data + b"\0" for bit in char_bits(byte)]


def parse_pid(text: str) -> int:
    """Read a process id; raise ``ValueError`` unless it lies in 1..PID_MAX."""
    pid = atoi(text)
    if not 0 < pid <= PID_MAX:
        raise ValueError(f"{text} is an invalid pid")
    return pid


class BitDecoder:
    """Assembles bytes from bits arriving one at a time."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0
        self._last = 0

    @property
    def starts_message(self) -> bool:
        """True when the next bit begins a new message."""
        return self._count == 0 and self._last == 0

    def feed(self, bit: bool | int) -> int | None:
        """Take one bit; return the byte it completes, else ``None``."""
        self._value = (self._value << 1) | (1 if bit else 0)
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        self._last = byte
        return byte