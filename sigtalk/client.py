"""The sending side: transmits a message to a server one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Callable

from sigtalk.protocol import SIGNAL_ONE, SIGNAL_ZERO, SIGNALS, encode_message, parse_pid


def _wait_for_signal() -> int:
    return signal.sigwaitinfo(SIGNALS).si_signo


class Client:
    """Sends messages to the server with process id ``pid``.

    ``wait`` returns the number of the next signal received from the server;
    by default the protocol signals are blocked and waited for.
    """

    def __init__(
        self,
        pid: int,
        kill: Callable[[int, int], None] = os.kill,
        wait: Callable[[], int] | None = None,
    ) -> None:
        self.pid = pid
        self.received = False
        self._kill = kill
        self._mask_signals = wait is None
        self._wait = wait if wait is not None else _wait_for_signal

    def _send_bit(self, bit: bool) -> None:
        try:
            self._kill(self.pid, 0)
        except OSError as exc:
            raise OSError(exc.errno, f"cant send sig to pid : {self.pid}") from exc
        self._kill(self.pid, SIGNAL_ONE if bit else SIGNAL_ZERO)

    def send_message(self, message: str | bytes) -> None:
        """Send ``message`` and its terminator, waiting for each bit's answer.

        Stops early once the server's receipt arrives. Raises ``OSError``
        when the server cannot be signalled.
        """
        if self._mask_signals:
            signal.pthread_sigmask(signal.SIG_BLOCK, SIGNALS)
        for bit in encode_message(message):
            self._send_bit(bit)
            while (signum := self._wait()) != SIGNAL_ONE:
                if signum == SIGNAL_ZERO:
                    self.received = True
                    return

    def wait_for_receipt(self) -> None:
        """Block until the server confirms the whole message arrived."""
        while not self.received:
            if self._wait() == SIGNAL_ZERO:
                self.received = True


def main(argv: list[str] | None = None) -> int:
    """Send ``argv[1]`` to the server whose pid is ``argv[0]``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage : client <pid> <string to send>", flush=True)
        return 1
    try:
        pid = parse_pid(args[0])
    except ValueError as exc:
        print(exc, flush=True)
        return 1
    client = Client(pid)
    try:
        client.send_message(args[1])
        client.wait_for_receipt()
    except OSError as exc:
        print(f"ERROR : {exc.strerror}", flush=True)
        return 1
    except ValueError as exc:
        print(exc, flush=True)
        return 1
    print("Message received !", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())