"""The receiving side: decodes bits from signals and prints messages."""

from __future__ import annotations

import argparse
import os
import signal
import sys
from collections.abc import Callable
from typing import BinaryIO

from sigtalk.protocol import SIGNAL_ONE, SIGNAL_ZERO, SIGNALS, BitDecoder

MESSAGE_HEADER = b"\nClient say : "


class Server:
    """Turns incoming signals into text on ``output`` and acknowledges each bit."""

    def __init__(
        self,
        output: BinaryIO | None = None,
        kill: Callable[[int, int], None] = os.kill,
    ) -> None:
        self._output = output if output is not None else sys.stdout.buffer
        self._kill = kill
        self._decoder = BitDecoder()

    def _write(self, data: bytes) -> None:
        self._output.write(data)
        self._output.flush()

    def handle(self, signum: int, sender: int) -> None:
        """Process one signal from process ``sender``.

        Raises ``ValueError`` for a signal that carries no bit and
        ``OSError`` when the sender cannot be signalled.
        """
        if signum not in SIGNALS:
            raise ValueError(f"unexpected signal {signum}")
        try:
            self._kill(sender, 0)
        except OSError as exc:
            raise OSError(exc.errno, f"cant send sig to pid : {sender}") from exc
        if self._decoder.starts_message:
            self._write(MESSAGE_HEADER)
        byte = self._decoder.feed(signum == SIGNAL_ONE)
        if byte is not None:
            if byte:
                self._write(bytes([byte]))
            else:
                self._kill(sender, SIGNAL_ZERO)
        self._kill(sender, SIGNAL_ONE)

    def serve(self) -> None:
        """Announce the process id, then handle signals until interrupted."""
        self._write(f"pid: {os.getpid()}".encode())
        signal.pthread_sigmask(signal.SIG_BLOCK, SIGNALS)
        while True:
            info = signal.sigwaitinfo(SIGNALS)
            self.handle(info.si_signo, info.si_pid)


def main(argv: list[str] | None = None) -> int:
    """Run the server until interrupted or a client becomes unreachable."""
    parser = argparse.ArgumentParser(description="Print messages sent bit by bit over signals.")
    parser.parse_args(argv)
    try:
        Server().serve()
    except KeyboardInterrupt:
        return 130
    except OSError as exc:
        print(f"ERROR : {exc.strerror}", flush=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())