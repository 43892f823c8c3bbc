import errno
import io

import pytest

from sigtalk.protocol import SIGNAL_ONE, SIGNAL_ZERO, encode_message
from sigtalk.server import MESSAGE_HEADER, Server, main

SENDER = 4321


def _server():
    calls = []

    def kill(pid, sig):
        calls.append((pid, sig))

    output = io.BytesIO()
    return Server(output=output, kill=kill), output, calls


def _send(server, message):
    for bit in encode_message(message):
        server.handle(SIGNAL_ONE if bit else SIGNAL_ZERO, SENDER)


def test_message_is_printed_with_header():
    server, output, _ = _server()
    _send(server, "hi")
    assert output.getvalue() == MESSAGE_HEADER + b"hi"


def test_every_bit_is_acknowledged_and_receipt_sent():
    server, _, calls = _server()
    _send(server, "A")
    signals = [sig for pid, sig in calls if sig != 0]
    assert all(pid == SENDER for pid, _ in calls)
    assert signals.count(SIGNAL_ONE) == 16
    assert signals.count(SIGNAL_ZERO) == 1
    assert signals[-2:] == [SIGNAL_ZERO, SIGNAL_ONE]


def test_liveness_checked_before_each_bit():
    server, _, calls = _server()
    server.handle(SIGNAL_ONE, SENDER)
    assert calls[0] == (SENDER, 0)


def test_consecutive_messages_each_get_header():
    server, output, _ = _server()
    _send(server, "ab")
    _send(server, "c")
    assert output.getvalue() == MESSAGE_HEADER + b"ab" + MESSAGE_HEADER + b"c"


def test_unreachable_sender_raises():
    def kill(pid, sig):
        raise ProcessLookupError(errno.ESRCH, "No such process")

    server = Server(output=io.BytesIO(), kill=kill)
    with pytest.raises(ProcessLookupError, match=f"cant send sig to pid : {SENDER}"):
        server.handle(SIGNAL_ONE, SENDER)


def test_unknown_signal_rejected():
    server, _, calls = _server()
    with pytest.raises(ValueError):
        server.handle(0, SENDER)
    assert calls == []


def test_main_rejects_arguments():
    with pytest.raises(SystemExit) as info:
        main(["unexpected"])
    assert info.value.code == 2