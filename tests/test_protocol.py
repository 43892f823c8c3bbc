import pytest

from sigtalk.protocol import (
    PID_MAX,
    BitDecoder,
    char_bits,
    encode_message,
    parse_pid,
)


def _decode(bits):
    decoder = BitDecoder()
    out = bytearray()
    for bit in bits:
        byte = decoder.feed(bit)
        if byte is not None:
            out.append(byte)
    return bytes(out)


def test_char_bits_most_significant_first():
    assert char_bits(0x41) == (False, True, False, False, False, False, False, True)


def test_char_bits_masks_signed_values():
    assert char_bits(-1) == char_bits(255)
    assert all(char_bits(255))
    assert not any(char_bits(0))


def test_encode_appends_terminator():
    bits = encode_message("A")
    assert len(bits) == 16
    assert list(bits[:8]) == list(char_bits(ord("A")))
    assert not any(bits[8:])


def test_empty_message_is_only_terminator():
    assert encode_message("") == [False] * 8


@pytest.mark.parametrize("message", ["hello", "héllo wörld", b"\x01\xff raw"])
def test_round_trip(message):
    data = message.encode("utf-8") if isinstance(message, str) else message
    assert _decode(encode_message(message)) == data + b"\0"


def test_embedded_nul_rejected():
    with pytest.raises(ValueError):
        encode_message("a\0b")


def test_decoder_tracks_message_boundaries():
    decoder = BitDecoder()
    assert decoder.starts_message
    results = [decoder.feed(bit) for bit in char_bits(ord("z"))]
    assert results[:-1] == [None] * 7
    assert results[-1] == ord("z")
    assert not decoder.starts_message
    decoder.feed(0)
    assert not decoder.starts_message
    for bit in char_bits(0)[1:]:
        decoder.feed(bit)
    assert decoder.starts_message


@pytest.mark.parametrize("text, expected", [("42", 42), ("  +42", 42), (str(PID_MAX), PID_MAX)])
def test_parse_pid_valid(text, expected):
    assert parse_pid(text) == expected


@pytest.mark.parametrize("text", ["0", "-5", "abc", str(PID_MAX + 1)])
def test_parse_pid_invalid(text):
    with pytest.raises(ValueError, match="is an invalid pid"):
        parse_pid(text)