import pytest

from cipherkit.enigma.base16 import (
    Base16Error,
    InvalidByteError,
    OddLengthError,
    decode,
    decoded_len,
    encode,
    encoded_len,
)


def test_round_trip_text():
    data = "Hello, World!".encode()
    assert decode(encode(data)) == data


def test_round_trip_all_bytes():
    data = bytes(range(256))
    encoded = encode(data)
    assert len(encoded) == encoded_len(len(data))
    assert decode(encoded) == data


def test_alphabet_excludes_i_o_q():
    encoded = encode(bytes(range(256)))
    assert set(encoded) == set("ABCDEFGHJKLMNPRS")


def test_pinned_values():
    assert encode(b"\x00") == "AA"
    assert encode(b"\xff") == "SS"


def test_lengths_are_consistent():
    for n in (0, 1, 7, 32):
        assert decoded_len(encoded_len(n)) == n


def test_decode_bytes_input():
    data = b"\x10\x20\x30"
    assert decode(encode(data).encode()) == data


def test_invalid_byte():
    with pytest.raises(InvalidByteError) as info:
        decode("AI")
    assert info.value.byte == ord("I")


def test_odd_length():
    with pytest.raises(OddLengthError):
        decode(encode(b"\x01") + "A")


def test_invalid_trailing_byte_reported_before_length():
    with pytest.raises(InvalidByteError) as info:
        decode("ABQ")
    assert info.value.byte == ord("Q")


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        decode("O")
    assert issubclass(OddLengthError, Base16Error)