"""Base16 encoding that uses letters only, skipping I, O and Q."""

from __future__ import annotations

ENCODE_TABLE = "ABCDEFGHJKLMNPRS"

_DECODE_TABLE = {ord(ch): value for value, ch in enumerate(ENCODE_TABLE)}


class Base16Error(ValueError):
    """Raised when a base16 string cannot be decoded."""


class InvalidByteError(Base16Error):
    """A character outside the base16 alphabet was found."""

    def __init__(self, byte: int) -> None:
        self.byte = byte
        super().__init__(f"enigma/base16: invalid byte: U+{byte:04X} {chr(byte)!r}")


class OddLengthError(Base16Error):
    """The encoded text has an odd number of characters."""

    def __init__(self) -> None:
        super().__init__("enigma/base16: odd length base16 string")


def encoded_len(n: int) -> int:
    """Length of the encoding of ``n`` bytes."""
    return n * 2


def decoded_len(x: int) -> int:
    """Number of bytes decoded from ``x`` characters."""
    return x // 2


def encode(data: bytes) -> str:
    """Encode bytes as a string of two letters per byte."""
    return "".join(ENCODE_TABLE[b >> 4] + ENCODE_TABLE[b & 0x0F] for b in data)


def _nibble(code: int) -> int:
    try:
        return _DECODE_TABLE[code]
    except KeyError:
        raise InvalidByteError(code) from None


def decode(text: str | bytes) -> bytes:
    """Decode a string produced by :func:`encode`."""
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    out = bytearray()
    pairs = len(raw) // 2
    for hi_code, lo_code in zip(raw[0 : 2 * pairs : 2], raw[1 : 2 * pairs : 2]):
        hi = _nibble(hi_code)
        lo = _nibble(lo_code)
        out.append((hi << 4) | lo)
    if len(raw) % 2 == 1:
        # An invalid trailing character is reported before the bad length.
        _nibble(raw[-1])
        raise OddLengthError()
    return bytes(out)