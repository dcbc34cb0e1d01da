"""Encoding of arbitrary bytes as upper-case Latin letters.

Each output letter carries either four or five bits. A 4-bit group whose
value is above nine is written as a single letter K..P; otherwise five bits
are taken, which gives letters A..J and Q..Z.
"""

from __future__ import annotations

ENCODE_TABLE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

_BITS_PER_BYTE = 8
_MASK4 = 0x0F
_MASK5 = 0x1F
# Largest 4-bit value that still needs a fifth bit to be unambiguous.
_MASK4_VALUE_MAX = 9


class Base26Error(ValueError):
    """Raised when a base26 string cannot be decoded."""


def encoded_len_max(n: int) -> int:
    """Upper bound of the encoded length of ``n`` bytes."""
    return n * 2


def decoded_len_max(n: int) -> int:
    """Upper bound of the number of bytes decoded from ``n`` letters."""
    return n * 4 // 5


def encode(data: bytes) -> str:
    """Encode bytes as a string of the letters A..Z."""
    out = []
    acc = 0
    nbits = 0
    for byte in data:
        acc |= byte << nbits
        nbits += _BITS_PER_BYTE
        while nbits >= 5:
            value = acc & _MASK4
            if value > _MASK4_VALUE_MAX:
                acc >>= 4
                nbits -= 4
            else:
                value = acc & _MASK5
                acc >>= 5
                nbits -= 5
            out.append(ENCODE_TABLE[value])
    if nbits > 0:
        out.append(ENCODE_TABLE[acc])
    return "".join(out)


def _describe(code: int) -> str:
    return f"U+{code:04X} {chr(code)!r}"


def decode(text: str | bytes) -> bytes:
    """Decode a string produced by :func:`encode`."""
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    out = bytearray()
    acc = 0
    nbits = 0
    for code in raw:
        if not ord("A") <= code <= ord("Z"):
            raise Base26Error(f"base26: invalid byte: {_describe(code)}")
        digit = code - ord("A")
        value = digit & _MASK4
        if value > _MASK4_VALUE_MAX:
            acc |= value << nbits
            nbits += 4
        else:
            acc |= (digit & _MASK5) << nbits
            nbits += 5
        while nbits >= _BITS_PER_BYTE:
            out.append(acc & 0xFF)
            acc >>= _BITS_PER_BYTE
            nbits -= _BITS_PER_BYTE
    if nbits > 4 or acc != 0:
        raise Base26Error(
            f"base26: invalid source (bits: length {nbits}, accumulator {acc:b})"
        )
    return bytes(out)