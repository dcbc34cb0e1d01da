"""The GOST 28147-89 (Magma) block cipher in electronic codebook form."""

from __future__ import annotations

import struct

from ..feistel import FeistelCipher
from .sboxes import RT1, ByteReplacer, MagmaError, ReplaceTable, check_replace_table

BLOCK_SIZE = 8
KEY_SIZE = 32

_MASK32 = 0xFFFFFFFF


def add_mod32(a: int, b: int) -> int:
    """Return ``(a + b) mod 2**32``."""
    return (a + b) & _MASK32


def add_mod32m1(a: int, b: int) -> int:
    """Addition modulo ``2**32 - 1`` as defined for the Magma gamma generator.

    On overflow the carry is folded back in, so the result never wraps to 0
    from a non-zero sum.
    """
    headroom = _MASK32 - a
    if b > headroom:
        return b - headroom
    return a + b


def expand_key(key: bytes) -> list[int]:
    """Build the 32 round keys: the eight key words three times, then reversed."""
    key = bytes(key)
    if len(key) != KEY_SIZE:
        raise MagmaError("magma: wrong key len")
    words = list(struct.unpack("<8I", key))
    return words * 3 + words[::-1]


def _rotate_left_11(word: int) -> int:
    return ((word << 11) | (word >> 21)) & _MASK32


class MagmaCipher:
    """Magma with a 256-bit key and a choice of substitution table."""

    block_size = BLOCK_SIZE

    def __init__(self, key: bytes, table: ReplaceTable = RT1) -> None:
        check_replace_table(table)
        replacer = ByteReplacer(table)

        def round_func(k: int, r: int) -> int:
            return _rotate_left_11(replacer.replace(add_mod32(k, r)))

        self._feistel = FeistelCipher(expand_key(key), round_func)

    @staticmethod
    def _halves(block: bytes) -> tuple[int, int]:
        if len(block) < BLOCK_SIZE:
            raise ValueError("magma: input not full block")
        right, left = struct.unpack("<2I", bytes(block[:BLOCK_SIZE]))
        return left, right

    def encrypt_block(self, block: bytes) -> bytes:
        """Encrypt one 8-byte block."""
        left, right = self._feistel.encrypt(*self._halves(block))
        return struct.pack("<2I", right, left)

    def decrypt_block(self, block: bytes) -> bytes:
        """Decrypt one 8-byte block."""
        left, right = self._feistel.decrypt(*self._halves(block))
        return struct.pack("<2I", right, left)