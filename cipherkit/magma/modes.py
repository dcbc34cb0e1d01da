"""Magma modes of operation: cipher feedback, gamma (counter) and MAC-like hash."""

from __future__ import annotations

import struct
from typing import Protocol

from .block import add_mod32, add_mod32m1
from .sboxes import MagmaError

_C0 = 0x01010101
_C1 = 0x01010104
_HASH_ROUNDS = 16


class BlockCipher(Protocol):
    block_size: int

    def encrypt_block(self, block: bytes) -> bytes: ...


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def _check_syn(cipher: BlockCipher, syn: bytes) -> bytes:
    syn = bytes(syn)
    if len(syn) != cipher.block_size:
        raise MagmaError("magma: wrong syn len")
    return syn


class CFBStream:
    """Cipher feedback mode; one object either encrypts or decrypts."""

    def __init__(self, cipher: BlockCipher, syn: bytes, decrypt: bool = False) -> None:
        self._cipher = cipher
        self._register = bytearray(_check_syn(cipher, syn))
        self._index = len(self._register)
        self._decrypt = decrypt

    def process(self, data: bytes) -> bytes:
        """Encrypt or decrypt the next piece of the stream."""
        data = bytes(data)
        size = len(self._register)
        out = bytearray()
        pos = 0
        while pos < len(data):
            if self._index >= size:
                self._register[:] = self._cipher.encrypt_block(bytes(self._register))
                self._index = 0
            n = min(len(data) - pos, size - self._index)
            chunk = data[pos : pos + n]
            end = self._index + n
            produced = _xor(chunk, self._register[self._index : end])
            self._register[self._index : end] = chunk if self._decrypt else produced
            out += produced
            pos += n
            self._index = end
        return bytes(out)


class GammaStream:
    """Magma gamma (counter) mode; the same operation encrypts and decrypts."""

    def __init__(self, cipher: BlockCipher, syn: bytes) -> None:
        self._cipher = cipher
        encrypted = cipher.encrypt_block(_check_syn(cipher, syn))
        self._right, self._left = struct.unpack("<2I", encrypted[:8])
        self._gamma = b""
        self._index = 0
        self._next_gamma()

    def _next_gamma(self) -> None:
        self._right = add_mod32(self._right, _C0)
        self._left = add_mod32m1(self._left, _C1)
        self._gamma = self._cipher.encrypt_block(
            struct.pack("<2I", self._right, self._left)
        )
        self._index = 0

    def process(self, data: bytes) -> bytes:
        """XOR the next piece of the stream with the gamma."""
        data = bytes(data)
        out = bytearray()
        pos = 0
        while pos < len(data):
            if self._index >= len(self._gamma):
                self._next_gamma()
            n = min(len(data) - pos, len(self._gamma) - self._index)
            out += _xor(data[pos : pos + n], self._gamma[self._index : self._index + n])
            pos += n
            self._index += n
        return bytes(out)


class MagmaHash:
    """Chained-block checksum: each block is XORed in and encrypted 16 times."""

    def __init__(self, cipher: BlockCipher) -> None:
        self._cipher = cipher
        self._state = bytes(cipher.block_size)
        self._pending = bytearray()

    @property
    def size(self) -> int:
        return self._cipher.block_size

    @property
    def block_size(self) -> int:
        return self._cipher.block_size

    def _compress(self, block: bytes) -> bytes:
        value = _xor(self._state, bytes(block).ljust(self.block_size, b"\0"))
        for _ in range(_HASH_ROUNDS):
            value = self._cipher.encrypt_block(value)
        return value

    def update(self, data: bytes) -> None:
        """Feed more data into the checksum."""
        data = bytes(data)
        size = self.block_size
        pos = 0
        while pos < len(data):
            if len(self._pending) >= size:
                self._state = self._compress(self._pending)
                self._pending.clear()
            n = min(len(data) - pos, size - len(self._pending))
            self._pending += data[pos : pos + n]
            pos += n

    def digest(self) -> bytes:
        """Return the checksum of the data fed so far, zero padding the tail."""
        return self._compress(self._pending)

    def digest64(self) -> int:
        """Return the checksum as a little-endian 64-bit integer."""
        return int.from_bytes(self.digest()[:8], "little")

    def reset(self) -> None:
        """Forget all data fed so far."""
        self._state = bytes(self.block_size)
        self._pending.clear()