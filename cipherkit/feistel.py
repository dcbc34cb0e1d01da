"""A generic balanced Feistel network over pairs of integer words."""

from __future__ import annotations

from collections.abc import Callable, Iterable

RoundFunc = Callable[[int, int], int]


class FeistelCipher:
    """Runs a Feistel network with a fixed key schedule and round function.

    Each round replaces ``left`` with ``left ^ round_func(key, right)`` and
    swaps the halves; after the last round the halves are swapped back.
    Decryption runs the same network with the key schedule reversed.
    """

    def __init__(self, keys: Iterable[int], round_func: RoundFunc) -> None:
        self._enc_keys = tuple(keys)
        self._dec_keys = self._enc_keys[::-1]
        self._round_func = round_func

    def _run(self, keys: tuple[int, ...], left: int, right: int) -> tuple[int, int]:
        round_func = self._round_func
        for key in keys:
            left, right = right, left ^ round_func(key, right)
        return right, left

    def encrypt(self, left: int, right: int) -> tuple[int, int]:
        """Encrypt one block given as its two halves; return the new halves."""
        return self._run(self._enc_keys, left, right)

    def decrypt(self, left: int, right: int) -> tuple[int, int]:
        """Decrypt one block given as its two halves; return the new halves."""
        return self._run(self._dec_keys, left, right)