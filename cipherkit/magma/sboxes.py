"""Substitution tables of the GOST 28147-89 (Magma) block cipher."""

from __future__ import annotations

from collections.abc import Sequence

ReplaceTable = Sequence[Sequence[int]]


class MagmaError(ValueError):
    """Raised for invalid Magma keys, tables and synchronisation vectors."""


RT1: tuple[tuple[int, ...], ...] = (
    (0x4, 0xA, 0x9, 0x2, 0xD, 0x8, 0x0, 0xE, 0x6, 0xB, 0x1, 0xC, 0x7, 0xF, 0x5, 0x3),
    (0xE, 0xB, 0x4, 0xC, 0x6, 0xD, 0xF, 0xA, 0x2, 0x3, 0x8, 0x1, 0x0, 0x7, 0x5, 0x9),
    (0x5, 0x8, 0x1, 0xD, 0xA, 0x3, 0x4, 0x2, 0xE, 0xF, 0xC, 0x7, 0x6, 0x0, 0x9, 0xB),
    (0x7, 0xD, 0xA, 0x1, 0x0, 0x8, 0x9, 0xF, 0xE, 0x4, 0x6, 0xC, 0xB, 0x2, 0x5, 0x3),
    (0x6, 0xC, 0x7, 0x1, 0x5, 0xF, 0xD, 0x8, 0x4, 0xA, 0x9, 0xE, 0x0, 0x3, 0xB, 0x2),
    (0x4, 0xB, 0xA, 0x0, 0x7, 0x2, 0x1, 0xD, 0x3, 0x6, 0x8, 0x5, 0x9, 0xC, 0xF, 0xE),
    (0xD, 0xB, 0x4, 0x1, 0x3, 0xF, 0x5, 0x9, 0x0, 0xA, 0xE, 0x7, 0x6, 0x8, 0x2, 0xC),
    (0x1, 0xF, 0xD, 0x0, 0x5, 0x7, 0xA, 0x4, 0x9, 0x2, 0x3, 0xE, 0x6, 0xB, 0x8, 0xC),
)

RT2: tuple[tuple[int, ...], ...] = (
    (0xC, 0x4, 0x6, 0x2, 0xA, 0x5, 0xB, 0x9, 0xE, 0x8, 0xD, 0x7, 0x0, 0x3, 0xF, 0x1),
    (0x6, 0x8, 0x2, 0x3, 0x9, 0xA, 0x5, 0xC, 0x1, 0xE, 0x4, 0x7, 0xB, 0xD, 0x0, 0xF),
    (0xB, 0x3, 0x5, 0x8, 0x2, 0xF, 0xA, 0xD, 0xE, 0x1, 0x7, 0x4, 0xC, 0x9, 0x6, 0x0),
    (0xC, 0x8, 0x2, 0x1, 0xD, 0x4, 0xF, 0x6, 0x7, 0x0, 0xA, 0x5, 0x3, 0xE, 0x9, 0xB),
    (0x7, 0xF, 0x5, 0xA, 0x8, 0x1, 0x6, 0xD, 0x0, 0x9, 0x3, 0xE, 0xB, 0x4, 0x2, 0xC),
    (0x5, 0xD, 0xF, 0x6, 0x9, 0x2, 0xC, 0xA, 0xB, 0x7, 0x8, 0x1, 0x4, 0x3, 0xE, 0x0),
    (0x8, 0xE, 0x2, 0x5, 0x6, 0x9, 0x1, 0xC, 0xF, 0x4, 0xB, 0x0, 0xD, 0xA, 0x3, 0x7),
    (0x1, 0x7, 0xE, 0xD, 0x0, 0x5, 0x8, 0x3, 0x4, 0xF, 0xA, 0x6, 0x9, 0xC, 0xB, 0x2),
)

RT3: tuple[tuple[int, ...], ...] = (
    (0x4, 0x2, 0xF, 0x5, 0x9, 0x1, 0x0, 0x8, 0xE, 0x3, 0xB, 0xC, 0xD, 0x7, 0xA, 0x6),
    (0xC, 0x9, 0xF, 0xE, 0x8, 0x1, 0x3, 0xA, 0x2, 0x7, 0x4, 0xD, 0x6, 0x0, 0xB, 0x5),
    (0xD, 0x8, 0xE, 0xC, 0x7, 0x3, 0x9, 0xA, 0x1, 0x5, 0x2, 0x4, 0x6, 0xF, 0x0, 0xB),
    (0xE, 0x9, 0xB, 0x2, 0x5, 0xF, 0x7, 0x1, 0x0, 0xD, 0xC, 0x6, 0xA, 0x4, 0x3, 0x8),
    (0x3, 0xE, 0x5, 0x9, 0x6, 0x8, 0x0, 0xD, 0xA, 0xB, 0x7, 0xC, 0x2, 0x1, 0xF, 0x4),
    (0x8, 0xF, 0x6, 0xB, 0x1, 0x9, 0xC, 0x5, 0xD, 0x3, 0x7, 0xA, 0x0, 0xE, 0x2, 0x4),
    (0x9, 0xB, 0xC, 0x0, 0x3, 0x6, 0x7, 0x5, 0x4, 0x8, 0xE, 0xF, 0x1, 0xA, 0x2, 0xD),
    (0xC, 0x6, 0x5, 0x2, 0xB, 0x0, 0x9, 0xD, 0x3, 0xE, 0x7, 0xA, 0xF, 0x4, 0x1, 0x8),
)

_ROWS = 8
_NIBBLES = 16


def check_replace_table(table: ReplaceTable) -> None:
    """Check that a table has 8 rows, each a permutation of 0..15."""
    rows = [tuple(row) for row in table]
    if len(rows) != _ROWS or any(len(row) != _NIBBLES for row in rows):
        raise MagmaError("magma: wrong table len")
    for row in rows:
        if sorted(row) != list(range(_NIBBLES)):
            raise MagmaError("magma: invalid replace table")


def substitute(table: ReplaceTable, value: int) -> int:
    """Replace each 4-bit nibble of a 32-bit word through its table row."""
    result = 0
    for i, row in enumerate(table):
        shift = 4 * i
        result |= row[(value >> shift) & 0xF] << shift
    return result


class ByteReplacer:
    """Nibble substitution done a byte at a time through four 256-entry tables."""

    def __init__(self, table: ReplaceTable) -> None:
        rows = [tuple(row) for row in table]
        self._tables = tuple(
            tuple(
                low[k] | (high[j] << 4)
                for j in range(_NIBBLES)
                for k in range(_NIBBLES)
            )
            for low, high in zip(rows[0::2], rows[1::2])
        )

    def replace(self, value: int) -> int:
        """Substitute all eight nibbles of a 32-bit word."""
        result = 0
        for i, byte_table in enumerate(self._tables):
            shift = 8 * i
            result |= byte_table[(value >> shift) & 0xFF] << shift
        return result