"""Letter/index conversion and validation of wiring strings."""

from __future__ import annotations

import re
from collections.abc import Hashable, Iterable

TOTAL_INDEXES = 26

_WIRING_RE = re.compile(rf"[A-Z]{{{TOTAL_INDEXES}}}")
_PAIR_RE = re.compile(r"[A-Z]{2}")


def _describe(code: int) -> str:
    return f"U+{code:04X} {chr(code)!r}"


def _code(letter: str | int) -> int:
    if isinstance(letter, int):
        return letter
    if isinstance(letter, str) and len(letter) == 1:
        return ord(letter)
    raise ValueError(f"Invalid letter {letter!r}")


def _index_of(code: int) -> int | None:
    if ord("A") <= code <= ord("Z"):
        return code - ord("A")
    if ord("a") <= code <= ord("z"):
        return code - ord("a")
    return None


def letter_to_index(letter: str | int) -> int:
    """Return the 0-based alphabet index of a letter (either case)."""
    code = _code(letter)
    index = _index_of(code)
    if index is None:
        raise ValueError(f"Invalid letter {_describe(code)}")
    return index


def index_to_letter(index: int) -> str:
    """Return the upper-case letter for an alphabet index."""
    if not 0 <= index < TOTAL_INDEXES:
        raise ValueError(f"Invalid index {index}")
    return chr(ord("A") + index)


def parse_indexes(s: str) -> list[int]:
    """Convert every character of ``s`` to its alphabet index."""
    result = []
    for position, ch in enumerate(s):
        index = _index_of(ord(ch))
        if index is None:
            raise ValueError(f"Invalid letter {_describe(ord(ch))} by index {position}")
        result.append(index)
    return result


def _find_duplicate(items: Iterable[Hashable]):
    seen = set()
    for item in items:
        if item in seen:
            return item
        seen.add(item)
    return None


def validate_wiring(wiring: str) -> None:
    """Check that a wiring is a permutation of the 26 upper-case letters."""
    if not _WIRING_RE.fullmatch(wiring):
        raise ValueError(f"wiring is invalid {wiring!r}")
    duplicate = _find_duplicate(wiring)
    if duplicate is not None:
        raise ValueError(f"wiring has duplicates {duplicate!r}")


def validate_plugboard(s: str) -> None:
    """Check a plugboard spec of space separated letter pairs."""
    if s == "":
        return
    pairs = s.split(" ")
    for i, pair in enumerate(pairs):
        if not _PAIR_RE.fullmatch(pair):
            raise ValueError(f"plugboard pair[{i}]: invalid pair value {pair!r}")
    duplicate = _find_duplicate("".join(pairs))
    if duplicate is not None:
        raise ValueError(f"plugboard has duplicates {duplicate!r}")


def parse_wiring(wiring: str) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """Return the forward and backward index tables of a wiring."""
    validate_wiring(wiring)
    forward = [0] * TOTAL_INDEXES
    backward = [0] * TOTAL_INDEXES
    for i, ch in enumerate(wiring):
        j = letter_to_index(ch)
        forward[i] = j
        backward[j] = i
    return tuple(forward), tuple(backward)


def parse_turnovers(s: str) -> tuple[bool, ...]:
    """Return a flag per index telling whether it is a turnover position."""
    flags = [False] * TOTAL_INDEXES
    for index in parse_indexes(s):
        flags[index] = True
    return tuple(flags)