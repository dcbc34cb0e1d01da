"""Enigma machine parts: plugboard, reflector, rotors and rotor block."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .indexes import (
    TOTAL_INDEXES,
    parse_indexes,
    parse_turnovers,
    parse_wiring,
    validate_plugboard,
)


class Plugboard:
    """Swaps pairs of letters on the way into and out of the rotors."""

    def __init__(self, spec: str = "") -> None:
        validate_plugboard(spec)
        table = list(range(TOTAL_INDEXES))
        if spec:
            for pair in spec.split(" "):
                a, b = parse_indexes(pair)
                table[a] = b
                table[b] = a
        self._table = tuple(table)

    def forward(self, index: int) -> int:
        return self._table[index]

    def backward(self, index: int) -> int:
        return self._table[index]


@dataclass(frozen=True)
class ReflectorConfig:
    wiring: str


class Reflector:
    """Reflects a signal back through the rotors."""

    def __init__(self, config: ReflectorConfig) -> None:
        self._table, _ = parse_wiring(config.wiring)

    def reflect(self, index: int) -> int:
        return self._table[index]


@dataclass(frozen=True)
class RotorConfig:
    wiring: str
    turnovers: str = ""


def _check_index(value: int) -> int:
    if not 0 <= value < TOTAL_INDEXES:
        raise ValueError(f"Invalid index {value}")
    return value


class Rotor:
    """A single rotor with its wiring, turnover notches, ring and position."""

    def __init__(self, config: RotorConfig) -> None:
        self._forward, self._backward = parse_wiring(config.wiring)
        self._turnovers = parse_turnovers(config.turnovers)
        self._ring = 0
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    @position.setter
    def position(self, value: int) -> None:
        self._position = _check_index(value)

    @property
    def ring(self) -> int:
        return self._ring

    @ring.setter
    def ring(self, value: int) -> None:
        self._ring = _check_index(value)

    def rotate(self) -> None:
        self._position = (self._position + 1) % TOTAL_INDEXES

    def has_turnover(self) -> bool:
        return self._turnovers[self._position]

    def _through(self, index: int, table: Sequence[int]) -> int:
        shift = self._position - self._ring
        index = table[(index + shift) % TOTAL_INDEXES]
        return (index - shift) % TOTAL_INDEXES

    def forward(self, index: int) -> int:
        return self._through(index, self._forward)

    def backward(self, index: int) -> int:
        return self._through(index, self._backward)


@dataclass(frozen=True)
class RotorBlockConfig:
    rotors: Sequence[RotorConfig] = field(default_factory=tuple)
    rings: str = ""
    positions: str = ""


def _parse_settings(name: str, s: str, count: int) -> list[int]:
    try:
        values = parse_indexes(s)
    except ValueError as exc:
        raise ValueError(f"parse {name}: {exc}") from exc
    if len(values) != count:
        raise ValueError(
            f"invalid numbers of {name}: have {len(values)}, want {count}"
        )
    return values


class RotorBlock:
    """The set of rotors, leftmost first, with their initial settings."""

    def __init__(self, config: RotorBlockConfig) -> None:
        self.rotors = [Rotor(rc) for rc in config.rotors]
        self._rings = _parse_settings("rings", config.rings, len(self.rotors))
        self._positions = _parse_settings("positions", config.positions, len(self.rotors))
        self.reset()

    def reset(self) -> None:
        """Restore the initial ring settings and positions."""
        for rotor, ring, position in zip(self.rotors, self._rings, self._positions):
            rotor.ring = ring
            rotor.position = position

    def rotate(self) -> None:
        rotate_rotors(self.rotors)

    def forward(self, index: int) -> int:
        for rotor in reversed(self.rotors):
            index = rotor.forward(index)
        return index

    def backward(self, index: int) -> int:
        for rotor in self.rotors:
            index = rotor.backward(index)
        return index


def rotate_rotors(rotors: Sequence[Rotor]) -> None:
    """Step the rotors, rightmost always, with the double-step anomaly."""
    carry = True
    for rotor in reversed(rotors):
        notch = rotor.has_turnover()
        if carry or notch:
            rotor.rotate()
        carry = notch