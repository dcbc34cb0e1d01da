"""The Enigma machine and the registries of known rotors and reflectors."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from .indexes import index_to_letter, letter_to_index
from .parts import (
    Plugboard,
    Reflector,
    ReflectorConfig,
    RotorBlock,
    RotorBlockConfig,
    RotorConfig,
)

_rotors_lock = threading.Lock()
_rotors: dict[str, RotorConfig] = {
    "I": RotorConfig("EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    "II": RotorConfig("AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    "III": RotorConfig("BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    "IV": RotorConfig("ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    "V": RotorConfig("VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
    "VI": RotorConfig("JPGVOUMFYQBENHZRDKASXLICTW", "ZM"),
    "VII": RotorConfig("NZJHGRCXMYSWBOUFAIVLPEKQDT", "ZM"),
    "VIII": RotorConfig("FKQHTLXOCBJSPDZRAMEWNIUYGV", "ZM"),
    "Beta": RotorConfig("LEYJVCNIXWPBQMDRTAKZGFUHOS", ""),
    "Gamma": RotorConfig("FSOKANUERHMBTIYCWLQPZXVGJD", ""),
}

_reflectors_lock = threading.Lock()
_reflectors: dict[str, ReflectorConfig] = {
    "A": ReflectorConfig("EJMZALYXVBWFCRQUONTSPIKHGD"),
    "B": ReflectorConfig("YRUHQSLDPXNGOKMIEBFZCWVJAT"),
    "C": ReflectorConfig("FVPJIAOYEDRZXWGCTKUQSBNMHL"),
    "B-thin": ReflectorConfig("ENKQAUYWJICOPBLMDXZVFTHRGS"),
    "C-thin": ReflectorConfig("RDOBJNTKVEHMLFCWZAXGYIPSUQ"),
}


def register_rotor(rotor_id: str, config: RotorConfig) -> None:
    """Add or replace a rotor under the given identifier."""
    with _rotors_lock:
        _rotors[rotor_id] = config


def register_reflector(reflector_id: str, config: ReflectorConfig) -> None:
    """Add or replace a reflector under the given identifier."""
    with _reflectors_lock:
        _reflectors[reflector_id] = config


def rotor_config(rotor_id: str) -> RotorConfig:
    """Return the configuration of a registered rotor."""
    with _rotors_lock:
        try:
            return _rotors[rotor_id]
        except KeyError:
            raise ValueError(f"There is no rotor by ID ({rotor_id!r})") from None


def reflector_config(reflector_id: str) -> ReflectorConfig:
    """Return the configuration of a registered reflector."""
    with _reflectors_lock:
        try:
            return _reflectors[reflector_id]
        except KeyError:
            raise ValueError(f"invalid reflector id {reflector_id!r}") from None


@dataclass(frozen=True)
class RotorsConfig:
    """Space separated rotor ids (leftmost first), ring and position letters."""

    ids: str
    rings: str
    positions: str


@dataclass(frozen=True)
class Config:
    rotors: RotorsConfig
    reflector: str
    plugboard: str = field(default="")


class Enigma:
    """An Enigma machine built from registered rotors and reflectors."""

    def __init__(self, config: Config) -> None:
        self.plugboard = Plugboard(config.plugboard)
        rotor_configs = tuple(rotor_config(rid) for rid in config.rotors.ids.split(" "))
        self.rotor_block = RotorBlock(
            RotorBlockConfig(
                rotors=rotor_configs,
                rings=config.rotors.rings,
                positions=config.rotors.positions,
            )
        )
        self.reflector = Reflector(reflector_config(config.reflector))

    def reset(self) -> None:
        """Return the rotors to their initial positions."""
        self.rotor_block.reset()

    def feed_index(self, index: int) -> int:
        """Step the rotors and pass one letter index through the machine."""
        self.rotor_block.rotate()
        index = self.plugboard.forward(index)
        index = self.rotor_block.forward(index)
        index = self.reflector.reflect(index)
        index = self.rotor_block.backward(index)
        return self.plugboard.backward(index)

    def feed_letter(self, letter: str | int) -> str:
        """Encipher one letter (either case); the result is upper case."""
        return index_to_letter(self.feed_index(letter_to_index(letter)))