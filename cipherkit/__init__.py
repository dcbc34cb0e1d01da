"""Enigma machine, Magma block cipher and a Feistel network in pure Python."""

__version__ = "0.1.0"