"""Feeding whole texts and byte strings through an Enigma machine."""

from __future__ import annotations

from dataclasses import dataclass

from . import base26
from .machine import Enigma


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def feed_text(enigma: Enigma, text: str) -> str:
    """Reset the machine and encipher a text made only of letters."""
    enigma.reset()
    return "".join(enigma.feed_letter(ch) for ch in text)


def feed_text_include_foreign(enigma: Enigma, text: str) -> str:
    """Encipher the letters of a text and keep every other character."""
    enigma.reset()
    return "".join(enigma.feed_letter(ch) if _is_letter(ch) else ch for ch in text)


def feed_text_ignore_foreign(enigma: Enigma, text: str) -> str:
    """Encipher the letters of a text and drop every other character."""
    enigma.reset()
    return "".join(enigma.feed_letter(ch) for ch in text if _is_letter(ch))


def join_lines(prefix: str, *lines: str) -> str:
    """Join lines, each preceded by ``prefix`` and followed by a newline."""
    return "".join(f"{prefix}{line}\n" for line in lines)


def only_letters(s: str) -> str:
    """Keep only the Latin letters of ``s``, in upper case."""
    return "".join(ch.upper() for ch in s if _is_letter(ch))


def lines_to_text(*lines: str) -> str:
    """Join lines and keep only their letters, in upper case."""
    return only_letters(join_lines("", *lines)).upper()


@dataclass(frozen=True)
class TextFormatter:
    """Lays letters out in groups and lines."""

    letters_per_group: int = 4
    groups_per_line: int = 12

    def format_text(self, text: str) -> str:
        letters_per_line = self.letters_per_group * self.groups_per_line
        parts = []
        for i, ch in enumerate(only_letters(text)):
            if i > 0:
                if i % letters_per_line == 0:
                    parts.append("\n")
                elif i % self.letters_per_group == 0:
                    parts.append(" ")
            parts.append(ch)
        return "".join(parts)


DEFAULT_TEXT_FORMATTER = TextFormatter()


class BytesCrypt:
    """Enciphers arbitrary bytes by way of the base26 letter encoding."""

    def __init__(self, enigma: Enigma) -> None:
        self._enigma = enigma

    def encrypt(self, data: bytes) -> bytes:
        plaintext = base26.encode(data)
        return feed_text(self._enigma, plaintext).encode("ascii")

    def decrypt(self, data: bytes) -> bytes:
        ciphertext = bytes(data).decode("latin-1")
        return base26.decode(feed_text(self._enigma, ciphertext))