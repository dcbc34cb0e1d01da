# cipherkit

Pure-Python implementations of a few classical and national ciphers:

- **Enigma** (`cipherkit.enigma`): a configurable Enigma machine with the
  historical rotors I–VIII, Beta and Gamma and the reflectors A, B, C,
  B-thin and C-thin. It comes with text feeders that keep or drop
  characters that are not letters, a grouped text formatter, and base16 and
  base26 codecs that map arbitrary bytes onto letters.
- **Magma** (`cipherkit.magma`): the GOST 28147-89 block cipher with
  selectable replace tables, cipher feedback mode, the gamma (counter)
  stream mode and a chained-block checksum.
- **Feistel** (`cipherkit.feistel`): a generic Feistel network over pairs
  of integer words.
- **gendigs** (`cipherkit.gendigs`): a small command that writes every
  fixed-width decimal number to a file.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Enigma

```python
from cipherkit.enigma.machine import Config, RotorsConfig, Enigma
from cipherkit.enigma.text import feed_text_include_foreign, feed_text_ignore_foreign

config = Config(
    plugboard="BQ CR DI EJ KW MT OS PX UZ GH",
    rotors=RotorsConfig(ids="VI I III", rings="AAA", positions="AQL"),
    reflector="B",
)
machine = Enigma(config)
print(feed_text_include_foreign(machine, "Hello, World!"))  # GKTWX, GEGZQ!
print(feed_text_ignore_foreign(machine, "Hello, World!"))   # GKTWXGEGZQ
```

Rotor ids are separated by single spaces, leftmost rotor first; `rings`
and `positions` hold one letter per rotor. The plugboard is a space
separated list of letter pairs and may be empty.

There are three feeders in `cipherkit.enigma.text`:

- `feed_text(enigma, text)` — every character must be a letter; anything
  else raises `ValueError`.
- `feed_text_include_foreign(enigma, text)` — letters are enciphered, all
  other characters are copied through.
- `feed_text_ignore_foreign(enigma, text)` — letters are enciphered, all
  other characters are dropped.

Each feeder resets the machine to its starting positions first, so feeding
the ciphertext back through the same machine gives the plaintext (in upper
case). Single letters go through `Enigma.feed_letter`, and
`Enigma.reset()` returns the rotors to their initial positions.

Further rotors and reflectors can be added with `register_rotor(rotor_id,
RotorConfig(wiring, turnovers))` and `register_reflector(reflector_id,
ReflectorConfig(wiring))` from `cipherkit.enigma.machine`; `rotor_config`
and `reflector_config` look registered ones up.

Text helpers: `only_letters(s)` keeps the Latin letters in upper case,
`join_lines(prefix, *lines)` and `lines_to_text(*lines)` join lines, and
`TextFormatter(letters_per_group=4, groups_per_line=12).format_text(text)`
lays letters out in groups and lines (`DEFAULT_TEXT_FORMATTER` uses those
defaults).

### Bytes through the machine

`BytesCrypt` encodes arbitrary bytes as letters with base26 and feeds them
through the machine:

```python
from cipherkit.enigma.text import BytesCrypt

crypt = BytesCrypt(machine)
sealed = crypt.encrypt(b"any bytes")
assert crypt.decrypt(sealed) == b"any bytes"
```

The codecs can be used on their own:

```python
from cipherkit.enigma import base16, base26

base26.encode(bytes.fromhex("0123456789abcdef"))  # 'BYIKIHLEOKWZPO'
base26.decode("BYIKIHLEOKWZPO")                   # b'\x01#Eg\x89\xab\xcd\xef'
base16.encode(b"Hi")                              # two letters per byte, no I, O or Q
```

Decoding errors raise `base26.Base26Error` or `base16.Base16Error`
(`InvalidByteError`, `OddLengthError`), all subclasses of `ValueError`.

## Magma

```python
from cipherkit.magma.block import MagmaCipher
from cipherkit.magma.modes import CFBStream, GammaStream, MagmaHash
from cipherkit.magma.sboxes import RT2

key = bytes(range(32))
cipher = MagmaCipher(key)            # replace table RT1 by default
block = cipher.encrypt_block(b"\x01\x02\x03\x04\x05\x06\x07\x08")
assert cipher.decrypt_block(block) == b"\x01\x02\x03\x04\x05\x06\x07\x08"

other = MagmaCipher(key, RT2)        # RT1, RT2 and RT3 are provided

syn = bytes(8)
sealed = CFBStream(cipher, syn, False).process(b"some message")
assert CFBStream(cipher, syn, True).process(sealed) == b"some message"

gamma = GammaStream(cipher, syn).process(b"some message")
assert GammaStream(cipher, syn).process(gamma) == b"some message"

h = MagmaHash(cipher)
h.update(b"some message")
print(h.digest().hex(), h.digest64())
h.reset()
```

Keys must be 32 bytes and synchronisation vectors 8 bytes; otherwise
`MagmaError` (a `ValueError`) is raised. Replace tables are checked with
`check_replace_table`. The streams keep their position between calls to
`process`, so a message may be handled in pieces of any size.

## Feistel network

```python
from cipherkit.feistel import FeistelCipher

net = FeistelCipher([3, 1, 4, 1, 5], lambda k, r: (k * r + 7) & 0xFFFF)
left, right = net.encrypt(0x1234, 0x5678)
assert net.decrypt(left, right) == (0x1234, 0x5678)
```

## Digit-sequence generator

```
cipherkit-gendigs --digs 3
```

This writes `digits-03.txt` holding `000` to `999`, one per line. Pass
`--filename` to choose the output file. The same is available from Python
as `cipherkit.gendigs.generate(digits, filename)` and, as a generator of
lines, `iter_digit_lines(digits)`.

## What this package does not do

- The `cipherkit.kalyna` package is empty: the Kalyna (DSTU 7624:2014)
  block cipher is not included.
- There are no generic block-cipher modes beyond the Magma ones above, and
  no command-line front end for the ciphers themselves.
- This is plain Python written for clarity; it makes no attempt at
  constant-time operation or speed.