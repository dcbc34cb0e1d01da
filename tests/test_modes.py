import random

import pytest

from cipherkit.magma.block import MagmaCipher
from cipherkit.magma.modes import CFBStream, GammaStream, MagmaHash
from cipherkit.magma.sboxes import RT2, MagmaError

STREAM_KEY = bytes(
    [
        0x81, 0x82, 0x83, 0x84, 0x85, 0x86, 0x87, 0x88,
        0x89, 0x8A, 0x11, 0x8C, 0x8D, 0x8E, 0x8F, 0x80,
        0xD1, 0xD2, 0xD3, 0xD4, 0xEF, 0xD6, 0xD7, 0xD8,
        0xD9, 0xDA, 0xDB, 0xDC, 0xDD, 0xDE, 0xDF, 0x01,
    ]
)

HASH_KEY = bytes(
    [
        0x81, 0x82, 0x83, 0x84, 0x85, 0xB6, 0x87, 0xCC,
        0x89, 0x8A, 0x11, 0x8C, 0x8D, 0x8E, 0x8F, 0x80,
        0xD1, 0xD2, 0xD3, 0xD4, 0xEF, 0xD6, 0x90, 0xD8,
        0xD9, 0xDA, 0xDB, 0xDC, 0xDD, 0xDE, 0xDF, 0x01,
    ]
)

CFB_SYN = bytes([0xF1, 0x09, 0xAC, 0x11, 0x73, 0xB8, 0x04, 0x13])
ENCRYPTER_SYN = bytes([0x12, 0xA9, 0x1C, 0x11, 0x73, 0xBB, 0xF4, 0x1D])
STREAM_SYN = bytes([0xA1, 0x09, 0xDC, 0x11, 0x73, 0x17, 0x04, 0x13])

MESSAGE = "中國是中國，台灣和新加坡的官方語言。世界各地的講它超過13十億人".encode()


def xor(a, b):
    return bytes(x ^ y for x, y in zip(a, b))


def test_cfb_round_trip_random():
    cipher = MagmaCipher(STREAM_KEY, RT2)
    rng = random.Random(10)
    for _ in range(30):
        plaintext = rng.randbytes(rng.randint(1, 200))
        ciphertext = CFBStream(cipher, CFB_SYN).process(plaintext)
        assert len(ciphertext) == len(plaintext)
        assert CFBStream(cipher, CFB_SYN, decrypt=True).process(ciphertext) == plaintext


def test_cfb_matches_full_block_feedback():
    cipher = MagmaCipher(STREAM_KEY)
    rng = random.Random(4)
    plaintext = rng.randbytes(24)
    ciphertext = CFBStream(cipher, ENCRYPTER_SYN).process(plaintext)
    c1 = xor(plaintext[:8], cipher.encrypt_block(ENCRYPTER_SYN))
    c2 = xor(plaintext[8:16], cipher.encrypt_block(c1))
    c3 = xor(plaintext[16:], cipher.encrypt_block(c2))
    assert ciphertext == c1 + c2 + c3


def test_cfb_chunked_equals_whole():
    cipher = MagmaCipher(STREAM_KEY)
    rng = random.Random(10)
    encrypter = CFBStream(cipher, ENCRYPTER_SYN)
    reference = CFBStream(cipher, ENCRYPTER_SYN)
    pieces = [rng.randbytes(rng.randint(1, 50)) for _ in range(20)]
    chunked = b"".join(encrypter.process(piece) for piece in pieces)
    assert chunked == reference.process(b"".join(pieces))


def test_cfb_chunked_decrypt():
    cipher = MagmaCipher(STREAM_KEY)
    ciphertext = CFBStream(cipher, CFB_SYN).process(MESSAGE)
    decrypter = CFBStream(cipher, CFB_SYN, decrypt=True)
    parts = [ciphertext[:5], ciphertext[5:9], ciphertext[9:17], ciphertext[17:]]
    assert b"".join(decrypter.process(part) for part in parts) == MESSAGE


def test_cfb_wrong_syn_length():
    cipher = MagmaCipher(STREAM_KEY)
    with pytest.raises(MagmaError, match="wrong syn len"):
        CFBStream(cipher, CFB_SYN[:7])


def test_gamma_round_trip_random():
    cipher = MagmaCipher(STREAM_KEY)
    rng = random.Random(8)
    for _ in range(30):
        plaintext = rng.randbytes(rng.randint(1, 200))
        ciphertext = GammaStream(cipher, STREAM_SYN).process(plaintext)
        assert len(ciphertext) == len(plaintext)
        assert GammaStream(cipher, STREAM_SYN).process(ciphertext) == plaintext


def test_gamma_chunked_decrypt():
    cipher = MagmaCipher(STREAM_KEY)
    ciphertext = GammaStream(cipher, CFB_SYN).process(MESSAGE)
    assert ciphertext != MESSAGE
    stream = GammaStream(cipher, CFB_SYN)
    parts = [ciphertext[:5], ciphertext[5:9], ciphertext[9:17], ciphertext[17:]]
    assert b"".join(stream.process(part) for part in parts) == MESSAGE


def test_gamma_depends_on_syn():
    cipher = MagmaCipher(STREAM_KEY)
    zeros = bytes(32)
    assert GammaStream(cipher, STREAM_SYN).process(zeros) != GammaStream(
        cipher, CFB_SYN
    ).process(zeros)


def test_gamma_wrong_syn_length():
    cipher = MagmaCipher(STREAM_KEY)
    with pytest.raises(MagmaError, match="wrong syn len"):
        GammaStream(cipher, STREAM_SYN + b"\x00")


def test_hash_of_one_block():
    cipher = MagmaCipher(HASH_KEY, RT2)
    block = bytes(range(1, 9))
    expected = block
    for _ in range(16):
        expected = cipher.encrypt_block(expected)
    h = MagmaHash(cipher)
    h.update(block)
    assert h.digest() == expected
    assert h.size == 8
    assert h.block_size == 8


def test_hash_zero_pads_last_block():
    cipher = MagmaCipher(HASH_KEY, RT2)
    rng = random.Random(6)
    for length in (1, 3, 9, 15, 21):
        data = rng.randbytes(length)
        padded = data + bytes(-length % 8)
        a = MagmaHash(cipher)
        a.update(data)
        b = MagmaHash(cipher)
        b.update(padded)
        assert a.digest() == b.digest()


def test_hash_chunked_update_and_reset():
    cipher = MagmaCipher(HASH_KEY, RT2)
    rng = random.Random(12)
    data = rng.randbytes(100)
    whole = MagmaHash(cipher)
    whole.update(data)
    chunked = MagmaHash(cipher)
    for start in range(0, len(data), 7):
        chunked.update(data[start : start + 7])
    assert chunked.digest() == whole.digest()
    assert chunked.digest() == chunked.digest()
    chunked.reset()
    chunked.update(data)
    assert chunked.digest() == whole.digest()


def test_hash_distinguishes_messages():
    cipher = MagmaCipher(STREAM_KEY)
    h = MagmaHash(cipher)
    h.update(b"Hash is the common interface implemented by all hash functions")
    first = h.digest()
    h.reset()
    h.update(b"Hash is the Common interface implemented by all hash functions")
    assert h.digest() != first


def test_digest64_is_little_endian_digest():
    cipher = MagmaCipher(STREAM_KEY)
    h = MagmaHash(cipher)
    h.update(MESSAGE)
    assert h.digest64() == int.from_bytes(h.digest(), "little")