import pytest

from cipherkit.enigma.indexes import (
    TOTAL_INDEXES,
    index_to_letter,
    letter_to_index,
    parse_indexes,
    parse_turnovers,
    parse_wiring,
    validate_plugboard,
    validate_wiring,
)

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ROTOR_I = "EKMFLGDQVZNTOWYHXUSPAIBRCJ"


def test_letters_map_to_consecutive_indexes():
    assert [letter_to_index(c) for c in ALPHABET] == list(range(TOTAL_INDEXES))


def test_lower_case_matches_upper_case():
    assert [letter_to_index(c.lower()) for c in ALPHABET] == [
        letter_to_index(c) for c in ALPHABET
    ]


def test_round_trip():
    for c in ALPHABET:
        assert index_to_letter(letter_to_index(c)) == c


def test_byte_values_accepted():
    assert letter_to_index(ord("Q")) == letter_to_index("Q")


@pytest.mark.parametrize("letter", ["1", " ", "é", "AB", "@"])
def test_invalid_letters(letter):
    with pytest.raises(ValueError):
        letter_to_index(letter)


@pytest.mark.parametrize("index", [-1, TOTAL_INDEXES, 100])
def test_invalid_indexes(index):
    with pytest.raises(ValueError, match="Invalid index"):
        index_to_letter(index)


def test_parse_indexes():
    assert parse_indexes("AbZ") == [
        letter_to_index("A"),
        letter_to_index("B"),
        letter_to_index("Z"),
    ]
    assert parse_indexes("") == []


def test_parse_indexes_reports_position():
    with pytest.raises(ValueError, match="by index 1"):
        parse_indexes("A1C")


def test_parse_wiring_tables_are_inverse():
    forward, backward = parse_wiring(ROTOR_I)
    assert sorted(forward) == list(range(TOTAL_INDEXES))
    for i in range(TOTAL_INDEXES):
        assert backward[forward[i]] == i
        assert index_to_letter(forward[i]) == ROTOR_I[i]


def test_wiring_duplicates():
    with pytest.raises(ValueError, match="duplicates"):
        validate_wiring("AA" + ALPHABET[2:])


@pytest.mark.parametrize("spec", ["A", "ABC", "AB  CD", "ab", "AB CD "])
def test_invalid_plugboard(spec):
    with pytest.raises(ValueError, match="invalid pair"):
        validate_plugboard(spec)


def test_plugboard_duplicates():
    with pytest.raises(ValueError, match="duplicates"):
        validate_plugboard("AB AC")


def test_parse_turnovers():
    flags = parse_turnovers("ZM")
    assert len(flags) == TOTAL_INDEXES
    assert flags[letter_to_index("Z")] and flags[letter_to_index("M")]
    assert sum(flags) == 2
    assert not any(parse_turnovers(""))