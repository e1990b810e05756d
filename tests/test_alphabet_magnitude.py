"""
binseq Alphabet & Magnitude Test Suite

Tests the building blocks of the radix codec:
1. Alphabet lookup, case folding and rejection of foreign characters
2. Alphabet configuration errors (radix range, ambiguous symbols)
3. Magnitude multiply/add/divide against Python int arithmetic
4. Digit conversion round trips
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from hypothesis import given, strategies as st

from binseq import alphabet, magnitude
from binseq.alphabet import Alphabet
from binseq.errors import BoundsError, ConfigurationError, FormatError


def as_int(m) -> int:
    return int.from_bytes(bytes(m), "big")


magnitudes = st.binary(max_size=24)
small = st.integers(min_value=0, max_value=255)
radixes = st.integers(min_value=2, max_value=36)


# =============================================================================
# 1. Alphabet lookup
# =============================================================================

def test_digit_alphabet_order():
    a = alphabet.for_radix(36)
    assert a.radix == 36
    assert a.encode(0) == "0"
    assert a.encode(10) == "a"
    assert a.encode(35) == "z"


def test_case_insensitive_decode():
    a = alphabet.for_radix(16)
    assert a.decode("f") == 15
    assert a.decode("F") == 15
    assert "A" in a
    assert "g" not in a


def test_upper_case_alphabet_encodes_upper():
    a = alphabet.for_radix(16, upper_case=True)
    assert a.encode(11) == "B"
    assert a.decode("b") == 11


def test_base64_alphabet_is_case_sensitive():
    assert alphabet.BASE64.decode("A") == 0
    assert alphabet.BASE64.decode("a") == 26


def test_foreign_character_reports_position():
    with pytest.raises(FormatError) as exc:
        alphabet.for_radix(2).decode("2", 7)
    assert exc.value.position == 7
    assert "at index 7" in str(exc.value)


# =============================================================================
# 2. Configuration errors
# =============================================================================

@pytest.mark.parametrize("radix", [0, 1, 37, 64])
def test_radix_out_of_range(radix):
    with pytest.raises(ConfigurationError):
        alphabet.for_radix(radix)


def test_ambiguous_alphabet_rejected():
    with pytest.raises(ConfigurationError):
        Alphabet("aA")


def test_case_sensitive_alphabet_allows_both_cases():
    a = Alphabet("aA", case_insensitive=False)
    assert a.decode("A") == 1


# =============================================================================
# 3. Magnitude arithmetic
# =============================================================================

def test_strip_and_leading_zeros():
    assert magnitude.strip(b"\x00\x00\x01\x00") == bytearray(b"\x01\x00")
    assert magnitude.strip(b"\x00\x00") == bytearray()
    assert magnitude.count_leading_zeros(b"\x00\x00\x05") == 2
    assert magnitude.is_zero(b"\x00\x00")
    assert magnitude.is_zero(b"")


def test_divide_small_example():
    quotient, remainder = magnitude.divide_small(b"\x01\x00", 7)
    assert as_int(quotient) == 256 // 7
    assert remainder == 256 % 7
    assert len(quotient) == 2


def test_inputs_not_modified():
    data = bytearray(b"\x12\x34")
    magnitude.multiply_small(data, 200)
    magnitude.add_small(data, 255)
    magnitude.divide_small(data, 3)
    assert data == bytearray(b"\x12\x34")


def test_negative_operands_rejected():
    with pytest.raises(BoundsError):
        magnitude.multiply_small(b"\x01", -1)
    with pytest.raises(BoundsError):
        magnitude.add_small(b"\x01", -1)
    with pytest.raises(BoundsError):
        magnitude.divide_small(b"\x01", 0)


@given(magnitudes, small)
def test_multiply_small_matches_int(m, factor):
    assert as_int(magnitude.multiply_small(m, factor)) == as_int(m) * factor


@given(magnitudes, small)
def test_add_small_matches_int(m, addend):
    assert as_int(magnitude.add_small(m, addend)) == as_int(m) + addend


@given(magnitudes, st.integers(min_value=1, max_value=255))
def test_divide_small_matches_int(m, divisor):
    quotient, remainder = magnitude.divide_small(m, divisor)
    assert as_int(quotient) == as_int(m) // divisor
    assert remainder == as_int(m) % divisor


# =============================================================================
# 4. Digits
# =============================================================================

def test_zero_has_no_digits():
    assert magnitude.to_digits(b"\x00\x00", 10) == []
    assert magnitude.from_digits([], 10) == bytearray()


def test_digits_example():
    assert magnitude.to_digits(b"\x01\x00", 10) == [2, 5, 6]
    assert magnitude.from_digits([2, 5, 6], 10) == bytearray(b"\x01\x00")


@given(magnitudes, radixes)
def test_digits_round_trip(m, radix):
    digits = magnitude.to_digits(m, radix)
    assert all(0 <= d < radix for d in digits)
    assert magnitude.from_digits(digits, radix) == magnitude.strip(m)
