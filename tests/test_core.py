"""
binseq Core Test Suite

Tests the byte sequence surface shared by all variants:
1. Constructors (wrap, of, allocate, concat, text, random, parse)
2. Queries (index_of, count, entropy, starts/ends_with, validate)
3. Equality, hashing and ordering
4. Encoders and views
5. Representation
"""

import io
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import random

import pytest

import binseq
from binseq import ByteOrder, ImmutableBytes, MutableBytes, ReadOnlyBytes
from binseq.errors import BoundsError, ConfigurationError, FormatError
from binseq.validators import at_least, exact_length, only_of


# =============================================================================
# 1. Constructors
# =============================================================================

def test_wrap_aliases_bytearray():
    raw = bytearray([1, 2, 3])
    b = binseq.wrap(raw)
    assert isinstance(b, MutableBytes)
    assert b.array() is raw
    raw[0] = 9
    assert b[0] == 9


def test_wrap_bytes_copies():
    b = binseq.wrap(b"\x01\x02")
    assert b.to_list() == [1, 2]
    assert b.order is ByteOrder.BIG


def test_of_copies():
    raw = bytearray([1, 2, 3])
    b = binseq.of(raw)
    raw[0] = 9
    assert b.to_list() == [1, 2, 3]


def test_of_signed_ints():
    assert binseq.of([-1, 0, 127, -128]).to_list() == [255, 0, 127, 128]


@pytest.mark.parametrize("values", [[256], [0, 300], [-129], [1, 2, 1000]])
def test_of_rejects_values_outside_byte_range(values):
    with pytest.raises(BoundsError):
        binseq.of(values)
    with pytest.raises(BoundsError):
        binseq.of([0] * len(values)).xor(values)


def test_allocate_and_empty():
    assert binseq.allocate(3).to_list() == [0, 0, 0]
    assert binseq.allocate(2, fill=0xAB).to_list() == [0xAB, 0xAB]
    assert binseq.empty().is_empty
    assert len(binseq.allocate(0)) == 0
    with pytest.raises(BoundsError):
        binseq.allocate(-1)


def test_concat():
    b = binseq.concat(b"\x01", bytearray(b"\x02"), binseq.of([3]), [4])
    assert b.to_list() == [1, 2, 3, 4]


def test_text_round_trip():
    b = binseq.from_text("grüße")
    assert len(b) == 7
    assert b.encode_text() == "grüße"
    assert binseq.from_text("é", normalization="NFD").to_list() == [0x65, 0xCC, 0x81]


def test_text_errors():
    with pytest.raises(ConfigurationError):
        binseq.from_text("x", encoding="no-such-codec")
    with pytest.raises(FormatError):
        binseq.from_text("€", encoding="ascii")
    with pytest.raises(FormatError):
        binseq.of(b"\xff").encode_text()


def test_random_and_pseudo_random():
    assert len(binseq.random(16)) == 16
    assert binseq.random(4, rng=random.Random(1)) == binseq.random(4, rng=random.Random(1))
    assert binseq.pseudo_random(8, seed=42) == binseq.pseudo_random(8, seed=42)
    assert binseq.pseudo_random(8, seed=1) != binseq.pseudo_random(8, seed=2)


def test_from_stream():
    b = binseq.from_stream(io.BytesIO(b"abcdef"), max_length=4)
    assert b.to_bytes() == b"abcd"
    assert binseq.from_stream(io.BytesIO(b"xy")).to_bytes() == b"xy"


def test_from_file(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(bytes(range(10)))
    assert binseq.from_file(path).to_list() == list(range(10))
    assert binseq.from_file(str(path), offset=2, length=3).to_list() == [2, 3, 4]
    with pytest.raises(BoundsError):
        binseq.from_file(path, offset=8, length=5)


def test_parse_functions():
    assert binseq.parse_hex("cafe").to_list() == [0xCA, 0xFE]
    assert binseq.parse_base64("Zm9vYmFy").to_bytes() == b"foobar"
    assert binseq.parse_base32("MZXW6===").to_bytes() == b"foo"
    assert binseq.parse_binary("101").to_list() == [5]
    assert binseq.parse_octal("777").to_list() == [1, 0xFF]
    assert binseq.parse_dec("256").to_list() == [1, 0]
    assert binseq.parse_radix("zz", 36).to_list() == [0x05, 0x0F]
    assert binseq.parse_hex("0102", ByteOrder.LITTLE).to_list() == [2, 1]


def test_class_constructors_keep_variant():
    assert isinstance(ImmutableBytes.parse_hex("00"), ImmutableBytes)
    assert isinstance(ReadOnlyBytes.allocate(2), ReadOnlyBytes)
    assert isinstance(binseq.Bytes.of(b"\x00"), MutableBytes)
    assert isinstance(binseq.of_immutable([1]), ImmutableBytes)
    assert isinstance(binseq.wrap_read_only(bytearray(1)), ReadOnlyBytes)


# =============================================================================
# 2. Queries
# =============================================================================

def test_index_queries():
    b = binseq.of([1, 2, 3, 1, 2])
    assert b.index_of(2) == 1
    assert b.index_of([1, 2], from_index=1) == 3
    assert b.last_index_of(1) == 3
    assert b.index_of(9) == -1
    assert b.contains([3, 1])
    assert not b.contains(7)
    assert b.starts_with([1, 2])
    assert b.ends_with(b"\x01\x02")


def test_count_overlapping():
    b = binseq.of([0, 0, 0, 1])
    assert b.count(0) == 3
    assert b.count([0, 0]) == 2
    assert b.count(b"") == 0
    assert binseq.empty().count([0]) == 0


def test_entropy():
    assert binseq.allocate(16).entropy() == 0.0
    assert binseq.empty().entropy() == 0.0
    assert binseq.of(range(256)).entropy() == pytest.approx(8.0)
    assert binseq.of([0, 1]).entropy() == pytest.approx(1.0)


def test_length_properties():
    b = binseq.of([1, 2, 3])
    assert b.length == 3
    assert b.length_bit == 24
    assert not b.is_empty


def test_validate():
    b = binseq.of([0, 0, 1])
    assert b.validate(exact_length(3), at_least(1))
    assert not b.validate(only_of(0))
    assert b.validate_not_only_zeros()
    assert not binseq.allocate(4).validate_not_only_zeros()
    assert b.validate(lambda data: data[-1] == 1)


# =============================================================================
# 3. Equality, hashing and ordering
# =============================================================================

def test_equality_includes_order_not_variant():
    big = binseq.of([1, 2])
    little = binseq.of([1, 2], ByteOrder.LITTLE)
    assert big == binseq.of_immutable([1, 2])
    assert big == ReadOnlyBytes.of([1, 2])
    assert big != little
    assert big.equals_content(little)
    assert hash(big) == hash(binseq.of_immutable([1, 2]))
    assert big != b"\x01\x02"


def test_equals_bytes_and_constant_time():
    b = binseq.of([1, 2])
    assert b.equals_bytes(b"\x01\x02")
    assert b.equals_constant_time(bytearray([1, 2]))
    assert not b.equals_constant_time([1, 3])
    assert not b.equals_constant_time([1])


@pytest.mark.parametrize("a,b,expected", [
    ([1, 2], [1, 2], 0),
    ([1], [1, 0], -1),
    ([0x80], [0x7F], 1),
    ([], [0], -1),
    ([2], [1, 9, 9], 1),
])
def test_compare_to_unsigned_lexicographic(a, b, expected):
    assert binseq.of(a).compare_to(binseq.of(b)) == expected
    assert (binseq.of(a) < binseq.of(b)) == (expected < 0)
    assert (binseq.of(a) >= binseq.of(b)) == (expected >= 0)


def test_sorting_sequences():
    items = [binseq.of([2]), binseq.of([1, 5]), binseq.of([1])]
    assert [s.to_list() for s in sorted(items)] == [[1], [1, 5], [2]]


# =============================================================================
# 4. Encoders and views
# =============================================================================

def test_encoders():
    b = binseq.of(b"foobar")
    assert b.encode_hex() == "666f6f626172"
    assert b.encode_hex(upper=True) == "666F6F626172"
    assert b.encode_base64() == "Zm9vYmFy"
    assert b.encode_base32() == "MZXW6YTBOI======"
    assert binseq.of([0xfb, 0xff]).encode_base64_url() == "-_8="
    assert binseq.of([0xfb, 0xff]).encode_base64(padding=False) == "+/8"


def test_radix_encoders():
    b = binseq.of([1, 0])
    assert b.encode_binary() == "100000000"
    assert b.encode_octal() == "400"
    assert b.encode_dec() == "256"
    assert b.encode_radix(36) == "74"
    assert b.encode_radix(64) == "AQA="


def test_encoders_follow_order():
    b = binseq.of([1, 2, 3], ByteOrder.LITTLE)
    assert b.encode_hex() == "030201"
    assert b.to_list() == [1, 2, 3]


def test_views():
    raw = bytearray([1, 2])
    b = binseq.wrap(raw)
    view = b.view()
    assert view.readonly
    raw[0] = 7
    assert view[0] == 7
    assert b.to_bytes() == b"\x07\x02"
    assert bytes(b) == b"\x07\x02"
    assert b.stream().read() == b"\x07\x02"
    assert list(b) == [7, 2]
    assert b[-1] == 2


def test_slice_keeps_variant_and_copies():
    b = binseq.of_immutable([1, 2, 3, 4])
    part = b[1:3]
    assert isinstance(part, ImmutableBytes)
    assert part.to_list() == [2, 3]


# =============================================================================
# 5. Representation
# =============================================================================

def test_repr():
    assert repr(binseq.of([1, 2, 3, 4])) == "<MutableBytes: 4 bytes (0x01020304) big>"
    assert repr(binseq.empty()) == "<MutableBytes: 0 bytes big>"
    long_repr = repr(binseq.of_immutable(range(10)).with_order("little"))
    assert long_repr == "<ImmutableBytes: 10 bytes (0x00010203...06070809) little>"
