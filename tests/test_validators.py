"""
binseq Validator Test Suite

Tests:
1. Length predicates
2. Identical-content predicates, including the empty sequence
3. Logical combinators with validators and plain callables
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import binseq
from binseq.validators import (
    all_of,
    any_of,
    at_least,
    at_most,
    exact_length,
    none_of,
    not_,
    not_only_of,
    only_of,
)


def test_length_predicates():
    assert at_least(2)(b"ab")
    assert not at_least(3)(b"ab")
    assert at_most(2)(b"ab")
    assert not at_most(1)(b"ab")
    assert exact_length(0)(b"")


def test_content_predicates():
    assert only_of(0)(b"\x00\x00")
    assert not only_of(0)(b"\x00\x01")
    assert none_of(0)(b"\x01\x02")
    assert not none_of(2)(b"\x01\x02")
    assert not_only_of(0)(b"\x00\x01")
    assert only_of(0xFF)(bytes([255])) and only_of(-1)(bytes([255]))


def test_content_predicates_on_empty():
    assert only_of(0)(b"")
    assert none_of(0)(b"")
    assert not not_only_of(0)(b"")


def test_logical_combinators():
    key = all_of(exact_length(4), not_only_of(0))
    assert key(b"\x00\x00\x00\x01")
    assert not key(b"\x00\x00\x00\x00")
    assert any_of(exact_length(1), only_of(7))(b"\x07\x07")
    assert not_(at_least(3))(b"ab")
    assert all_of(lambda data: data.startswith(b"\x7fELF"))(b"\x7fELF\x02")


def test_validators_through_sequence():
    token = binseq.of([0, 0, 0, 0])
    assert token.validate(exact_length(4))
    assert not token.validate(exact_length(4), not_only_of(0))
    assert token.validate(not_(not_only_of(0)))
