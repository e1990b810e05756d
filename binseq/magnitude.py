"""
binseq Byte Magnitude Arithmetic

A magnitude is an unsigned integer stored as a big-endian base-256 byte
array. The radix codec needs exactly three operations on it, each with a
small (single machine word) second operand:

- multiply_small:  m * factor
- add_small:       m + addend, carry propagated towards index 0
- divide_small:    (m // divisor, m % divisor) by schoolbook long division

All functions take any bytes-like magnitude and return a new bytearray;
inputs are never modified. Results may carry leading zero bytes; use
strip() to normalize.
"""

from __future__ import annotations

from binseq.errors import BoundsError

BASE = 256


def is_zero(magnitude: bytes | bytearray) -> bool:
    return not any(magnitude)


def strip(magnitude: bytes | bytearray) -> bytearray:
    """Drop leading zero bytes. The zero magnitude becomes an empty array."""
    start = 0
    while start < len(magnitude) and magnitude[start] == 0:
        start += 1
    return bytearray(magnitude[start:])


def count_leading_zeros(magnitude: bytes | bytearray) -> int:
    count = 0
    for b in magnitude:
        if b != 0:
            break
        count += 1
    return count


def multiply_small(magnitude: bytes | bytearray, factor: int) -> bytearray:
    """Multiply by a non-negative small factor; the array grows by the final carry."""
    if factor < 0:
        raise BoundsError(f"factor must not be negative (was {factor})")
    out = bytearray(len(magnitude))
    carry = 0
    for i in range(len(magnitude) - 1, -1, -1):
        v = magnitude[i] * factor + carry
        out[i] = v & 0xFF
        carry = v >> 8
    prefix = bytearray()
    while carry:
        prefix.insert(0, carry & 0xFF)
        carry >>= 8
    return prefix + out


def add_small(magnitude: bytes | bytearray, addend: int) -> bytearray:
    """Add a non-negative small value, propagating the carry to the front."""
    if addend < 0:
        raise BoundsError(f"addend must not be negative (was {addend})")
    out = bytearray(magnitude)
    carry = addend
    i = len(out) - 1
    while carry and i >= 0:
        v = out[i] + carry
        out[i] = v & 0xFF
        carry = v >> 8
        i -= 1
    prefix = bytearray()
    while carry:
        prefix.insert(0, carry & 0xFF)
        carry >>= 8
    return prefix + out


def divide_small(magnitude: bytes | bytearray, divisor: int) -> tuple[bytearray, int]:
    """Schoolbook division by a small positive divisor.

    Scans from the most significant byte, carrying the running remainder
    r into the next step as r * 256 + b. The quotient has the same length
    as the input.

    Returns:
        (quotient, remainder) with 0 <= remainder < divisor
    """
    if divisor <= 0:
        raise BoundsError(f"divisor must be positive (was {divisor})")
    quotient = bytearray(len(magnitude))
    remainder = 0
    for i, b in enumerate(magnitude):
        v = remainder * BASE + b
        quotient[i] = v // divisor
        remainder = v % divisor
    return quotient, remainder


def to_digits(magnitude: bytes | bytearray, radix: int) -> list[int]:
    """Digit values of a magnitude in `radix`, most significant first.

    The zero magnitude has no digits.
    """
    digits: list[int] = []
    current = strip(magnitude)
    while current:
        current, remainder = divide_small(current, radix)
        digits.append(remainder)
        current = strip(current)
    digits.reverse()
    return digits


def from_digits(digits: list[int], radix: int) -> bytearray:
    """Horner accumulation of digit values (most significant first) into a
    minimal-length magnitude."""
    magnitude = bytearray()
    for digit in digits:
        magnitude = add_small(multiply_small(magnitude, radix), digit)
    return strip(magnitude)
