"""
binseq Errors

Every failure raised by the library derives from BytesError. The concrete
classes also derive from the closest builtin so callers that only know
about ValueError / IndexError / TypeError still catch them.

Taxonomy:
- ConfigurationError: a codec, transformer or service was set up with an
  invalid parameter (radix, checksum width, algorithm name)
- FormatError: text or compressed input could not be decoded
- StateError: the sequence has the wrong shape for the request
  (numeric width mismatch, index out of range, operand length mismatch)
- CapabilityError: the variant does not allow the operation
- BoundsError: a length, offset or shift argument is negative or too large
"""

from __future__ import annotations


class BytesError(Exception):
    """Root of all binseq errors."""


class ConfigurationError(BytesError, ValueError):
    """Invalid construction-time parameter."""


class FormatError(BytesError, ValueError):
    """Malformed encoded input."""

    def __init__(self, message: str, position: int = -1) -> None:
        pos_str = f" at index {position}" if position >= 0 else ""
        super().__init__(f"{message}{pos_str}")
        self.position = position


class StateError(BytesError, ValueError):
    """The sequence cannot satisfy the request in its current shape."""


class CapabilityError(BytesError, TypeError):
    """The operation violates the variant's mutation discipline."""

    def __init__(self, operation: str, variant: str) -> None:
        super().__init__(f"{operation} is not supported by {variant}")
        self.operation = operation
        self.variant = variant


class BoundsError(BytesError, IndexError):
    """Negative or out-of-range length, offset or shift argument."""


def check_exact_length(length: int, expected: int, type_name: str) -> None:
    """Raise StateError unless a sequence of `length` bytes converts to `type_name`."""
    if length != expected:
        raise StateError(
            f"cannot convert to {type_name} if length != {expected} bytes "
            f"(was {length})"
        )


def check_mod_length(length: int, mod: int, subject: str) -> None:
    if length % mod != 0:
        raise StateError(
            f"illegal length for {subject}: byte length must be a multiple "
            f"of {mod}, was {length}"
        )


def check_index(length: int, index: int, width: int, type_name: str) -> None:
    if index < 0 or index + width > length:
        raise StateError(
            f"cannot read {type_name} at index {index}: out of bounds for "
            f"length {length}"
        )


def check_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise BoundsError(f"{name} must not be negative (was {value})")
