"""
binseq Transformers

A Transformer is one operation on a byte array: bitwise algebra, shifts,
reversal, resize, sort/shuffle, concatenation, digests, checksums and
compression. It answers two questions:

- transform(current, in_place): produce the new storage. When in_place is
  True the transformer may (and, if it supports it, does) write into
  `current` and return that same object. When False it must never write
  into `current`.
- supports_in_place(): whether it can work without allocating. Digest,
  compression, concatenation, copy and resize cannot.

The transformer never decides whether to mutate; the variant of the byte
sequence passes in_place (see Bytes.transform). Transformers validate
their parameters in __init__ (ConfigurationError / BoundsError) and their
operands before writing anything (StateError), so a failing call leaves
the storage untouched.
"""

from __future__ import annotations

import random
import secrets
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Optional

from binseq import services
from binseq.errors import BoundsError, StateError, check_non_negative
from binseq.order import ByteOrder

_INVERT_TABLE = bytes(range(255, -1, -1))


class Transformer(ABC):
    """Base class for all byte array operations."""

    @abstractmethod
    def transform(self, current: bytearray, in_place: bool) -> bytearray:
        ...

    @abstractmethod
    def supports_in_place(self) -> bool:
        ...

    def __repr__(self) -> str:
        mode = "in-place" if self.supports_in_place() else "copying"
        return f"<{type(self).__name__} {mode}>"


def _target(current: bytearray, in_place: bool) -> bytearray:
    """The array to write into: `current` itself, or a fresh copy."""
    return current if in_place else bytearray(current)


# ============================================================================
# Bitwise algebra
# ============================================================================

class BitwiseMode(Enum):
    AND = "and"
    OR = "or"
    XOR = "xor"


class BitwiseTransformer(Transformer):
    """AND / OR / XOR against a second operand of the same length."""

    def __init__(self, operand: bytes | bytearray, mode: BitwiseMode) -> None:
        self._operand = bytes(operand)
        self._mode = mode

    def transform(self, current: bytearray, in_place: bool) -> bytearray:
        if len(current) != len(self._operand):
            raise StateError(
                f"all byte arrays must be of same length doing bitwise {self._mode.value} "
                f"({len(current)} != {len(self._operand)})"
            )
        a = int.from_bytes(current, "big")
        b = int.from_bytes(self._operand, "big")
        if self._mode is BitwiseMode.AND:
            value = a & b
        elif self._mode is BitwiseMode.OR:
            value = a | b
        else:
            value = a ^ b
        out = _target(current, in_place)
        out[:] = value.to_bytes(len(current), "big")
        return out

    def supports_in_place(self) -> bool:
        return True


class NegateTransformer(Transformer):
    """Bitwise NOT of every byte."""

    def transform(self, current: bytearray, in_place: bool) -> bytearray:
        out = _target(current, in_place)
        out[:] = out.translate(_INVERT_TABLE)
        return out

    def supports_in_place(self) -> bool:
        return True


class ShiftDirection(Enum):
    LEFT = "left"
    RIGHT = "right"


class ShiftTransformer(Transformer):
    """Logical bit shift of the whole array, never growing or shrinking it.

    Bits pushed past either end are dropped and zeros are shifted in. The
    shift follows the logical value: for a LITTLE sequence a left shift
    moves bits towards the end of the storage.
    """

    def __init__(self, shift_count: int, direction: ShiftDirection,
                 order: ByteOrder = ByteOrder.BIG) -> None:
        check_non_negative(shift_count, "shift count")
        self._shift_count = shift_count
        self._direction = direction
        self._order = order

    def transform(self, current: bytearray, in_place: bool) -> bytearray:
        out = _target(current, in_place)
        if not out:
            return out
        value = int.from_bytes(out, self._order.value)
        if self._direction is ShiftDirection.LEFT:
            value = (value << self._shift_count) & ((1 << (8 * len(out))) - 1)
        else:
            value >>= self._shift_count
        out[:] = value.to_bytes(len(out), self._order.value)
        return out

    def supports_in_place(self) -> bool:
        return True


class BitSwitchTransformer(Transformer):
    """Set, clear or toggle one bit.

    Bit 0 is the least significant bit of the logical value, so its byte
    is the last one in storage for BIG and the first one for LITTLE.
    new_value None toggles the bit.
    """

    def __init__(self, position: int, new_value: Optional[bool] = None,
                 order: ByteOrder = ByteOrder.BIG) -> None:
        self._position = position
        self._new_value = new_value
        self._order = order

    def transform(self, current: bytearray, in_place: bool) -> bytearray:
        if self._position < 0 or self._position >= 8 * len(current):
            raise StateError(
                f"bit index {self._position} out of bounds for {8 * len(current)} bits"
            )
        byte_index = self._position // 8
        if self._order is ByteOrder.BIG:
            byte_index = len(current) - 1 - byte_index
        mask = 1 << (self._position % 8)

        out = _target(current, in_place)
        if self._new_value is None:
            out[byte_index] ^= mask
        elif self._new_value:
            out[byte_index] |= mask
        else:
            out[byte_index] &= ~mask & 0xFF
        return out

    def supports_in_place(self) -> bool:
        return True


# ============================================================================
# Layout: reverse, copy, resize, concatenation
# ============================================================================

class ReverseTransformer(Transformer):
    """Reverse the byte order of the storage (not the bits in each byte)."""

    def transform(self, current: bytearray, in_place: bool) -> bytearray:
        out = _target(current, in_place)
        out.reverse()
        return out

    def supports_in_place(self) -> bool:
        return True


class CopyTransformer(Transformer):
    """Copy `length` bytes starting at `offset` into a new array."""

    def __init__(self, offset: int, length: int) -> None:
        check_non_negative(offset, "offset")
        check_non_negative(length, "length")
        self._offset = offset
        self._length = length

    def transform(self, current: bytearray, in_place: bool) -> bytearray:
        end = self._offset + self._length
        if end > len(current):
            raise BoundsError(
                f"cannot copy [{self._offset}:{end}] from array of length {len(current)}"
            )
        return bytearray(current[self._offset:end])

    def supports_in_place(self) -> bool:
        return False


class ResizeMode(Enum):
    # [0,1,2,3] -> 3: [0,1,2]   -> 5: [0,1,2,3,0]
    KEEP_FROM_ZERO_INDEX = "zero_index"
    # [0,1,2,3] -> 3: [1,2,3]   -> 5: [0,0,1,2,3]
    KEEP_FROM_MAX_LENGTH = "max_length"


class ResizeTransformer(Transformer):
    """Truncate or zero-pad to a new length.

    The default keeps the least significant end of a big-endian number, so
    an 8 byte value resized to 4 bytes keeps the same 32 bit value.
    """

    def __init__(self, new_length: int,
                 mode: ResizeMode = ResizeMode.KEEP_FROM_MAX_LENGTH) -> None:
        check_non_negative(new_length, "new length")
        self._new_length = new_length
        self._mode = mode

    def transform(self, current: bytearray, in_place: bool) -> bytearray:
        size = self._new_length
        if size == 0:
            return bytearray()
        if self._mode is ResizeMode.KEEP_FROM_ZERO_INDEX:
            if size <= len(current):
                return bytearray(current[:size])
            return bytearray(current) + bytearray(size - len(current))
        if size <= len(current):
            return bytearray(current[len(current) - size:])
        return bytearray(size - len(current)) + bytearray(current)

    def supports_in_place(self) -> bool:
        return False


class ConcatTransformer(Transformer):
    """Append one or more arrays at the end."""

    def __init__(self, *parts: bytes | bytearray) -> None:
        self._suffix = b"".join(bytes(p) for p in parts)

    def transform(self, current: bytearray, in_place: bool) -> bytearray:
        return bytearray(current) + self._suffix

    def supports_in_place(self) -> bool:
        return False


# ============================================================================
# Ordering: sort and shuffle
# ============================================================================

class SortTransformer(Transformer):
    """Sort bytes, by default as unsigned values ascending.

    Only the natural ordering sorts in place; a key function always
    produces a new array.
    """

    def __init__(self, key: Optional[Callable[[int], Any]] = None, reverse: bool = False) -> None:
        self._key = key
        self._reverse = reverse

    def transform(self, current: bytearray, in_place: bool) -> bytearray:
        ordered = sorted(current, key=self._key, reverse=self._reverse)
        if self._key is None:
            out = _target(current, in_place)
            out[:] = bytes(ordered)
            return out
        return bytearray(ordered)

    def supports_in_place(self) -> bool:
        return self._key is None


class ShuffleTransformer(Transformer):
    """Fisher-Yates shuffle, by default with a cryptographically strong source."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else secrets.SystemRandom()

    def transform(self, current: bytearray, in_place: bool) -> bytearray:
        out = _target(current, in_place)
        self._rng.shuffle(out)
        return out

    def supports_in_place(self) -> bool:
        return True


# ============================================================================
# Adapters over collaborator services
# ============================================================================

class DigestTransformer(Transformer):
    """Replace the content with its message digest."""

    def __init__(self, algorithm: str = services.DEFAULT_DIGEST) -> None:
        self._algorithm = services.resolve_digest(algorithm)

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def transform(self, current: bytearray, in_place: bool) -> bytearray:
        return bytearray(services.digest(current, self._algorithm))

    def supports_in_place(self) -> bool:
        return False


class HmacTransformer(Transformer):
    """Replace the content with its HMAC under `key`."""

    def __init__(self, key: bytes | bytearray, algorithm: str = services.DEFAULT_DIGEST) -> None:
        self._key = bytes(key)
        self._algorithm = services.resolve_digest(algorithm)

    def transform(self, current: bytearray, in_place: bool) -> bytearray:
        return bytearray(services.hmac(current, self._key, self._algorithm))

    def supports_in_place(self) -> bool:
        return False


class ChecksumMode(Enum):
    APPEND = "append"
    TRANSFORM = "transform"


class ChecksumTransformer(Transformer):
    """Replace the content with its checksum, or append the checksum to it."""

    def __init__(self, algorithm: str = services.CRC32, mode: ChecksumMode = ChecksumMode.TRANSFORM,
                 width: int = services.CHECKSUM_WIDTH) -> None:
        services.resolve_checksum(algorithm, width)
        self._algorithm = algorithm
        self._mode = mode
        self._width = width

    def transform(self, current: bytearray, in_place: bool) -> bytearray:
        value = services.checksum(current, self._algorithm, self._width)
        if self._mode is ChecksumMode.TRANSFORM:
            return bytearray(value)
        return bytearray(current) + value

    def supports_in_place(self) -> bool:
        return False


class CompressionFormat(Enum):
    GZIP = "gzip"
    ZLIB = "zlib"


class CompressionTransformer(Transformer):

    def __init__(self, compress: bool, fmt: CompressionFormat = CompressionFormat.GZIP) -> None:
        self._compress = compress
        self._format = fmt

    def transform(self, current: bytearray, in_place: bool) -> bytearray:
        if self._format is CompressionFormat.GZIP:
            func = services.gzip_compress if self._compress else services.gzip_decompress
        else:
            func = services.deflate if self._compress else services.inflate
        return bytearray(func(current))

    def supports_in_place(self) -> bool:
        return False


# ============================================================================
# Factories
# ============================================================================

def shuffle(rng: Optional[random.Random] = None) -> Transformer:
    return ShuffleTransformer(rng)


def sort(key: Optional[Callable[[int], Any]] = None, reverse: bool = False) -> Transformer:
    return SortTransformer(key, reverse)


def checksum(algorithm: str = services.CRC32, mode: ChecksumMode = ChecksumMode.TRANSFORM,
             width: int = services.CHECKSUM_WIDTH) -> Transformer:
    return ChecksumTransformer(algorithm, mode, width)


def checksum_crc32() -> Transformer:
    return ChecksumTransformer(services.CRC32, ChecksumMode.TRANSFORM)


def checksum_append_crc32() -> Transformer:
    return ChecksumTransformer(services.CRC32, ChecksumMode.APPEND)


def compress_gzip() -> Transformer:
    return CompressionTransformer(True, CompressionFormat.GZIP)


def decompress_gzip() -> Transformer:
    return CompressionTransformer(False, CompressionFormat.GZIP)


def deflate() -> Transformer:
    return CompressionTransformer(True, CompressionFormat.ZLIB)


def inflate() -> Transformer:
    return CompressionTransformer(False, CompressionFormat.ZLIB)


def digest(algorithm: str = services.DEFAULT_DIGEST) -> Transformer:
    return DigestTransformer(algorithm)


def hmac(key: bytes | bytearray, algorithm: str = services.DEFAULT_DIGEST) -> Transformer:
    return HmacTransformer(key, algorithm)
