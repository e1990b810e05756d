"""
binseq Core: The Byte Sequence

Bytes is a fixed-length sequence of 8-bit values plus a byte order tag.
The tag is an interpretation flag: numeric views, codecs, shifts and bit
indexes read the storage through it, but it never reorders the storage.

Three concrete variants (binseq.variants) decide what a transform does
to the receiver:

- MutableBytes:   in-place-capable transformers write into the storage
                  and the call returns self
- ImmutableBytes: every transform allocates, the receiver never changes
- ReadOnlyBytes:  aliases caller storage, every transform allocates,
                  array() and all self-mutation are CapabilityErrors

Whatever the transformer, applying it to a sequence of variant V gives a
sequence of variant V. Moving between variants is explicit:
to_immutable(), to_mutable(), to_read_only().

Usage:
    import binseq

    key = binseq.random(16)
    digest = key.append(binseq.parse_hex("cafe")).hash_sha256()
    digest.encode_base64()
"""

from __future__ import annotations

import hmac as _hmac
import io
import math
import random as _random
import struct
import uuid
from abc import ABC, abstractmethod
from collections import Counter
from pathlib import Path
from typing import TYPE_CHECKING, Any, BinaryIO, Callable, Iterable, Iterator, Optional, Union

from kaitaistruct import KaitaiStream

from binseq import services, transformers
from binseq.encoding import Decoder, Encoder
from binseq.errors import (
    BoundsError,
    CapabilityError,
    StateError,
    check_exact_length,
    check_index,
    check_mod_length,
    check_non_negative,
)
from binseq.order import DEFAULT_ORDER, ByteOrder
from binseq.transformers import (
    BitwiseMode,
    BitwiseTransformer,
    ResizeMode,
    ShiftDirection,
    Transformer,
)
from binseq.validators import ValidatorLike, not_only_of

if TYPE_CHECKING:
    from binseq.variants import ImmutableBytes, MutableBytes, ReadOnlyBytes

BytesLike = Union[bytes, bytearray, memoryview, "Bytes", Iterable[int]]
OrderLike = Union[ByteOrder, str, None]

DEFAULT_HEX_UPPER = False

_PREVIEW = 4


def _as_buffer(data: BytesLike) -> bytes | bytearray:
    """A bytes-like view of any accepted input, without copying where possible."""
    if isinstance(data, Bytes):
        return data._internal_array()
    if isinstance(data, (bytes, bytearray)):
        return data
    if isinstance(data, memoryview):
        return data.tobytes()
    values = list(data)
    for i, v in enumerate(values):
        if not -128 <= v <= 255:
            raise BoundsError(f"value {v} at index {i} does not fit in a byte")
    # signed values (-128..-1) are accepted the same as their unsigned form
    return bytes(v & 0xFF for v in values)


def _pack_int(value: int, width: int, order: ByteOrder) -> bytearray:
    bits = 8 * width
    if not -(1 << (bits - 1)) <= value < (1 << bits):
        raise BoundsError(f"value {value} does not fit in {width} bytes")
    return bytearray((value & ((1 << bits) - 1)).to_bytes(width, order.value))


class Bytes(ABC):
    """Abstract byte sequence. Use a variant, or the binseq module functions.

    Attributes:
        order: Byte order tag used by numeric views and codecs
    """

    def __init__(self, data: BytesLike, order: OrderLike = None) -> None:
        # a caller's bytearray is aliased, anything else is copied
        if isinstance(data, bytearray):
            self._storage = data
        else:
            self._storage = bytearray(_as_buffer(data))
        self._order = ByteOrder.coerce(order)

    @classmethod
    def _variant(cls) -> type:
        if cls is Bytes:
            from binseq.variants import MutableBytes
            return MutableBytes
        return cls

    @classmethod
    def _adopt(cls, storage: bytearray, order: ByteOrder) -> Any:
        """Wrap a buffer the library owns, bypassing the variant's copy policy."""
        obj = object.__new__(cls._variant())
        obj._storage = storage
        obj._order = order
        return obj

    # ========================================================================
    # Variant hooks
    # ========================================================================

    @abstractmethod
    def _transforms_in_place(self) -> bool:
        """Whether in-place-capable transformers may write into the storage."""

    @abstractmethod
    def array(self) -> bytearray:
        """The storage, as far as the variant allows exposing it."""

    def _internal_array(self) -> bytearray:
        """Raw storage reference for trusted in-library callers only."""
        return self._storage

    @property
    def is_mutable(self) -> bool:
        return False

    @property
    def is_read_only(self) -> bool:
        return False

    # ========================================================================
    # Constructors
    # ========================================================================

    @classmethod
    def wrap(cls, data: BytesLike, order: OrderLike = None) -> Any:
        """Wrap without copying where the variant allows it.

        A bytearray is aliased by Mutable and ReadOnly sequences; bytes
        objects and other sequences are always copied.
        """
        if isinstance(data, Bytes):
            return cls._variant()(bytearray(data._internal_array()), order or data.order)
        return cls._variant()(data, order)

    @classmethod
    def of(cls, data: BytesLike, order: OrderLike = None) -> Any:
        """Copy the given bytes into a new sequence."""
        return cls._adopt(bytearray(_as_buffer(data)), ByteOrder.coerce(order))

    @classmethod
    def allocate(cls, length: int, fill: int = 0, order: OrderLike = None) -> Any:
        check_non_negative(length, "length")
        return cls._adopt(bytearray([fill & 0xFF]) * length, ByteOrder.coerce(order))

    @classmethod
    def empty(cls, order: OrderLike = None) -> Any:
        return cls._adopt(bytearray(), ByteOrder.coerce(order))

    @classmethod
    def concat(cls, *parts: BytesLike) -> Any:
        return cls._adopt(bytearray(b"".join(bytes(_as_buffer(p)) for p in parts)), DEFAULT_ORDER)

    @classmethod
    def from_bool(cls, value: bool) -> Any:
        return cls._adopt(bytearray([1 if value else 0]), DEFAULT_ORDER)

    @classmethod
    def from_byte(cls, value: int) -> Any:
        return cls._adopt(_pack_int(value, 1, DEFAULT_ORDER), DEFAULT_ORDER)

    @classmethod
    def from_char(cls, value: str, order: OrderLike = None) -> Any:
        """A single UTF-16 code unit in two bytes."""
        if len(value) != 1 or ord(value) > 0xFFFF:
            raise BoundsError(f"{value!r} is not a single 16 bit character")
        order = ByteOrder.coerce(order)
        return cls._adopt(_pack_int(ord(value), 2, order), order)

    @classmethod
    def from_short(cls, value: int, order: OrderLike = None) -> Any:
        order = ByteOrder.coerce(order)
        return cls._adopt(_pack_int(value, 2, order), order)

    @classmethod
    def from_int(cls, value: int, order: OrderLike = None) -> Any:
        order = ByteOrder.coerce(order)
        return cls._adopt(_pack_int(value, 4, order), order)

    @classmethod
    def from_long(cls, value: int, order: OrderLike = None) -> Any:
        order = ByteOrder.coerce(order)
        return cls._adopt(_pack_int(value, 8, order), order)

    @classmethod
    def from_float(cls, value: float, order: OrderLike = None) -> Any:
        order = ByteOrder.coerce(order)
        return cls._adopt(bytearray(struct.pack(order.struct_prefix + "f", value)), order)

    @classmethod
    def from_double(cls, value: float, order: OrderLike = None) -> Any:
        order = ByteOrder.coerce(order)
        return cls._adopt(bytearray(struct.pack(order.struct_prefix + "d", value)), order)

    @classmethod
    def from_big_integer(cls, value: int, order: OrderLike = None) -> Any:
        """Minimal two's complement representation, always at least one byte."""
        order = ByteOrder.coerce(order)
        bits = value.bit_length() if value >= 0 else (~value).bit_length()
        length = bits // 8 + 1
        return cls._adopt(bytearray(value.to_bytes(length, order.value, signed=True)), order)

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> Any:
        return cls._adopt(bytearray(value.bytes), DEFAULT_ORDER)

    @classmethod
    def from_ints(cls, *values: int, order: OrderLike = None) -> Any:
        order = ByteOrder.coerce(order)
        out = bytearray()
        for v in values:
            out += _pack_int(v, 4, order)
        return cls._adopt(out, order)

    @classmethod
    def from_longs(cls, *values: int, order: OrderLike = None) -> Any:
        order = ByteOrder.coerce(order)
        out = bytearray()
        for v in values:
            out += _pack_int(v, 8, order)
        return cls._adopt(out, order)

    @classmethod
    def from_text(cls, text: str, encoding: str = "utf-8", normalization: Optional[str] = None) -> Any:
        return cls._adopt(bytearray(services.encode_text(text, encoding, normalization)), DEFAULT_ORDER)

    @classmethod
    def from_stream(cls, stream: BinaryIO, max_length: Optional[int] = None) -> Any:
        return cls._adopt(bytearray(services.read_stream(stream, max_length)), DEFAULT_ORDER)

    @classmethod
    def from_file(cls, path: Union[str, Path], offset: int = 0, length: Optional[int] = None) -> Any:
        return cls._adopt(bytearray(services.read_file(path, offset, length)), DEFAULT_ORDER)

    @classmethod
    def random(cls, length: int, rng: Optional[_random.Random] = None) -> Any:
        """Cryptographically strong random bytes, unless an explicit rng is given."""
        check_non_negative(length, "length")
        return cls._adopt(services.fill_random(bytearray(length), rng), DEFAULT_ORDER)

    @classmethod
    def pseudo_random(cls, length: int, seed: Optional[int] = None) -> Any:
        check_non_negative(length, "length")
        return cls._adopt(services.fill_pseudo_random(bytearray(length), seed), DEFAULT_ORDER)

    @classmethod
    def parse(cls, text: str, decoder: Decoder, order: OrderLike = None) -> Any:
        order = ByteOrder.coerce(order)
        return cls._adopt(decoder.decode(text, order), order)

    @classmethod
    def parse_hex(cls, text: str, order: OrderLike = None) -> Any:
        from binseq.encodings import HexEncoding
        return cls.parse(text, HexEncoding(), order)

    @classmethod
    def parse_base32(cls, text: str, order: OrderLike = None) -> Any:
        from binseq.encodings import Base32Encoding
        return cls.parse(text, Base32Encoding(), order)

    @classmethod
    def parse_base64(cls, text: str, order: OrderLike = None) -> Any:
        """Standard and URL-safe Base64 are both accepted."""
        from binseq.encodings import Base64Encoding
        return cls.parse(text, Base64Encoding(), order)

    @classmethod
    def parse_radix(cls, text: str, radix: int, order: OrderLike = None) -> Any:
        from binseq.encodings import for_radix
        return cls.parse(text, for_radix(radix), order)

    @classmethod
    def parse_binary(cls, text: str, order: OrderLike = None) -> Any:
        return cls.parse_radix(text, 2, order)

    @classmethod
    def parse_octal(cls, text: str, order: OrderLike = None) -> Any:
        return cls.parse_radix(text, 8, order)

    @classmethod
    def parse_dec(cls, text: str, order: OrderLike = None) -> Any:
        return cls.parse_radix(text, 10, order)

    # ========================================================================
    # Transform dispatch
    # ========================================================================

    def transform(self, transformer: Transformer) -> Any:
        """Apply a transformer under this variant's mutation discipline.

        The variant, not the transformer, decides whether the storage may
        be written. A result that still aliases the storage after a
        copying call is copied before it is wrapped.
        """
        in_place = self._transforms_in_place() and transformer.supports_in_place()
        result = transformer.transform(self._storage, in_place)
        if in_place and result is self._storage:
            return self
        if result is self._storage:
            result = bytearray(result)
        return type(self)._adopt(result, self._order)

    def append(self, *others: BytesLike) -> Any:
        return self.transform(transformers.ConcatTransformer(*(_as_buffer(o) for o in others)))

    def append_text(self, text: str, encoding: str = "utf-8") -> Any:
        return self.append(services.encode_text(text, encoding))

    def xor(self, other: BytesLike) -> Any:
        return self.transform(BitwiseTransformer(_as_buffer(other), BitwiseMode.XOR))

    def and_(self, other: BytesLike) -> Any:
        return self.transform(BitwiseTransformer(_as_buffer(other), BitwiseMode.AND))

    def or_(self, other: BytesLike) -> Any:
        return self.transform(BitwiseTransformer(_as_buffer(other), BitwiseMode.OR))

    def not_(self) -> Any:
        return self.transform(transformers.NegateTransformer())

    def left_shift(self, shift_count: int) -> Any:
        return self.transform(transformers.ShiftTransformer(shift_count, ShiftDirection.LEFT, self._order))

    def right_shift(self, shift_count: int) -> Any:
        return self.transform(transformers.ShiftTransformer(shift_count, ShiftDirection.RIGHT, self._order))

    def switch_bit(self, position: int, value: Optional[bool] = None) -> Any:
        """Set (True), clear (False) or toggle (None) bit `position`, 0 being the LSB."""
        return self.transform(transformers.BitSwitchTransformer(position, value, self._order))

    def copy(self, offset: int = 0, length: Optional[int] = None) -> Any:
        if length is None:
            check_non_negative(offset, "offset")
            length = max(len(self._storage) - offset, 0)
        return self.transform(transformers.CopyTransformer(offset, length))

    def reverse(self) -> Any:
        return self.transform(transformers.ReverseTransformer())

    def resize(self, length: int, mode: ResizeMode = ResizeMode.KEEP_FROM_MAX_LENGTH) -> Any:
        return self.transform(transformers.ResizeTransformer(length, mode))

    def sort(self, key: Optional[Callable[[int], Any]] = None, reverse: bool = False) -> Any:
        return self.transform(transformers.sort(key, reverse))

    def shuffle(self, rng: Optional[_random.Random] = None) -> Any:
        return self.transform(transformers.shuffle(rng))

    def hash(self, algorithm: str = services.DEFAULT_DIGEST) -> Any:
        """Message digest of the content as a new sequence."""
        return self.transform(transformers.digest(algorithm))

    def hash_md5(self) -> Any:
        return self.hash(services.MD5)

    def hash_sha1(self) -> Any:
        return self.hash(services.SHA1)

    def hash_sha256(self) -> Any:
        return self.hash(services.SHA256)

    def hmac(self, key: BytesLike, algorithm: str = services.DEFAULT_DIGEST) -> Any:
        return self.transform(transformers.hmac(_as_buffer(key), algorithm))

    # ========================================================================
    # Variant conversion
    # ========================================================================

    def to_immutable(self) -> ImmutableBytes:
        from binseq.variants import ImmutableBytes
        return ImmutableBytes._adopt(bytearray(self._storage), self._order)

    def to_mutable(self) -> MutableBytes:
        from binseq.variants import MutableBytes
        return MutableBytes._adopt(bytearray(self._storage), self._order)

    def to_read_only(self) -> ReadOnlyBytes:
        from binseq.variants import ReadOnlyBytes
        return ReadOnlyBytes._adopt(self._storage, self._order)

    def duplicate(self) -> Any:
        """Same variant and storage, new instance."""
        return type(self)._adopt(self._storage, self._order)

    def with_order(self, order: OrderLike) -> Any:
        """Same variant and storage, different byte order tag."""
        return type(self)._adopt(self._storage, ByteOrder.coerce(order))

    # ========================================================================
    # Mutation (MutableBytes only)
    # ========================================================================

    def _unsupported(self, operation: str) -> CapabilityError:
        return CapabilityError(operation, type(self).__name__)

    def wipe(self) -> Any:
        raise self._unsupported("wipe")

    def fill(self, value: int) -> Any:
        raise self._unsupported("fill")

    def secure_wipe(self, rng: Optional[_random.Random] = None) -> Any:
        raise self._unsupported("secure_wipe")

    def overwrite(self, data: BytesLike, offset: int = 0) -> Any:
        raise self._unsupported("overwrite")

    def set_byte_at(self, index: int, value: int) -> Any:
        raise self._unsupported("set_byte_at")

    def __enter__(self) -> Any:
        raise self._unsupported("auto-wipe")

    def __exit__(self, *exc_info: Any) -> bool:
        raise self._unsupported("auto-wipe")

    # ========================================================================
    # Properties and queries
    # ========================================================================

    @property
    def order(self) -> ByteOrder:
        return self._order

    @property
    def length(self) -> int:
        return len(self._storage)

    @property
    def length_bit(self) -> int:
        return 8 * len(self._storage)

    @property
    def is_empty(self) -> bool:
        return not self._storage

    def _pattern(self, target: Union[int, BytesLike]) -> bytes | bytearray:
        if isinstance(target, int):
            return bytes([target & 0xFF])
        return _as_buffer(target)

    def contains(self, target: Union[int, BytesLike]) -> bool:
        return self.index_of(target) >= 0

    def index_of(self, target: Union[int, BytesLike], from_index: int = 0) -> int:
        """First index of a byte or subsequence at or after from_index, -1 if absent."""
        return self._storage.find(self._pattern(target), from_index)

    def last_index_of(self, target: Union[int, BytesLike]) -> int:
        return self._storage.rfind(self._pattern(target))

    def starts_with(self, prefix: BytesLike) -> bool:
        return self._storage.startswith(_as_buffer(prefix))

    def ends_with(self, suffix: BytesLike) -> bool:
        return self._storage.endswith(_as_buffer(suffix))

    def count(self, target: Union[int, BytesLike]) -> int:
        """Occurrences of a byte, or overlapping occurrences of a pattern."""
        pattern = self._pattern(target)
        if not pattern:
            return 0
        found = 0
        index = self._storage.find(pattern)
        while index >= 0:
            found += 1
            index = self._storage.find(pattern, index + 1)
        return found

    def entropy(self) -> float:
        """Shannon entropy of the byte distribution in bits per byte (0..8)."""
        total = len(self._storage)
        if total == 0:
            return 0.0
        result = 0.0
        for occurrences in Counter(self._storage).values():
            p = occurrences / total
            result -= p * math.log2(p)
        return result

    def validate(self, *validators: ValidatorLike) -> bool:
        """True if every validator accepts the content."""
        snapshot = bytes(self._storage)
        return all(v(snapshot) for v in validators)

    def validate_not_only_zeros(self) -> bool:
        return self.validate(not_only_of(0))

    # ========================================================================
    # Numeric views
    # ========================================================================

    def _stream(self, index: int = 0) -> KaitaiStream:
        stream = KaitaiStream(io.BytesIO(bytes(self._storage)))
        stream.seek(index)
        return stream

    def _read(self, stream: KaitaiStream, kind: str) -> Any:
        # single byte reads carry no endianness suffix
        if kind in ("s1", "u1"):
            return getattr(stream, f"read_{kind}")()
        return getattr(stream, f"read_{kind}{self._order.kaitai_suffix}")()

    def _read_exact(self, kind: str, width: int, type_name: str) -> Any:
        check_exact_length(len(self._storage), width, type_name)
        return self._read(self._stream(), kind)

    def _read_at(self, index: int, kind: str, width: int, type_name: str) -> Any:
        check_index(len(self._storage), index, width, type_name)
        return self._read(self._stream(index), kind)

    def _read_array(self, kind: str, width: int, type_name: str) -> list:
        check_mod_length(len(self._storage), width, f"{type_name} array")
        stream = self._stream()
        return [self._read(stream, kind) for _ in range(len(self._storage) // width)]

    def to_byte(self) -> int:
        return self._read_exact("s1", 1, "byte")

    def to_unsigned_byte(self) -> int:
        return self._read_exact("u1", 1, "unsigned byte")

    def to_char(self) -> str:
        return chr(self._read_exact("u2", 2, "char"))

    def to_short(self) -> int:
        return self._read_exact("s2", 2, "short")

    def to_int(self) -> int:
        return self._read_exact("s4", 4, "int")

    def to_long(self) -> int:
        return self._read_exact("s8", 8, "long")

    def to_float(self) -> float:
        return self._read_exact("f4", 4, "float")

    def to_double(self) -> float:
        return self._read_exact("f8", 8, "double")

    def to_big_integer(self) -> int:
        """Signed two's complement value of any length; 0 for the empty sequence."""
        return int.from_bytes(self._storage, self._order.value, signed=True)

    def to_uuid(self) -> uuid.UUID:
        check_exact_length(len(self._storage), 16, "UUID")
        data = bytes(self._storage)
        if self._order is ByteOrder.LITTLE:
            data = data[::-1]
        return uuid.UUID(bytes=data)

    def to_short_array(self) -> list[int]:
        return self._read_array("s2", 2, "short")

    def to_int_array(self) -> list[int]:
        return self._read_array("s4", 4, "int")

    def to_long_array(self) -> list[int]:
        return self._read_array("s8", 8, "long")

    def to_float_array(self) -> list[float]:
        return self._read_array("f4", 4, "float")

    def to_double_array(self) -> list[float]:
        return self._read_array("f8", 8, "double")

    def bit_at(self, position: int) -> bool:
        """Bit `position` of the logical value, 0 being the least significant."""
        if position < 0 or position >= 8 * len(self._storage):
            raise StateError(
                f"bit index {position} out of bounds for {8 * len(self._storage)} bits"
            )
        byte_index = position // 8
        if self._order is ByteOrder.BIG:
            byte_index = len(self._storage) - 1 - byte_index
        return bool(self._storage[byte_index] >> (position % 8) & 1)

    def byte_at(self, index: int) -> int:
        return self._read_at(index, "s1", 1, "byte")

    def unsigned_byte_at(self, index: int) -> int:
        return self._read_at(index, "u1", 1, "unsigned byte")

    def char_at(self, index: int) -> str:
        return chr(self._read_at(index, "u2", 2, "char"))

    def short_at(self, index: int) -> int:
        return self._read_at(index, "s2", 2, "short")

    def int_at(self, index: int) -> int:
        return self._read_at(index, "s4", 4, "int")

    def long_at(self, index: int) -> int:
        return self._read_at(index, "s8", 8, "long")

    # ========================================================================
    # Encoders and views
    # ========================================================================

    def encode(self, encoder: Encoder) -> str:
        return encoder.encode(self._storage, self._order)

    def encode_hex(self, upper: bool = DEFAULT_HEX_UPPER) -> str:
        from binseq.encodings import HexEncoding
        return self.encode(HexEncoding(upper))

    def encode_base32(self, padding: bool = True) -> str:
        from binseq.encodings import Base32Encoding
        return self.encode(Base32Encoding(padding))

    def encode_base64(self, url_safe: bool = False, padding: bool = True) -> str:
        from binseq.encodings import Base64Encoding
        return self.encode(Base64Encoding(url_safe, padding))

    def encode_base64_url(self) -> str:
        return self.encode_base64(url_safe=True)

    def encode_radix(self, radix: int) -> str:
        from binseq.encodings import for_radix
        return self.encode(for_radix(radix))

    def encode_binary(self) -> str:
        return self.encode_radix(2)

    def encode_octal(self) -> str:
        return self.encode_radix(8)

    def encode_dec(self) -> str:
        return self.encode_radix(10)

    def encode_text(self, encoding: str = "utf-8") -> str:
        """Decode the content as text in the given codec."""
        return services.decode_text(self._storage, encoding)

    def to_bytes(self) -> bytes:
        return bytes(self._storage)

    def view(self) -> memoryview:
        """Read-only memoryview over the live storage."""
        return memoryview(self._storage).toreadonly()

    def stream(self) -> io.BytesIO:
        """Binary stream over a copy of the content."""
        return io.BytesIO(bytes(self._storage))

    def to_list(self) -> list[int]:
        return list(self._storage)

    # ========================================================================
    # Equality and ordering
    # ========================================================================

    def equals_content(self, other: Bytes) -> bool:
        """Content equality, ignoring byte order and variant."""
        return self._storage == other._internal_array()

    def equals_bytes(self, other: BytesLike) -> bool:
        return self._storage == _as_buffer(other)

    def equals_constant_time(self, other: BytesLike) -> bool:
        """Content equality in time independent of where the first difference is."""
        return _hmac.compare_digest(bytes(self._storage), bytes(_as_buffer(other)))

    def compare_to(self, other: BytesLike) -> int:
        """Unsigned lexicographic comparison; a proper prefix is smaller."""
        a = bytes(self._storage)
        b = bytes(_as_buffer(other))
        return (a > b) - (a < b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bytes):
            return NotImplemented
        return self._order is other._order and self._storage == other._storage

    def __hash__(self) -> int:
        return hash((bytes(self._storage), self._order))

    def __lt__(self, other: Bytes) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: Bytes) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: Bytes) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: Bytes) -> bool:
        return self.compare_to(other) >= 0

    # ========================================================================
    # Sequence protocol
    # ========================================================================

    def __len__(self) -> int:
        return len(self._storage)

    def __iter__(self) -> Iterator[int]:
        return iter(bytes(self._storage))

    def __getitem__(self, index: Union[int, slice]) -> Any:
        """Unsigned byte for an int index; a copied sequence of the same variant for a slice."""
        if isinstance(index, slice):
            return type(self)._adopt(bytearray(self._storage[index]), self._order)
        return self._storage[index]

    def __bytes__(self) -> bytes:
        return bytes(self._storage)

    def __repr__(self) -> str:
        data = bytes(self._storage)
        if len(data) > 2 * _PREVIEW:
            preview = f"0x{data[:_PREVIEW].hex()}...{data[-_PREVIEW:].hex()}"
        elif data:
            preview = f"0x{data.hex()}"
        else:
            preview = ""
        body = f"{len(data)} bytes" + (f" ({preview})" if preview else "")
        return f"<{type(self).__name__}: {body} {self._order.value}>"
