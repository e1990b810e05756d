"""
binseq Byte Order

The byte order tag of a sequence is a logical interpretation flag. It
decides how numeric views, codecs, shifts and bit indexes read the
storage; it never reorders the storage itself.
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class ByteOrder(Enum):
    BIG = "big"
    LITTLE = "little"

    @property
    def struct_prefix(self) -> str:
        """Format prefix for the struct module."""
        return ">" if self is ByteOrder.BIG else "<"

    @property
    def kaitai_suffix(self) -> str:
        """Suffix of the matching KaitaiStream read_* methods."""
        return "be" if self is ByteOrder.BIG else "le"

    @classmethod
    def coerce(cls, value: Union[ByteOrder, str, None]) -> ByteOrder:
        """Accept a ByteOrder, 'big'/'little', or None for the default."""
        if value is None:
            return DEFAULT_ORDER
        if isinstance(value, ByteOrder):
            return value
        return cls(str(value).lower())

    def __repr__(self) -> str:
        return f"ByteOrder.{self.name}"


DEFAULT_ORDER = ByteOrder.BIG


def logical_view(data: bytes | bytearray, order: ByteOrder) -> bytes | bytearray:
    """The bytes as a big-endian reader sees them: reversed for LITTLE."""
    if order is ByteOrder.LITTLE:
        return data[::-1]
    return data
