"""
binseq Binary-to-Text Encoding

An encoding renders a byte array as text and parses it back. Every
encoding honours the byte order tag the same way: a LITTLE sequence is
logically reversed before encoding, and decode(..., order=LITTLE) reverses
the decoded bytes, so

    enc.encode(x, BIG) == enc.encode(x[::-1], LITTLE)
    enc.decode(enc.encode(x, order), order) == x

Concrete encodings live in binseq.encodings. Subclasses implement
_encode_big_endian() and _decode_big_endian(); the public encode() and
decode() apply the byte order on top.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from binseq.order import ByteOrder, logical_view


class Encoder(ABC):
    """Encodes a byte array with a given byte order to a string."""

    @abstractmethod
    def encode(self, data: bytes | bytearray, order: ByteOrder = ByteOrder.BIG) -> str:
        ...


class Decoder(ABC):
    """Decodes an encoded string back to a byte array."""

    @abstractmethod
    def decode(self, encoded: str, order: ByteOrder = ByteOrder.BIG) -> bytearray:
        ...


class EncoderDecoder(Encoder, Decoder):
    """Base for encodings that work in both directions.

    Subclasses implement:
        - name: Human-readable identifier
        - _encode_big_endian(): bytes (most significant first) to text
        - _decode_big_endian(): text to bytes (most significant first)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    def radix(self) -> Optional[int]:
        """Number of digit symbols, if the encoding is positional."""
        return None

    @abstractmethod
    def _encode_big_endian(self, data: bytes | bytearray) -> str:
        ...

    @abstractmethod
    def _decode_big_endian(self, encoded: str) -> bytearray:
        ...

    def encode(self, data: bytes | bytearray, order: ByteOrder = ByteOrder.BIG) -> str:
        return self._encode_big_endian(logical_view(data, ByteOrder.coerce(order)))

    def decode(self, encoded: str, order: ByteOrder = ByteOrder.BIG) -> bytearray:
        if not isinstance(encoded, str):
            raise TypeError(f"encoded input must be str, got {type(encoded).__name__}")
        decoded = self._decode_big_endian(encoded)
        if ByteOrder.coerce(order) is ByteOrder.LITTLE:
            decoded.reverse()
        return decoded

    def __repr__(self) -> str:
        return f"<Encoding:{self.name}>"

