"""
binseq Base32 Encoding (RFC 4648)

Five bytes become eight characters of the RFC 4648 alphabet (A-Z, 2-7).
Each chunk is packed into a bit buffer and read back five bits at a time;
a short final chunk is padded with '=' up to eight characters.

Decoding ignores case and trailing padding.
"""

from __future__ import annotations

from binseq.alphabet import BASE32
from binseq.encoding import EncoderDecoder
from binseq.errors import FormatError

PADDING = "="
BITS_PER_CHAR = 5
BYTES_PER_CHUNK = 5
CHARS_PER_CHUNK = 8

# Symbol counts that a final chunk of 1..4 bytes produces
_VALID_TAIL_LENGTHS = frozenset({0, 2, 4, 5, 7})


class Base32Encoding(EncoderDecoder):

    def __init__(self, padding: bool = True) -> None:
        self._padding = padding

    @property
    def name(self) -> str:
        return "base32"

    @property
    def radix(self) -> int:
        return 32

    def _encode_big_endian(self, data: bytes | bytearray) -> str:
        out: list[str] = []
        for offset in range(0, len(data), BYTES_PER_CHUNK):
            chunk = data[offset:offset + BYTES_PER_CHUNK]
            buffer = int.from_bytes(chunk, "big") << (8 * (BYTES_PER_CHUNK - len(chunk)))
            char_count = -(-len(chunk) * 8 // BITS_PER_CHAR)
            for i in range(char_count):
                shift = (CHARS_PER_CHUNK - 1 - i) * BITS_PER_CHAR
                out.append(BASE32.encode((buffer >> shift) & 0x1F))
            if self._padding:
                out.append(PADDING * (CHARS_PER_CHUNK - char_count))
        return "".join(out)

    def _decode_big_endian(self, encoded: str) -> bytearray:
        trimmed = encoded.rstrip(PADDING)
        if len(trimmed) % CHARS_PER_CHUNK not in _VALID_TAIL_LENGTHS:
            raise FormatError(f"invalid base32 length {len(trimmed)}")
        values = [BASE32.decode(char, i) for i, char in enumerate(trimmed)]

        out = bytearray()
        for offset in range(0, len(values), CHARS_PER_CHUNK):
            chunk = values[offset:offset + CHARS_PER_CHUNK]
            buffer = 0
            for value in chunk:
                buffer = (buffer << BITS_PER_CHAR) | value
            buffer <<= BITS_PER_CHAR * (CHARS_PER_CHUNK - len(chunk))
            byte_count = len(chunk) * BITS_PER_CHAR // 8
            out += buffer.to_bytes(BYTES_PER_CHUNK, "big")[:byte_count]
        return out

    def __repr__(self) -> str:
        return f"<Encoding:{self.name} padding={self._padding}>"
