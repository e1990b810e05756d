"""
binseq Hex Encoding (base16)

Two characters per byte through nibble lookup tables; no big-number
arithmetic. Decoding is case-insensitive, accepts an optional "0x"
prefix and rejects odd-length input.
"""

from __future__ import annotations

from binseq.alphabet import HEX, HEX_LOWER
from binseq.encoding import EncoderDecoder
from binseq.errors import FormatError

_BYTE_TO_LOWER = tuple(HEX_LOWER[b >> 4] + HEX_LOWER[b & 0xF] for b in range(256))
_BYTE_TO_UPPER = tuple(s.upper() for s in _BYTE_TO_LOWER)


class HexEncoding(EncoderDecoder):

    def __init__(self, upper_case: bool = False) -> None:
        self._upper_case = upper_case

    @property
    def name(self) -> str:
        return "hex"

    @property
    def radix(self) -> int:
        return 16

    @property
    def upper_case(self) -> bool:
        return self._upper_case

    def _encode_big_endian(self, data: bytes | bytearray) -> str:
        table = _BYTE_TO_UPPER if self._upper_case else _BYTE_TO_LOWER
        return "".join(table[b] for b in data)

    def _decode_big_endian(self, encoded: str) -> bytearray:
        start = 2 if encoded[:2] in ("0x", "0X") else 0
        if (len(encoded) - start) % 2 != 0:
            raise FormatError(
                f"invalid hex string of length {len(encoded) - start}, must be even"
            )
        out = bytearray((len(encoded) - start) // 2)
        for i in range(start, len(encoded), 2):
            high = HEX.decode(encoded[i], i)
            low = HEX.decode(encoded[i + 1], i + 1)
            out[(i - start) // 2] = (high << 4) | low
        return out

    def __repr__(self) -> str:
        case = "upper" if self._upper_case else "lower"
        return f"<Encoding:hex case={case}>"
