"""
binseq Radix Encoding

Positional-notation encoding in any base 2..36 (digits 0-9 then a-z),
built on the byte-magnitude long division in binseq.magnitude.

A plain number encoding would lose leading zero bytes, since the
magnitude of b"\\x00\\x01" equals that of b"\\x01". Here every leading zero
byte is written as one zero digit in front of the digits of the remaining
magnitude. The remaining magnitude starts with a non-zero byte, so its
first digit is non-zero and decode can count the leading zero digits back
into zero bytes:

    RadixEncoding(36).encode(b"\\x00\\x00\\x00\\x00") == "0000"
    RadixEncoding(16).encode(b"\\x00\\x0f") == "0f"
"""

from __future__ import annotations

from binseq import alphabet, magnitude
from binseq.encoding import EncoderDecoder


class RadixEncoding(EncoderDecoder):

    def __init__(self, radix: int, upper_case: bool = False) -> None:
        self._alphabet = alphabet.for_radix(radix, upper_case)
        self._radix = radix

    @property
    def name(self) -> str:
        return f"base{self._radix}"

    @property
    def radix(self) -> int:
        return self._radix

    @property
    def alphabet(self) -> alphabet.Alphabet:
        return self._alphabet

    def _encode_big_endian(self, data: bytes | bytearray) -> str:
        zeros = magnitude.count_leading_zeros(data)
        digits = magnitude.to_digits(data[zeros:], self._radix)
        zero_char = self._alphabet.encode(0)
        return zero_char * zeros + "".join(self._alphabet.encode(d) for d in digits)

    def _decode_big_endian(self, encoded: str) -> bytearray:
        values = [self._alphabet.decode(char, i) for i, char in enumerate(encoded)]
        zeros = 0
        while zeros < len(values) and values[zeros] == 0:
            zeros += 1
        return bytearray(zeros) + magnitude.from_digits(values[zeros:], self._radix)

    def __repr__(self) -> str:
        return f"<Encoding:{self.name} alphabet={self._alphabet.symbols!r}>"
