"""
binseq Base64 Encoding (RFC 4648)

Three bytes become four characters through a 64-entry lookup table. The
encoder writes either the standard (+/) or URL-safe (-_) alphabet, with or
without '=' padding. The decoder is lenient where RFC 4648 allows it to be:

- standard and URL-safe symbols may be mixed freely
- ASCII whitespace anywhere in the input is skipped
- trailing '=' padding is optional and may be longer than needed

It is strict everywhere else: an unknown character, '=' before the end,
or a dangling single character is a FormatError.
"""

from __future__ import annotations

from binseq.alphabet import BASE64, BASE64_URL
from binseq.encoding import EncoderDecoder
from binseq.errors import FormatError

PADDING = "="
_WHITESPACE = frozenset(" \t\r\n\f\v")

# Both alphabets share values 0..61; '+'/'-' are 62 and '/'/'_' are 63
_DECODE_TABLE: dict[str, int] = {c: i for i, c in enumerate(BASE64.symbols)}
_DECODE_TABLE.update({c: i for i, c in enumerate(BASE64_URL.symbols)})


class Base64Encoding(EncoderDecoder):

    def __init__(self, url_safe: bool = False, padding: bool = True) -> None:
        self._url_safe = url_safe
        self._padding = padding

    @property
    def name(self) -> str:
        return "base64url" if self._url_safe else "base64"

    @property
    def radix(self) -> int:
        return 64

    @property
    def url_safe(self) -> bool:
        return self._url_safe

    @property
    def padding(self) -> bool:
        return self._padding

    def _encode_big_endian(self, data: bytes | bytearray) -> str:
        symbols = (BASE64_URL if self._url_safe else BASE64).symbols
        out: list[str] = []
        full = len(data) - len(data) % 3
        for i in range(0, full, 3):
            chunk = (data[i] << 16) | (data[i + 1] << 8) | data[i + 2]
            out.append(symbols[chunk >> 18])
            out.append(symbols[(chunk >> 12) & 0x3F])
            out.append(symbols[(chunk >> 6) & 0x3F])
            out.append(symbols[chunk & 0x3F])

        remaining = len(data) - full
        if remaining == 1:
            chunk = data[full] << 16
            out.append(symbols[chunk >> 18])
            out.append(symbols[(chunk >> 12) & 0x3F])
            if self._padding:
                out.append(PADDING * 2)
        elif remaining == 2:
            chunk = (data[full] << 16) | (data[full + 1] << 8)
            out.append(symbols[chunk >> 18])
            out.append(symbols[(chunk >> 12) & 0x3F])
            out.append(symbols[(chunk >> 6) & 0x3F])
            if self._padding:
                out.append(PADDING)
        return "".join(out)

    def _decode_big_endian(self, encoded: str) -> bytearray:
        values: list[int] = []
        padding_seen = False
        for i, char in enumerate(encoded):
            if char in _WHITESPACE:
                continue
            if char == PADDING:
                padding_seen = True
                continue
            if padding_seen:
                raise FormatError("base64 data after '=' padding", i)
            try:
                values.append(_DECODE_TABLE[char])
            except KeyError:
                raise FormatError(f"character {char!r} is not base64", i) from None

        if len(values) % 4 == 1:
            raise FormatError(
                f"invalid base64 length: {len(values)} symbols leave a dangling 6 bits"
            )

        out = bytearray()
        full = len(values) - len(values) % 4
        for i in range(0, full, 4):
            chunk = (values[i] << 18) | (values[i + 1] << 12) | (values[i + 2] << 6) | values[i + 3]
            out.append(chunk >> 16)
            out.append((chunk >> 8) & 0xFF)
            out.append(chunk & 0xFF)

        remaining = len(values) - full
        if remaining == 2:
            chunk = (values[full] << 18) | (values[full + 1] << 12)
            out.append(chunk >> 16)
        elif remaining == 3:
            chunk = (values[full] << 18) | (values[full + 1] << 12) | (values[full + 2] << 6)
            out.append(chunk >> 16)
            out.append((chunk >> 8) & 0xFF)
        return out

    def __repr__(self) -> str:
        return f"<Encoding:{self.name} padding={self._padding}>"
