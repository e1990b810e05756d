"""
binseq Built-in Encodings

Each encoding maps byte arrays to text and back, honouring the byte
order tag of the sequence.
"""

from binseq.encodings.radix import RadixEncoding
from binseq.encodings.hex import HexEncoding
from binseq.encodings.base32 import Base32Encoding
from binseq.encodings.base64 import Base64Encoding
from binseq.encoding import EncoderDecoder
from binseq.errors import ConfigurationError

__all__ = [
    "RadixEncoding",
    "HexEncoding",
    "Base32Encoding",
    "Base64Encoding",
    "for_radix",
]


def for_radix(radix: int) -> EncoderDecoder:
    """The encoding for a radix: 2..36 positional, 64 Base64."""
    if radix == 64:
        return Base64Encoding()
    if not 2 <= radix <= 36:
        raise ConfigurationError(
            f"supported radix is between 2 and 36, or 64; got {radix}"
        )
    return RadixEncoding(radix)
