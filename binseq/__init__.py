"""
binseq - Byte Sequences with Ownership Variants
A toolkit for building, converting, transforming and encoding byte arrays.

The Sequence: Bytes with a byte order tag and numeric/positional views
The Variants: MutableBytes, ImmutableBytes, ReadOnlyBytes
The Codecs:   hex, Base32, Base64 and any radix 2..36
The Transforms: bitwise algebra, shifts, resize, digests, checksums, compression

The module-level constructors build MutableBytes; use of_immutable() or
wrap_read_only(), or the classmethods on a variant, for the others.
"""

import logging

__version__ = "0.1.0"

from binseq.order import ByteOrder, DEFAULT_ORDER
from binseq.errors import (
    BytesError,
    ConfigurationError,
    FormatError,
    StateError,
    CapabilityError,
    BoundsError,
)
from binseq.core import Bytes
from binseq.variants import MutableBytes, ImmutableBytes, ReadOnlyBytes
from binseq.transformers import Transformer, ResizeMode

logging.getLogger(__name__).addHandler(logging.NullHandler())

wrap = MutableBytes.wrap
of = MutableBytes.of
allocate = MutableBytes.allocate
empty = MutableBytes.empty
concat = MutableBytes.concat
from_bool = MutableBytes.from_bool
from_byte = MutableBytes.from_byte
from_char = MutableBytes.from_char
from_short = MutableBytes.from_short
from_int = MutableBytes.from_int
from_long = MutableBytes.from_long
from_float = MutableBytes.from_float
from_double = MutableBytes.from_double
from_big_integer = MutableBytes.from_big_integer
from_uuid = MutableBytes.from_uuid
from_ints = MutableBytes.from_ints
from_longs = MutableBytes.from_longs
from_text = MutableBytes.from_text
from_stream = MutableBytes.from_stream
from_file = MutableBytes.from_file
random = MutableBytes.random
pseudo_random = MutableBytes.pseudo_random
parse = MutableBytes.parse
parse_hex = MutableBytes.parse_hex
parse_base32 = MutableBytes.parse_base32
parse_base64 = MutableBytes.parse_base64
parse_radix = MutableBytes.parse_radix
parse_binary = MutableBytes.parse_binary
parse_octal = MutableBytes.parse_octal
parse_dec = MutableBytes.parse_dec

of_immutable = ImmutableBytes.of
wrap_read_only = ReadOnlyBytes.wrap

__all__ = [
    "ByteOrder",
    "DEFAULT_ORDER",
    "BytesError",
    "ConfigurationError",
    "FormatError",
    "StateError",
    "CapabilityError",
    "BoundsError",
    "Bytes",
    "MutableBytes",
    "ImmutableBytes",
    "ReadOnlyBytes",
    "Transformer",
    "ResizeMode",
    "wrap",
    "of",
    "allocate",
    "empty",
    "concat",
    "from_bool",
    "from_byte",
    "from_char",
    "from_short",
    "from_int",
    "from_long",
    "from_float",
    "from_double",
    "from_big_integer",
    "from_uuid",
    "from_ints",
    "from_longs",
    "from_text",
    "from_stream",
    "from_file",
    "random",
    "pseudo_random",
    "parse",
    "parse_hex",
    "parse_base32",
    "parse_base64",
    "parse_radix",
    "parse_binary",
    "parse_octal",
    "parse_dec",
    "of_immutable",
    "wrap_read_only",
]
