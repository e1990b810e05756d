"""
binseq Collaborator Services

Thin call-throughs to standard primitives, used by the transformers and
constructors:

- digest / hmac:         hashlib and hmac, algorithm names resolved eagerly
- checksum:              zlib crc32 / adler32, truncated to 1..4 bytes
- deflate / inflate:     zlib container
- gzip_compress / ...:   gzip container
- fill_random:           secrets (or a caller-supplied random.Random)
- fill_pseudo_random:    seeded random.Random, reproducible
- read_stream/read_file: binary I/O; files are read through KaitaiStream
- encode_text / ...:     str <-> bytes in a named codec

Every service fails with a binseq error, never a best-effort result.
"""

from __future__ import annotations

import codecs
import gzip
import hashlib
import hmac as _hmac
import logging
import random as _random
import secrets
import unicodedata
import zlib
from pathlib import Path
from typing import BinaryIO, Callable, Optional, Union

from kaitaistruct import KaitaiStream

from binseq.errors import BoundsError, ConfigurationError, FormatError, check_non_negative

logger = logging.getLogger(__name__)

MD5 = "md5"
SHA1 = "sha1"
SHA256 = "sha256"
DEFAULT_DIGEST = SHA256

CRC32 = "crc32"
ADLER32 = "adler32"

_CHECKSUMS: dict[str, Callable[[bytes], int]] = {
    CRC32: zlib.crc32,
    ADLER32: zlib.adler32,
}
CHECKSUM_WIDTH = 4

READ_CHUNK_SIZE = 4 * 1024


# ============================================================================
# Digest / HMAC
# ============================================================================

def resolve_digest(algorithm: str) -> str:
    """Map an algorithm name to its hashlib name.

    Accepts hashlib spellings ("sha256", "sha3_256") as well as the
    dashed upper-case style ("SHA-256", "SHA3-256").

    Raises:
        ConfigurationError: if no fixed-length digest of that name exists
    """
    lowered = algorithm.strip().lower()
    candidates = (lowered, lowered.replace("-", ""), lowered.replace("-", "_"))
    for name in candidates:
        try:
            # OpenSSL accepts aliases such as "sha-256"; .name is the hashlib spelling
            canonical = hashlib.new(name).name
        except (ValueError, TypeError):
            continue
        if canonical.startswith("shake"):
            # variable-length output, no natural digest size
            continue
        logger.debug("resolved digest algorithm %r to %r", algorithm, canonical)
        return canonical
    raise ConfigurationError(f"could not get message digest algorithm {algorithm!r}")


def digest(data: bytes | bytearray, algorithm: str = DEFAULT_DIGEST) -> bytes:
    return hashlib.new(resolve_digest(algorithm), data).digest()


def hmac(data: bytes | bytearray, key: bytes | bytearray, algorithm: str = DEFAULT_DIGEST) -> bytes:
    return _hmac.new(bytes(key), data, resolve_digest(algorithm)).digest()


# ============================================================================
# Checksums
# ============================================================================

def resolve_checksum(algorithm: str, width: int) -> Callable[[bytes], int]:
    """Validate a checksum configuration and return the checksum function."""
    func = _CHECKSUMS.get(algorithm.strip().lower().replace("-", ""))
    if func is None:
        raise ConfigurationError(
            f"unknown checksum {algorithm!r}, supported: {sorted(_CHECKSUMS)}"
        )
    if not 1 <= width <= CHECKSUM_WIDTH:
        raise ConfigurationError(
            f"checksum length must be between 1 and {CHECKSUM_WIDTH} bytes, got {width}"
        )
    return func


def checksum(data: bytes | bytearray, algorithm: str = CRC32, width: int = CHECKSUM_WIDTH) -> bytes:
    """Big-endian checksum value, keeping the `width` least significant bytes."""
    func = resolve_checksum(algorithm, width)
    value = func(bytes(data)) & 0xFFFFFFFF
    return value.to_bytes(CHECKSUM_WIDTH, "big")[CHECKSUM_WIDTH - width:]


# ============================================================================
# Compression
# ============================================================================

def deflate(data: bytes | bytearray, level: int = -1) -> bytes:
    return zlib.compress(bytes(data), level)


def inflate(data: bytes | bytearray) -> bytes:
    try:
        return zlib.decompress(bytes(data))
    except zlib.error as e:
        raise FormatError(f"could not inflate data: {e}") from e


def gzip_compress(data: bytes | bytearray) -> bytes:
    return gzip.compress(bytes(data))


def gzip_decompress(data: bytes | bytearray) -> bytes:
    try:
        return gzip.decompress(bytes(data))
    except (OSError, EOFError, zlib.error) as e:
        raise FormatError(f"could not decompress gzip: {e}") from e


# ============================================================================
# Random
# ============================================================================

def fill_random(buffer: bytearray, rng: Optional[_random.Random] = None) -> bytearray:
    """Overwrite the buffer in place with random bytes.

    Uses the secrets module unless an explicit generator is given.
    """
    if rng is None:
        buffer[:] = secrets.token_bytes(len(buffer))
    else:
        buffer[:] = rng.randbytes(len(buffer))
    return buffer


def fill_pseudo_random(buffer: bytearray, seed: Optional[int] = None) -> bytearray:
    """Overwrite the buffer with reproducible pseudo random bytes.

    Not for security relevant use; the same seed yields the same bytes.
    """
    return fill_random(buffer, _random.Random(seed))


# ============================================================================
# Streams and files
# ============================================================================

def read_stream(stream: BinaryIO, max_length: Optional[int] = None) -> bytes:
    """Read a binary stream until EOF or `max_length` bytes."""
    if max_length is not None:
        check_non_negative(max_length, "max_length")
    chunks: list[bytes] = []
    total = 0
    while max_length is None or total < max_length:
        size = READ_CHUNK_SIZE if max_length is None else min(READ_CHUNK_SIZE, max_length - total)
        chunk = stream.read(size)
        if not chunk:
            break
        chunks.append(chunk)
        total += len(chunk)
    logger.debug("read %d bytes from stream", total)
    return b"".join(chunks)


def read_file(path: Union[str, Path], offset: int = 0, length: Optional[int] = None) -> bytes:
    """Read a file, optionally only `length` bytes starting at `offset`.

    Raises:
        FileNotFoundError: if the path does not exist
        BoundsError: if the requested range does not fit the file
    """
    check_non_negative(offset, "offset")
    if length is not None:
        check_non_negative(length, "length")
    path = Path(path)
    with KaitaiStream(open(path, "rb")) as stream:
        size = stream.size()
        end = size if length is None else offset + length
        if offset > size or end > size:
            raise BoundsError(
                f"cannot read [{offset}:{end}] from {path} ({size} bytes)"
            )
        stream.seek(offset)
        data = stream.read_bytes(end - offset)
    logger.debug("read %d bytes from %s at offset %d", len(data), path, offset)
    return data


# ============================================================================
# Text
# ============================================================================

def _check_codec(encoding: str) -> str:
    try:
        return codecs.lookup(encoding).name
    except LookupError:
        raise ConfigurationError(f"unknown text encoding {encoding!r}") from None


def encode_text(text: str, encoding: str = "utf-8", normalization: Optional[str] = None) -> bytes:
    """Encode text, optionally after Unicode normalization (NFC, NFD, NFKC, NFKD)."""
    name = _check_codec(encoding)
    if normalization is not None:
        try:
            text = unicodedata.normalize(normalization, text)
        except ValueError:
            raise ConfigurationError(f"unknown normalization form {normalization!r}") from None
    try:
        return text.encode(name)
    except UnicodeEncodeError as e:
        raise FormatError(f"text is not representable in {name}: {e.reason}", e.start) from e


def decode_text(data: bytes | bytearray, encoding: str = "utf-8") -> str:
    name = _check_codec(encoding)
    try:
        return bytes(data).decode(name)
    except UnicodeDecodeError as e:
        raise FormatError(f"bytes are not valid {name}: {e.reason}", e.start) from e
