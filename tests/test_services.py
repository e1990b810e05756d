"""
binseq Collaborator Service Test Suite

Tests the call-throughs used by transformers and constructors:
1. Digest name resolution and HMAC
2. Checksum widths
3. Compression containers
4. Random fill
5. Stream and file reads
6. Text codecs
"""

import io
import sys
import os
import hashlib
import random
import zlib

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from binseq import services
from binseq.errors import BoundsError, ConfigurationError, FormatError


# =============================================================================
# 1. Digests
# =============================================================================

@pytest.mark.parametrize("name,expected", [
    ("sha256", "sha256"),
    ("SHA-256", "sha256"),
    ("Sha1", "sha1"),
    ("MD5", "md5"),
    ("sha512", "sha512"),
    ("sha-256", "sha256"),
    ("SHA3-256", "sha3_256"),
    ("sha3_256", "sha3_256"),
])
def test_resolve_digest(name, expected):
    assert services.resolve_digest(name) == expected


@pytest.mark.parametrize("name", ["", "sha-999", "shake_256", "crc32"])
def test_resolve_digest_unknown(name):
    with pytest.raises(ConfigurationError):
        services.resolve_digest(name)


def test_digest_and_hmac():
    assert services.digest(b"abc") == hashlib.sha256(b"abc").digest()
    assert len(services.hmac(b"abc", b"key", "md5")) == 16


def test_resolve_digest_logs(caplog):
    with caplog.at_level("DEBUG", logger="binseq.services"):
        services.resolve_digest("SHA-256")
    assert "sha256" in caplog.text


# =============================================================================
# 2. Checksums
# =============================================================================

def test_checksum_widths():
    value = zlib.crc32(b"abc").to_bytes(4, "big")
    assert services.checksum(b"abc") == value
    assert services.checksum(b"abc", width=1) == value[3:]
    assert services.checksum(b"abc", "ADLER-32") == zlib.adler32(b"abc").to_bytes(4, "big")


@pytest.mark.parametrize("width", [0, 5, 8])
def test_checksum_width_rejected(width):
    with pytest.raises(ConfigurationError):
        services.checksum(b"abc", "crc32", width)


# =============================================================================
# 3. Compression
# =============================================================================

def test_compression_containers():
    data = b"binseq " * 50
    assert services.inflate(services.deflate(data)) == data
    assert services.gzip_decompress(services.gzip_compress(data)) == data
    assert services.gzip_compress(data)[:2] == b"\x1f\x8b"


def test_corrupt_input():
    with pytest.raises(FormatError):
        services.inflate(b"not zlib")
    with pytest.raises(FormatError):
        services.gzip_decompress(b"not gzip")


# =============================================================================
# 4. Random
# =============================================================================

def test_fill_random_in_place():
    buffer = bytearray(16)
    assert services.fill_random(buffer) is buffer
    assert len(buffer) == 16


def test_fill_pseudo_random_reproducible():
    a = services.fill_pseudo_random(bytearray(8), seed=9)
    b = services.fill_pseudo_random(bytearray(8), seed=9)
    assert a == b
    assert services.fill_random(bytearray(8), random.Random(9)) == a


# =============================================================================
# 5. Streams and files
# =============================================================================

def test_read_stream_chunks():
    data = bytes(range(256)) * 40
    assert services.read_stream(io.BytesIO(data)) == data
    assert services.read_stream(io.BytesIO(data), max_length=5000) == data[:5000]
    assert services.read_stream(io.BytesIO(b"ab"), max_length=10) == b"ab"
    with pytest.raises(BoundsError):
        services.read_stream(io.BytesIO(b""), max_length=-1)


def test_read_file(tmp_path):
    path = tmp_path / "f.bin"
    path.write_bytes(b"0123456789")
    assert services.read_file(path) == b"0123456789"
    assert services.read_file(path, offset=7) == b"789"
    assert services.read_file(path, offset=10) == b""
    assert services.read_file(path, 2, 2) == b"23"
    with pytest.raises(BoundsError):
        services.read_file(path, offset=11)
    with pytest.raises(BoundsError):
        services.read_file(path, length=-1)


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        services.read_file(tmp_path / "missing.bin")


# =============================================================================
# 6. Text
# =============================================================================

def test_text_codecs():
    assert services.encode_text("ä", "latin-1") == b"\xe4"
    assert services.decode_text(b"\xe4", "latin-1") == "ä"
    assert services.encode_text("\u00c5", normalization="NFD") == b"A\xcc\x8a"


def test_text_errors():
    with pytest.raises(ConfigurationError):
        services.encode_text("x", "klingon")
    with pytest.raises(ConfigurationError):
        services.encode_text("x", normalization="NFX")
    with pytest.raises(FormatError) as exc:
        services.decode_text(b"ab\xff", "utf-8")
    assert exc.value.position == 2
