"""
binseq Variants

The three concrete byte sequences. They differ only in how they treat
their storage:

    Variant          construction        array()          transforms
    MutableBytes     wrap/copy/allocate  live storage     in place when possible
    ImmutableBytes   always copies       private copy     always allocate
    ReadOnlyBytes    wraps, no copy      CapabilityError  always allocate

Only MutableBytes has a working mutation API (wipe, fill, secure_wipe,
overwrite, set_byte_at) and works as a context manager that zeroes the
storage on exit:

    with binseq.random(32) as key:
        token = key.hmac(message)
"""

from __future__ import annotations

import random as _random
from typing import Any, Optional

from binseq import services
from binseq.core import Bytes, BytesLike, OrderLike, _as_buffer
from binseq.errors import BoundsError, StateError


class MutableBytes(Bytes):
    """Byte sequence whose in-place-capable transforms write into its storage."""

    def _transforms_in_place(self) -> bool:
        return True

    @property
    def is_mutable(self) -> bool:
        return True

    def array(self) -> bytearray:
        return self._storage

    def wipe(self) -> MutableBytes:
        """Zero the storage."""
        return self.fill(0)

    def fill(self, value: int) -> MutableBytes:
        self._storage[:] = bytes([value & 0xFF]) * len(self._storage)
        return self

    def secure_wipe(self, rng: Optional[_random.Random] = None) -> MutableBytes:
        """Overwrite the storage with random bytes, keeping its length."""
        services.fill_random(self._storage, rng)
        return self

    def overwrite(self, data: BytesLike, offset: int = 0) -> MutableBytes:
        """Copy `data` into the storage starting at `offset`."""
        source = _as_buffer(data)
        if offset < 0 or offset + len(source) > len(self._storage):
            raise BoundsError(
                f"cannot overwrite [{offset}:{offset + len(source)}] of array "
                f"with length {len(self._storage)}"
            )
        self._storage[offset:offset + len(source)] = source
        return self

    def set_byte_at(self, index: int, value: int) -> MutableBytes:
        if index < 0 or index >= len(self._storage):
            raise StateError(
                f"byte index {index} out of bounds for length {len(self._storage)}"
            )
        self._storage[index] = value & 0xFF
        return self

    def __enter__(self) -> MutableBytes:
        return self

    def __exit__(self, *exc_info: Any) -> bool:
        self.wipe()
        return False


class ImmutableBytes(Bytes):
    """Byte sequence that owns a private copy and never changes it."""

    _hash_cache: Optional[int] = None

    def __init__(self, data: BytesLike, order: OrderLike = None) -> None:
        super().__init__(bytearray(_as_buffer(data)), order)

    def _transforms_in_place(self) -> bool:
        return False

    def array(self) -> bytearray:
        return bytearray(self._storage)

    def __hash__(self) -> int:
        if self._hash_cache is None:
            self._hash_cache = super().__hash__()
        return self._hash_cache


class ReadOnlyBytes(Bytes):
    """View over storage it does not own; it never writes into it."""

    def _transforms_in_place(self) -> bool:
        return False

    @property
    def is_read_only(self) -> bool:
        return True

    def array(self) -> bytearray:
        raise self._unsupported("array")

    def to_read_only(self) -> ReadOnlyBytes:
        return self
