"""Generators for random (version 4) and name-based (version 5) identifiers."""

from __future__ import annotations

import hashlib
import random
import struct
from typing import Protocol

from vegakit.uuids import Uuid

__all__ = ["random_uuid", "name_uuid"]


class _BitSource(Protocol):
    def getrandbits(self, k: int) -> int: ...


def _stamp(raw: bytes, version: int) -> Uuid:
    data = bytearray(raw[:16])
    # Variant must be 10xxxxxx.
    data[8] = (data[8] & 0xBF) | 0x80
    # High nibble of octet 6 holds the version.
    data[6] = (data[6] & 0x0F) | (version << 4)
    return Uuid(bytes(data))


def random_uuid(rng: _BitSource | None = None) -> Uuid:
    """Build a version 4 identifier from four 32-bit words drawn from ``rng``."""
    source = rng if rng is not None else random.SystemRandom()
    raw = b"".join(struct.pack("<I", source.getrandbits(32)) for _ in range(4))
    return _stamp(raw, 4)


def name_uuid(namespace: Uuid, name: str | bytes) -> Uuid:
    """Build a version 5 identifier from the SHA-1 of ``namespace`` and ``name``."""
    if not isinstance(namespace, Uuid):
        raise TypeError(f"namespace must be a Uuid, not {type(namespace).__name__}")
    name_bytes = name.encode("utf-8") if isinstance(name, str) else bytes(name)
    digest = hashlib.sha1(namespace.data + name_bytes).digest()
    return _stamp(digest, 5)