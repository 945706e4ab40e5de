"""RFC 4122 style identifiers: parsing, formatting, variant and version."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "UuidVariant",
    "UuidVersion",
    "Uuid",
    "NAMESPACE_DNS",
    "NAMESPACE_URL",
    "NAMESPACE_OID",
    "NAMESPACE_X500",
]

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class UuidVariant(Enum):
    """Layout family, taken from the high bits of octet 8."""

    NCS = "ncs"
    RFC = "rfc"
    MICROSOFT = "microsoft"
    RESERVED = "reserved"


class UuidVersion(Enum):
    """Generation scheme, taken from the high nibble of octet 6."""

    NONE = 0
    TIME_BASED = 1
    DCE_SECURITY = 2
    NAME_BASED_MD5 = 3
    RANDOM_NUMBER_BASED = 4
    NAME_BASED_SHA1 = 5


def _parse(text: str) -> bytes | None:
    if not text:
        return None
    braces = 1 if text[0] == "{" else 0
    if braces and text[-1] != "}":
        return None
    body = text[braces : len(text) - braces]
    out = bytearray()
    high: str | None = None
    for ch in body:
        if ch == "-":
            continue
        if len(out) >= 16 or ch not in _HEX_DIGITS:
            return None
        if high is None:
            high = ch
        else:
            out.append(int(high + ch, 16))
            high = None
    if len(out) < 16:
        return None
    return bytes(out)


@dataclass(frozen=True, order=True)
class Uuid:
    """A 128-bit identifier held as 16 bytes; the default is the nil id."""

    data: bytes = bytes(16)

    def __post_init__(self) -> None:
        data = bytes(self.data)
        if len(data) != 16:
            raise ValueError(f"a uuid needs exactly 16 bytes, got {len(data)}")
        object.__setattr__(self, "data", data)

    @classmethod
    def from_string(cls, text: str) -> Uuid:
        """Parse hex text with optional dashes and braces; raise ValueError if malformed."""
        data = _parse(text)
        if data is None:
            raise ValueError(f"not a valid uuid: {text!r}")
        return cls(data)

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return _parse(text) is not None

    def variant(self) -> UuidVariant:
        octet = self.data[8]
        if octet & 0x80 == 0x00:
            return UuidVariant.NCS
        if octet & 0xC0 == 0x80:
            return UuidVariant.RFC
        if octet & 0xE0 == 0xC0:
            return UuidVariant.MICROSOFT
        return UuidVariant.RESERVED

    def version(self) -> UuidVersion:
        nibble = self.data[6] >> 4
        if 1 <= nibble <= 5:
            return UuidVersion(nibble)
        return UuidVersion.NONE

    def is_nil(self) -> bool:
        return not any(self.data)

    def __str__(self) -> str:
        h = self.data.hex()
        return f"{h[:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:]}"

    def __bytes__(self) -> bytes:
        return self.data


_NS_TAIL = bytes([0x9D, 0xAD, 0x11, 0xD1, 0x80, 0xB4, 0x00, 0xC0, 0x4F, 0xD4, 0x30, 0xC8])

NAMESPACE_DNS = Uuid(bytes([0x6B, 0xA7, 0xB8, 0x10]) + _NS_TAIL)
NAMESPACE_URL = Uuid(bytes([0x6B, 0xA7, 0xB8, 0x11]) + _NS_TAIL)
NAMESPACE_OID = Uuid(bytes([0x6B, 0xA7, 0xB8, 0x12]) + _NS_TAIL)
NAMESPACE_X500 = Uuid(bytes([0x6B, 0xA7, 0xB8, 0x14]) + _NS_TAIL)