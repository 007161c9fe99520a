"""Top-level RADIUS attribute TLVs."""

import struct
from dataclasses import dataclass

from radius_vsa.exceptions import MalformedAttributeError, ValueTooLargeError

from .constants import ATTR_HEADER_LENGTH, MAX_ATTRIBUTE_LENGTH, MAX_ATTRIBUTES_LENGTH


@dataclass(frozen=True)
class RADIUSAttribute:
    """RADIUS attribute"""

    attr_type: int
    value: bytes

    def pack(self) -> bytes:
        """Pack attribute into bytes"""
        length = len(self.value) + ATTR_HEADER_LENGTH
        if length > MAX_ATTRIBUTE_LENGTH:
            raise ValueTooLargeError(
                f"Attribute too long: {length} bytes",
                size=len(self.value),
                limit=MAX_ATTRIBUTE_LENGTH - ATTR_HEADER_LENGTH,
            )
        return struct.pack("BB", self.attr_type, length) + bytes(self.value)

    @classmethod
    def unpack(cls, data: bytes) -> tuple["RADIUSAttribute", int]:
        """Unpack attribute from bytes"""
        if len(data) < ATTR_HEADER_LENGTH:
            raise MalformedAttributeError("Incomplete attribute header")

        attr_type, length = struct.unpack("BB", data[:2])
        if length < ATTR_HEADER_LENGTH or length > len(data):
            raise MalformedAttributeError(
                f"Invalid attribute length: {length}",
                {"declared": length, "available": len(data)},
            )

        return cls(attr_type, bytes(data[2:length])), length


def split_attributes(data: bytes) -> list[bytes]:
    """Split a contiguous run of attribute TLVs into per-attribute buffers.

    Each returned buffer includes its own Type and Length octets. Only the
    Length octets actually present are trusted.
    """
    data = bytes(data)
    if len(data) > MAX_ATTRIBUTES_LENGTH:
        raise MalformedAttributeError(
            f"Attribute run too large: {len(data)} bytes",
            {"limit": MAX_ATTRIBUTES_LENGTH},
        )
    buffers = []
    offset = 0
    while offset < len(data):
        try:
            _, consumed = RADIUSAttribute.unpack(data[offset:])
        except MalformedAttributeError as exc:
            raise MalformedAttributeError(
                f"Invalid attribute at offset {offset}: {exc.message}",
                {"offset": offset, **exc.details},
            ) from exc
        buffers.append(data[offset : offset + consumed])
        offset += consumed
    return buffers


__all__ = ["RADIUSAttribute", "split_attributes"]
