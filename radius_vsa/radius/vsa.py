"""Vendor-Specific Attribute model and frame assembler."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field

from radius_vsa.exceptions import InvalidInputError, ValueTooLargeError

from .codec import decode_integer, decode_ipv4, decode_string
from .constants import (
    MAX_ATTRIBUTE_LENGTH,
    VENDOR_ARISTA,
    VENDOR_CISCO,
    VENDOR_JUNIPER,
    VENDOR_MICROSOFT,
    VENDOR_PALO_ALTO,
    VENDOR_WIMAX,
)
from .formats import VsaFormat
from .fragment import fragment
from .frame import encode_segment, validate_ids


def encode_vsa(
    vendor_id: int,
    vendor_type: int,
    value: bytes,
    fmt: VsaFormat = VsaFormat.STANDARD,
) -> list[bytes]:
    """Assemble ``value`` into ready-to-append top-level attribute buffers.

    Formats without a continuation flag produce exactly one buffer and
    reject values that do not fit; the continuation format fragments.

    Raises:
        ValueTooLargeError: value exceeds ``fmt.max_chunk_size`` (247 octets
            for the standard layout) and ``fmt`` cannot fragment
        InvalidInputError: vendor id / type out of range or value missing
    """
    fmt = VsaFormat.parse(fmt)
    if value is None or not isinstance(value, (bytes, bytearray, memoryview)):
        raise InvalidInputError("VSA value must be bytes")
    value = bytes(value)
    if fmt.has_continuation:
        return fragment(vendor_id, vendor_type, value, fmt)
    if len(value) > fmt.max_chunk_size:
        raise ValueTooLargeError(
            f"VSA attribute too long: {fmt.min_attribute_length + len(value)} "
            f"bytes (max {MAX_ATTRIBUTE_LENGTH})",
            size=len(value),
            limit=fmt.max_chunk_size,
            format=fmt.value,
        )
    return [encode_segment(vendor_id, vendor_type, value, fmt)]


@dataclass(frozen=True)
class VendorSpecificAttribute:
    """RADIUS Vendor-Specific Attribute (Type 26, RFC 2865 §5.26).

    ``value`` is the complete logical value; under the continuation format
    it may span several top-level attributes once packed.
    """

    vendor_id: int
    vendor_type: int
    value: bytes
    format: VsaFormat = field(default=VsaFormat.STANDARD)

    def __post_init__(self) -> None:
        fmt = VsaFormat.parse(self.format)
        object.__setattr__(self, "format", fmt)
        validate_ids(self.vendor_id, self.vendor_type, fmt)
        if self.value is None or not isinstance(
            self.value, (bytes, bytearray, memoryview)
        ):
            raise InvalidInputError("VSA value must be bytes")
        object.__setattr__(self, "value", bytes(self.value))

    def pack(self) -> list[bytes]:
        """Pack into one or more wire-exact attribute buffers, in order."""
        return encode_vsa(self.vendor_id, self.vendor_type, self.value, self.format)

    def as_string(self) -> str:
        """Get value as UTF-8 string."""
        return decode_string(self.value)

    def as_int(self, *, signed: bool = True) -> int:
        """Get value as 32-bit integer."""
        return decode_integer(self.value, signed=signed)

    def as_ipaddr(self) -> ipaddress.IPv4Address:
        """Get value as IPv4 address."""
        return decode_ipv4(self.value)

    def __str__(self) -> str:
        vendor_names = {
            VENDOR_CISCO: "Cisco",
            VENDOR_JUNIPER: "Juniper",
            VENDOR_MICROSOFT: "Microsoft",
            VENDOR_ARISTA: "Arista",
            VENDOR_PALO_ALTO: "PaloAlto",
            VENDOR_WIMAX: "WiMAX",
        }
        vendor_name = vendor_names.get(self.vendor_id, f"Vendor-{self.vendor_id}")
        return (
            f"VSA({vendor_name}, type={self.vendor_type}, len={len(self.value)}, "
            f"format={self.format.value})"
        )


__all__ = ["VendorSpecificAttribute", "encode_vsa"]
