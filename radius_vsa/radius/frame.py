"""Single-attribute Vendor-Specific framing.

Format: Type(1)=26 Length(1) Vendor-Id(4) Vendor-Type(T) [Vendor-Length(L)]
[Continuation(1)] Vendor-Data(...)

``encode_segment`` emits exactly one top-level TLV and ``decode_segment``
parses exactly one; neither loops over an attribute list.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

from radius_vsa.exceptions import (
    InvalidInputError,
    MalformedAttributeError,
    ValueTooLargeError,
)

from .constants import (
    ATTR_VENDOR_SPECIFIC,
    CONTINUATION_LAST,
    CONTINUATION_MORE,
    MAX_ATTRIBUTE_LENGTH,
    MAX_VENDOR_ID,
    VSA_HEADER_LENGTH,
)
from .formats import VsaFormat

_INT_FORMATS = {1: "!B", 2: "!H", 4: "!L"}


@dataclass(frozen=True)
class VsaSegment:
    """One decoded top-level VSA: a whole value or one fragment of it."""

    vendor_id: int
    vendor_type: int
    chunk: bytes
    more: bool = False


def validate_ids(vendor_id: int, vendor_type: int, fmt: VsaFormat) -> None:
    if isinstance(vendor_id, bool) or not isinstance(vendor_id, int):
        raise InvalidInputError("Vendor-Id must be an integer")
    if not 1 <= vendor_id <= MAX_VENDOR_ID:
        raise InvalidInputError(
            f"Vendor-Id {vendor_id} out of range (1-{MAX_VENDOR_ID})",
            {"vendor_id": vendor_id},
        )
    if isinstance(vendor_type, bool) or not isinstance(vendor_type, int):
        raise InvalidInputError("Vendor-Type must be an integer")
    if not 1 <= vendor_type <= fmt.max_vendor_type:
        raise InvalidInputError(
            f"Vendor-Type {vendor_type} out of range (1-{fmt.max_vendor_type}) "
            f"for format {fmt.value}",
            {"vendor_type": vendor_type, "format": fmt.value},
        )


def encode_segment(
    vendor_id: int,
    vendor_type: int,
    chunk: bytes,
    fmt: VsaFormat = VsaFormat.STANDARD,
    *,
    more: bool = False,
) -> bytes:
    """Pack one chunk into a wire-exact Vendor-Specific TLV."""
    fmt = VsaFormat.parse(fmt)
    validate_ids(vendor_id, vendor_type, fmt)
    if more and not fmt.has_continuation:
        raise InvalidInputError(f"Format {fmt.value} cannot mark more fragments")

    chunk = bytes(chunk)
    if len(chunk) > fmt.max_chunk_size:
        raise ValueTooLargeError(
            f"VSA attribute too long: {fmt.min_attribute_length + len(chunk)} "
            f"bytes (max {MAX_ATTRIBUTE_LENGTH})",
            size=len(chunk),
            limit=fmt.max_chunk_size,
            format=fmt.value,
        )

    sub_header = struct.pack(_INT_FORMATS[fmt.type_size], vendor_type)
    if fmt.length_size:
        # Vendor-Length covers the whole sub-attribute, itself included
        sub_header += struct.pack(
            _INT_FORMATS[fmt.length_size], fmt.header_size + len(chunk)
        )
    if fmt.has_continuation:
        sub_header += bytes((CONTINUATION_MORE if more else CONTINUATION_LAST,))

    length = VSA_HEADER_LENGTH + len(sub_header) + len(chunk)
    return (
        struct.pack("!BBL", ATTR_VENDOR_SPECIFIC, length, vendor_id)
        + sub_header
        + chunk
    )


def decode_segment(
    buffer: bytes, fmt: VsaFormat = VsaFormat.STANDARD
) -> VsaSegment:
    """Parse one top-level Vendor-Specific TLV (Type and Length included).

    Raises:
        MalformedAttributeError: if the type is not 26 or any declared
            length disagrees with the bytes actually present
    """
    fmt = VsaFormat.parse(fmt)
    data = bytes(buffer)

    if len(data) < 2:
        raise MalformedAttributeError(
            f"Attribute too short: {len(data)} bytes, need at least 2"
        )
    attr_type, length = data[0], data[1]
    if attr_type != ATTR_VENDOR_SPECIFIC:
        raise MalformedAttributeError(
            f"Not a Vendor-Specific attribute: type {attr_type}",
            {"attr_type": attr_type},
        )
    if length != len(data):
        raise MalformedAttributeError(
            f"Attribute length {length} does not match {len(data)} bytes present",
            {"declared": length, "actual": len(data)},
        )
    if length < fmt.min_attribute_length:
        raise MalformedAttributeError(
            f"VSA data too short: {length} bytes, need at least "
            f"{fmt.min_attribute_length} for format {fmt.value}",
            {"declared": length, "format": fmt.value},
        )

    (vendor_id,) = struct.unpack("!L", data[2:6])
    if vendor_id == 0:
        raise MalformedAttributeError("Vendor-Id 0 is reserved")

    pos = VSA_HEADER_LENGTH
    (vendor_type,) = struct.unpack(
        _INT_FORMATS[fmt.type_size], data[pos : pos + fmt.type_size]
    )
    pos += fmt.type_size
    if vendor_type == 0:
        raise MalformedAttributeError(
            "Vendor-Type 0 is reserved", {"vendor_id": vendor_id}
        )

    if fmt.length_size:
        (vendor_length,) = struct.unpack(
            _INT_FORMATS[fmt.length_size], data[pos : pos + fmt.length_size]
        )
        pos += fmt.length_size
        if vendor_length != length - VSA_HEADER_LENGTH:
            raise MalformedAttributeError(
                f"Invalid vendor-length: {vendor_length}, attribute carries "
                f"{length - VSA_HEADER_LENGTH} bytes after the Vendor-Id",
                {"vendor_id": vendor_id, "vendor_length": vendor_length},
            )

    more = False
    if fmt.has_continuation:
        more = bool(data[pos] & CONTINUATION_MORE)
        pos += 1

    return VsaSegment(vendor_id, vendor_type, data[pos:length], more)


__all__ = ["VsaSegment", "encode_segment", "decode_segment", "validate_ids"]
