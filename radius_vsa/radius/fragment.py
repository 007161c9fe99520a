"""Continuation-format fragmentation (RFC 6929 §2.4).

A value larger than one attribute is carried by consecutive top-level
attributes with the same Vendor-Id and Vendor-Type. All but the last have
bit 0x80 of the continuation octet set.
"""

from __future__ import annotations

from radius_vsa.exceptions import InvalidInputError
from radius_vsa.utils.logger import get_logger

from .formats import VsaFormat
from .frame import encode_segment

logger = get_logger("radius_vsa.radius.fragment", component="radius")


def split_chunks(value: bytes, size: int) -> list[bytes]:
    """Split ``value`` into ordered chunks of at most ``size`` bytes.

    Always returns at least one chunk; an empty value yields ``[b""]``.
    """
    if size < 1:
        raise InvalidInputError(f"Chunk size must be positive, got {size}")
    value = bytes(value)
    if not value:
        return [b""]
    return [value[i : i + size] for i in range(0, len(value), size)]


def fragment(
    vendor_id: int,
    vendor_type: int,
    value: bytes,
    fmt: VsaFormat = VsaFormat.CONTINUATION,
) -> list[bytes]:
    """Encode ``value`` as a chain of continuation-format attributes."""
    fmt = VsaFormat.parse(fmt)
    if not fmt.has_continuation:
        raise InvalidInputError(
            f"Format {fmt.value} has no continuation flag; cannot fragment"
        )
    chunks = split_chunks(value, fmt.max_chunk_size)
    last = len(chunks) - 1
    buffers = [
        encode_segment(vendor_id, vendor_type, chunk, fmt, more=index < last)
        for index, chunk in enumerate(chunks)
    ]
    if len(buffers) > 1:
        logger.debug(
            "Fragmented VSA value",
            event="radius.vsa.fragmented",
            vendor_id=vendor_id,
            vendor_type=vendor_type,
            value_length=len(value),
            fragments=len(buffers),
        )
    return buffers


__all__ = ["split_chunks", "fragment"]
