"""Reassembly of Vendor-Specific Attributes from received attribute buffers.

Fragments of one value must be contiguous in the attribute list. A chain
that ends, or is interrupted by any other attribute, before its terminal
segment is rejected and its partial data discarded.
"""

from __future__ import annotations

from collections.abc import Iterable

from radius_vsa.exceptions import (
    IncompleteFragmentChainError,
    MalformedAttributeError,
)
from radius_vsa.utils.logger import get_logger

from .attribute import RADIUSAttribute
from .constants import ATTR_VENDOR_SPECIFIC, MAX_RADIUS_PACKET_LENGTH, VSA_HEADER_LENGTH
from .formats import DEFAULT_POLICY, FormatPolicy, VsaFormat
from .frame import VsaSegment, decode_segment
from .vsa import VendorSpecificAttribute

logger = get_logger("radius_vsa.radius.reassembly", component="radius")

DEFAULT_MAX_VALUE_LENGTH = MAX_RADIUS_PACKET_LENGTH


class Reassembler:
    """Collects the segments of one continuation chain at a time.

    Not shared between threads; create one per attribute list being scanned.
    """

    def __init__(
        self,
        fmt: VsaFormat = VsaFormat.CONTINUATION,
        *,
        max_value_length: int = DEFAULT_MAX_VALUE_LENGTH,
    ) -> None:
        self.format = VsaFormat.parse(fmt)
        self.max_value_length = max_value_length
        self._key: tuple[int, int] | None = None
        self._chunks: list[bytes] = []
        self._size = 0

    @property
    def pending(self) -> bool:
        """True while a chain has been started but not terminated."""
        return self._key is not None

    def _reset(self) -> None:
        self._key = None
        self._chunks = []
        self._size = 0

    def _abort(self, reason: str) -> IncompleteFragmentChainError:
        vendor_id, vendor_type = self._key or (None, None)
        logger.debug(
            "Discarding incomplete VSA fragment chain",
            event="radius.vsa.chain_incomplete",
            vendor_id=vendor_id,
            vendor_type=vendor_type,
            fragments=len(self._chunks),
            reason=reason,
        )
        self._reset()
        return IncompleteFragmentChainError(
            f"Incomplete fragment chain for vendor {vendor_id} type {vendor_type}: "
            f"{reason}",
            {"vendor_id": vendor_id, "vendor_type": vendor_type, "reason": reason},
        )

    def feed(self, segment: VsaSegment) -> VendorSpecificAttribute | None:
        """Add a segment; return the finished attribute on the terminal one."""
        key = (segment.vendor_id, segment.vendor_type)
        if self._key is not None and key != self._key:
            raise self._abort(
                f"interrupted by vendor {segment.vendor_id} type {segment.vendor_type}"
            )
        if self._key is None:
            self._key = key

        self._size += len(segment.chunk)
        if self._size > self.max_value_length:
            self._reset()
            raise MalformedAttributeError(
                f"Reassembled VSA value exceeds {self.max_value_length} bytes",
                {"vendor_id": key[0], "vendor_type": key[1]},
            )
        self._chunks.append(segment.chunk)
        if segment.more:
            return None

        vsa = VendorSpecificAttribute(
            key[0], key[1], b"".join(self._chunks), self.format
        )
        if len(self._chunks) > 1:
            logger.debug(
                "Reassembled VSA value",
                event="radius.vsa.reassembled",
                vendor_id=key[0],
                vendor_type=key[1],
                fragments=len(self._chunks),
                value_length=self._size,
            )
        self._reset()
        return vsa

    def interrupt(self, attr_type: int) -> None:
        """Signal a non-VSA attribute; fails if a chain is open."""
        if self._key is not None:
            raise self._abort(f"interrupted by attribute type {attr_type}")

    def finish(self) -> None:
        """Signal end of the attribute stream; fails if a chain is open."""
        if self._key is not None:
            raise self._abort("attribute stream ended")


def reassemble(
    segments: Iterable[VsaSegment],
    fmt: VsaFormat = VsaFormat.CONTINUATION,
    *,
    max_value_length: int = DEFAULT_MAX_VALUE_LENGTH,
) -> VendorSpecificAttribute:
    """Consume segments up to and including the first terminal one."""
    collector = Reassembler(fmt, max_value_length=max_value_length)
    for segment in segments:
        vsa = collector.feed(segment)
        if vsa is not None:
            return vsa
    collector.finish()
    raise IncompleteFragmentChainError("No segments supplied")


def _attr_bytes(item: bytes | RADIUSAttribute) -> bytes:
    if isinstance(item, RADIUSAttribute):
        return item.pack()
    return bytes(item)


def decode_vsa_buffer(
    buffer: bytes, policy: FormatPolicy = DEFAULT_POLICY
) -> tuple[VsaSegment, VsaFormat]:
    """Decode one type-26 buffer with the format the policy assigns to it."""
    if len(buffer) < VSA_HEADER_LENGTH:
        raise MalformedAttributeError(
            f"VSA data too short: {len(buffer)} bytes, need at least {VSA_HEADER_LENGTH}"
        )
    vendor_id = int.from_bytes(buffer[2:6], "big")
    fmt = policy.format_for(vendor_id)
    type_end = VSA_HEADER_LENGTH + fmt.type_size
    if len(buffer) >= type_end:
        # per-type overrides are keyed on the Vendor-Type as the vendor format lays it out
        vendor_type = int.from_bytes(buffer[VSA_HEADER_LENGTH:type_end], "big")
        fmt = policy.format_for(vendor_id, vendor_type)
    return decode_segment(buffer, fmt), fmt


def decode_attribute_list(
    attributes: Iterable[bytes | RADIUSAttribute],
    policy: FormatPolicy = DEFAULT_POLICY,
    *,
    max_value_length: int = DEFAULT_MAX_VALUE_LENGTH,
) -> list[VendorSpecificAttribute]:
    """Decode the Vendor-Specific attributes of a received attribute list.

    ``attributes`` are top-level TLVs in wire order. Non-VSA attributes are
    skipped unless they fall inside an open continuation chain.
    """
    results: list[VendorSpecificAttribute] = []
    collector: Reassembler | None = None
    for item in attributes:
        buffer = _attr_bytes(item)
        if not buffer:
            raise MalformedAttributeError("Empty attribute buffer")
        if buffer[0] != ATTR_VENDOR_SPECIFIC:
            if collector is not None:
                collector.interrupt(buffer[0])
            continue

        try:
            segment, fmt = decode_vsa_buffer(buffer, policy)
        except MalformedAttributeError as exc:
            logger.debug(
                "Rejected malformed Vendor-Specific attribute",
                event="radius.vsa.decode_failed",
                length=len(buffer),
                error=exc.message,
            )
            raise
        if collector is not None and collector.format is not fmt:
            collector.interrupt(ATTR_VENDOR_SPECIFIC)
        if collector is None or not collector.pending:
            collector = Reassembler(fmt, max_value_length=max_value_length)
        vsa = collector.feed(segment)
        if vsa is not None:
            results.append(vsa)

    if collector is not None:
        collector.finish()
    return results


__all__ = [
    "Reassembler",
    "reassemble",
    "decode_vsa_buffer",
    "decode_attribute_list",
    "DEFAULT_MAX_VALUE_LENGTH",
]
