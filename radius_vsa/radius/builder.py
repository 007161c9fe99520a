"""Generic VSA builder used by the vendor factory layer."""

from collections.abc import Iterable, Mapping
from typing import Any

from radius_vsa.utils.logger import get_logger

from .codec import ValueKind, decode_value, encode_value
from .dictionary import DEFAULT_DICTIONARY, VendorDictionary
from .formats import DEFAULT_POLICY, FormatPolicy, VsaFormat
from .vsa import VendorSpecificAttribute

logger = get_logger("radius_vsa.radius.builder", component="radius")


def make_vsa(
    vendor_id: int,
    vendor_type: int,
    value: Any,
    fmt: VsaFormat | str | None = None,
    *,
    kind: ValueKind = ValueKind.OCTETS,
    policy: FormatPolicy = DEFAULT_POLICY,
) -> VendorSpecificAttribute:
    """Encode ``value`` by kind and wrap it; ``fmt=None`` asks the policy."""
    resolved = (
        policy.format_for(vendor_id, vendor_type) if fmt is None else VsaFormat.parse(fmt)
    )
    return VendorSpecificAttribute(
        vendor_id, vendor_type, encode_value(kind, value), resolved
    )


def build_vsa(
    vendor_id: int,
    vendor_type: int,
    value: Any,
    fmt: VsaFormat | str | None = None,
    *,
    kind: ValueKind = ValueKind.OCTETS,
    policy: FormatPolicy = DEFAULT_POLICY,
) -> list[bytes]:
    """Return the ready-to-append attribute buffers for one VSA."""
    return make_vsa(vendor_id, vendor_type, value, fmt, kind=kind, policy=policy).pack()


def build_attribute(
    name: str,
    value: Any,
    *,
    dictionary: VendorDictionary = DEFAULT_DICTIONARY,
    policy: FormatPolicy = DEFAULT_POLICY,
) -> list[bytes]:
    """Build a dictionary attribute by name, e.g. ``("WiMAX-Release", "1.0")``."""
    entry = dictionary.by_name(name)
    return build_vsa(
        entry.vendor_id, entry.vendor_type, value, kind=entry.kind, policy=policy
    )


def build_attributes(
    values: Mapping[str, Any] | Iterable[tuple[str, Any]],
    *,
    dictionary: VendorDictionary = DEFAULT_DICTIONARY,
    policy: FormatPolicy = DEFAULT_POLICY,
) -> list[bytes]:
    """Build several named attributes; list values repeat the attribute."""
    items = values.items() if isinstance(values, Mapping) else values
    buffers: list[bytes] = []
    for name, value in items:
        repeated = value if isinstance(value, (list, tuple)) else [value]
        for single in repeated:
            buffers.extend(
                build_attribute(name, single, dictionary=dictionary, policy=policy)
            )
            logger.debug(
                "Added vendor attribute",
                event="radius.vsa.attribute.added",
                attribute=name,
            )
    return buffers


def parse_attribute(
    vsa: VendorSpecificAttribute,
    *,
    dictionary: VendorDictionary = DEFAULT_DICTIONARY,
) -> tuple[str, Any]:
    """Name and decode a received VSA; unknown codes come back as raw octets."""
    entry = dictionary.by_code(vsa.vendor_id, vsa.vendor_type)
    if entry is None:
        return f"Vendor-{vsa.vendor_id}-Attr-{vsa.vendor_type}", vsa.value
    return entry.name, decode_value(entry.kind, vsa.value)


__all__ = [
    "make_vsa",
    "build_vsa",
    "build_attribute",
    "build_attributes",
    "parse_attribute",
]
