"""VSA sub-attribute formats and the per-vendor format policy.

The layout of the bytes following the Vendor-Id is not self-describing on
the wire, so decoding always needs the expected format from the caller.
Formats follow the FreeRADIUS ``format=T,L[,c]`` notation:

* ``1,1``   standard RFC 2865 §5.26 layout
* ``1,1,c`` RFC 6929 §2.4 continuation layout (WiMAX)
* ``T,L``   wider Vendor-Type (T octets) and/or Vendor-Length (L octets,
  0 meaning no length field)
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from types import MappingProxyType

from radius_vsa.exceptions import InvalidInputError
from radius_vsa.utils.logger import get_logger

from .constants import MAX_ATTRIBUTE_LENGTH, VENDOR_USR, VENDOR_WIMAX, VSA_HEADER_LENGTH

logger = get_logger("radius_vsa.radius.formats", component="radius")


class VsaFormat(enum.Enum):
    STANDARD = "1,1"
    TYPE1_LEN0 = "1,0"
    TYPE2_LEN0 = "2,0"
    TYPE2_LEN1 = "2,1"
    TYPE2_LEN2 = "2,2"
    TYPE4_LEN0 = "4,0"
    TYPE4_LEN1 = "4,1"
    TYPE4_LEN2 = "4,2"
    CONTINUATION = "1,1,c"

    @property
    def type_size(self) -> int:
        return int(self.value.split(",")[0])

    @property
    def length_size(self) -> int:
        return int(self.value.split(",")[1])

    @property
    def has_continuation(self) -> bool:
        return self.value.endswith(",c")

    @property
    def header_size(self) -> int:
        """Octets of sub-header between the Vendor-Id and the value."""
        return self.type_size + self.length_size + int(self.has_continuation)

    @property
    def max_chunk_size(self) -> int:
        """Largest value one top-level attribute can carry (247 standard)."""
        return MAX_ATTRIBUTE_LENGTH - VSA_HEADER_LENGTH - self.header_size

    @property
    def min_attribute_length(self) -> int:
        return VSA_HEADER_LENGTH + self.header_size

    @property
    def max_vendor_type(self) -> int:
        return (1 << (8 * self.type_size)) - 1

    @classmethod
    def parse(cls, text: str | VsaFormat) -> VsaFormat:
        """Accept an enum member, its name, FreeRADIUS notation or an alias."""
        if isinstance(text, cls):
            return text
        key = str(text).strip()
        aliases = {"standard": cls.STANDARD, "continuation": cls.CONTINUATION}
        if key.lower() in aliases:
            return aliases[key.lower()]
        try:
            return cls[key.upper()]
        except KeyError:
            pass
        try:
            return cls(key.replace(" ", "").lower())
        except ValueError as exc:
            raise InvalidInputError(f"Unknown VSA format: {text!r}") from exc


class FormatPolicy:
    """Immutable vendor-id (and optional vendor-type) to format lookup.

    Built once; ``with_overrides`` returns a new policy instead of mutating.
    """

    __slots__ = ("_vendors", "_types", "_default")

    def __init__(
        self,
        vendors: Mapping[int, VsaFormat] | None = None,
        types: Mapping[tuple[int, int], VsaFormat] | None = None,
        default: VsaFormat = VsaFormat.STANDARD,
    ) -> None:
        self._vendors = MappingProxyType(
            {int(k): VsaFormat.parse(v) for k, v in (vendors or {}).items()}
        )
        self._types = MappingProxyType(
            {(int(v), int(t)): VsaFormat.parse(f) for (v, t), f in (types or {}).items()}
        )
        self._default = VsaFormat.parse(default)

    @property
    def vendors(self) -> Mapping[int, VsaFormat]:
        return self._vendors

    @property
    def types(self) -> Mapping[tuple[int, int], VsaFormat]:
        return self._types

    @property
    def default(self) -> VsaFormat:
        return self._default

    def format_for(self, vendor_id: int, vendor_type: int | None = None) -> VsaFormat:
        if vendor_type is not None:
            fmt = self._types.get((vendor_id, vendor_type))
            if fmt is not None:
                return fmt
        return self._vendors.get(vendor_id, self._default)

    def with_overrides(
        self,
        vendors: Mapping[int, VsaFormat] | None = None,
        types: Mapping[tuple[int, int], VsaFormat] | None = None,
    ) -> FormatPolicy:
        merged_vendors = {**self._vendors, **(vendors or {})}
        merged_types = {**self._types, **(types or {})}
        logger.debug(
            "Derived VSA format policy",
            event="radius.vsa.policy.derived",
            vendors=len(merged_vendors),
            types=len(merged_types),
        )
        return FormatPolicy(merged_vendors, merged_types, self._default)

    def __repr__(self) -> str:
        return (
            f"FormatPolicy(vendors={dict(self._vendors)!r}, "
            f"types={dict(self._types)!r}, default={self._default.name})"
        )


DEFAULT_POLICY = FormatPolicy(
    vendors={
        VENDOR_WIMAX: VsaFormat.CONTINUATION,
        VENDOR_USR: VsaFormat.TYPE4_LEN0,
    }
)

__all__ = ["VsaFormat", "FormatPolicy", "DEFAULT_POLICY"]
