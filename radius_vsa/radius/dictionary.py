"""Vendor attribute dictionary.

A static table of ``name -> (vendor_id, vendor_type, value kind)`` replacing
per-vendor factory classes. Only a handful of well-known attributes ship
here; callers register their own catalogs by building a new dictionary.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from radius_vsa.exceptions import InvalidInputError

from . import constants as c
from .codec import ValueKind


@dataclass(frozen=True)
class AttributeDef:
    name: str
    vendor_id: int
    vendor_type: int
    kind: ValueKind = ValueKind.OCTETS


class VendorDictionary:
    """Immutable lookup of attribute definitions by name and by code."""

    def __init__(self, definitions: Iterable[AttributeDef]) -> None:
        by_name: dict[str, AttributeDef] = {}
        by_code: dict[tuple[int, int], AttributeDef] = {}
        for entry in definitions:
            key = entry.name.lower()
            code = (entry.vendor_id, entry.vendor_type)
            if key in by_name:
                raise InvalidInputError(f"Duplicate attribute name: {entry.name}")
            if code in by_code:
                raise InvalidInputError(
                    f"Duplicate attribute code {code}: {entry.name} and "
                    f"{by_code[code].name}"
                )
            by_name[key] = entry
            by_code[code] = entry
        self._by_name: Mapping[str, AttributeDef] = MappingProxyType(by_name)
        self._by_code: Mapping[tuple[int, int], AttributeDef] = MappingProxyType(
            by_code
        )

    def __len__(self) -> int:
        return len(self._by_name)

    def __iter__(self):
        return iter(self._by_name.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._by_name

    def by_name(self, name: str) -> AttributeDef:
        try:
            return self._by_name[name.lower()]
        except KeyError:
            raise InvalidInputError(f"Unknown vendor attribute: {name}") from None

    def by_code(self, vendor_id: int, vendor_type: int) -> AttributeDef | None:
        return self._by_code.get((vendor_id, vendor_type))

    def extend(self, definitions: Iterable[AttributeDef]) -> VendorDictionary:
        return VendorDictionary([*self._by_name.values(), *definitions])


_I, _T, _A, _O = ValueKind.INTEGER, ValueKind.TEXT, ValueKind.IPV4, ValueKind.OCTETS

DEFAULT_DICTIONARY = VendorDictionary(
    [
        AttributeDef("Cisco-AVPair", c.VENDOR_CISCO, c.CISCO_AVPAIR, _T),
        AttributeDef("Cisco-NAS-Port", c.VENDOR_CISCO, c.CISCO_NAS_PORT, _T),
        AttributeDef("Juniper-Local-User-Name", c.VENDOR_JUNIPER, 1, _T),
        AttributeDef("MS-CHAP-Response", c.VENDOR_MICROSOFT, 1, _O),
        AttributeDef("MS-MPPE-Encryption-Policy", c.VENDOR_MICROSOFT, 7, _I),
        AttributeDef("Fortinet-Group-Name", c.VENDOR_FORTINET, 1, _T),
        AttributeDef("PaloAlto-Admin-Role", c.VENDOR_PALO_ALTO, 1, _T),
        AttributeDef("Arista-AVPair", c.VENDOR_ARISTA, 1, _T),
        AttributeDef("Arista-Privilege-Level", c.VENDOR_ARISTA, 2, _I),
        AttributeDef("USR-Chassis-Temperature", c.VENDOR_USR, 0x9008, _I),
        AttributeDef("WiMAX-Capability", c.VENDOR_WIMAX, c.WIMAX_CAPABILITY, _O),
        AttributeDef("WiMAX-Release", c.VENDOR_WIMAX, c.WIMAX_RELEASE, _T),
        AttributeDef(
            "WiMAX-Accounting-Capabilities",
            c.VENDOR_WIMAX,
            c.WIMAX_ACCOUNTING_CAPABILITIES,
            _I,
        ),
        AttributeDef("WiMAX-AAA-Session-Id", c.VENDOR_WIMAX, c.WIMAX_AAA_SESSION_ID, _O),
        AttributeDef("WiMAX-MSK-Lifetime", c.VENDOR_WIMAX, c.WIMAX_MSK_LIFETIME, _I),
        AttributeDef("WiMAX-MSK", c.VENDOR_WIMAX, c.WIMAX_MSK, _O),
        AttributeDef(
            "WiMAX-DHCP-Msg-Server-IP", c.VENDOR_WIMAX, c.WIMAX_DHCP_MSG_SERVER_IP, _A
        ),
        AttributeDef(
            "WiMAX-QoS-Descriptor", c.VENDOR_WIMAX, c.WIMAX_QOS_DESCRIPTOR, _O
        ),
        AttributeDef(
            "WiMAX-DHCPv4-Server-Address",
            c.VENDOR_WIMAX,
            c.WIMAX_DHCPV4_SERVER_ADDRESS,
            _A,
        ),
    ]
)

__all__ = ["AttributeDef", "VendorDictionary", "DEFAULT_DICTIONARY"]
