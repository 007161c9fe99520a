"""Scalar value codecs for VSA payloads.

Each value kind has a canonical byte form:

* integer: 4 octets, big-endian (two's complement when signed)
* text: UTF-8, no terminator
* ipv4: 4 octets in network order
* octets: passed through unchanged (also used for compound sub-TLV payloads)
"""

from __future__ import annotations

import enum
import ipaddress
import struct
from collections.abc import Iterable
from typing import Any

from radius_vsa.exceptions import (
    AddressFamilyMismatchError,
    InvalidEncodingError,
    InvalidInputError,
    TruncatedValueError,
)

INTEGER_LENGTH = 4
IPV4_LENGTH = 4

_INT_RANGES = {
    True: (-(2**31), 2**31 - 1),
    False: (0, 2**32 - 1),
}


class ValueKind(enum.Enum):
    """Semantic type of a VSA value."""

    INTEGER = "integer"
    TEXT = "text"
    IPV4 = "ipv4"
    OCTETS = "octets"


def _require_width(data: Any, width: int, what: str) -> bytes:
    if data is None:
        raise InvalidInputError(f"{what} value is required")
    data = bytes(data)
    if len(data) < width:
        raise TruncatedValueError(
            f"{what} needs {width} bytes, got {len(data)}",
            {"expected": width, "actual": len(data)},
        )
    if len(data) > width:
        raise InvalidInputError(
            f"{what} must be exactly {width} bytes, got {len(data)}",
            {"expected": width, "actual": len(data)},
        )
    return data


def encode_integer(value: int, *, signed: bool = True) -> bytes:
    """Encode a 32-bit integer as 4 big-endian octets."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"Integer value required, got {type(value).__name__}")
    low, high = _INT_RANGES[signed]
    if not low <= value <= high:
        raise InvalidInputError(
            f"Integer {value} out of range [{low}, {high}]",
            {"value": value, "signed": signed},
        )
    return struct.pack("!i" if signed else "!I", value)


def decode_integer(data: bytes, *, signed: bool = True) -> int:
    """Decode 4 big-endian octets into an integer."""
    raw = _require_width(data, INTEGER_LENGTH, "Integer")
    return int(struct.unpack("!i" if signed else "!I", raw)[0])


def encode_string(text: str) -> bytes:
    if not isinstance(text, str):
        raise InvalidInputError(f"Text value required, got {type(text).__name__}")
    return text.encode("utf-8")


def decode_string(data: bytes) -> str:
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEncodingError(
            f"Value is not valid UTF-8: {exc.reason} at byte {exc.start}",
            {"position": exc.start},
        ) from exc


def encode_ipv4(
    address: str | ipaddress.IPv4Address | ipaddress.IPv6Address,
) -> bytes:
    """Encode an IPv4 address; IPv6 input is rejected rather than mapped."""
    if address is None:
        raise InvalidInputError("IPv4 address is required")
    if isinstance(address, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        ip_obj = address
    else:
        try:
            ip_obj = ipaddress.ip_address(str(address).strip())
        except ValueError as exc:
            raise InvalidInputError(f"Invalid IP address: {address}") from exc
    if ip_obj.version != 4:
        raise AddressFamilyMismatchError(
            f"Expected an IPv4 address, got IPv{ip_obj.version} {ip_obj}",
            {"address": str(ip_obj)},
        )
    return ip_obj.packed


def decode_ipv4(data: bytes) -> ipaddress.IPv4Address:
    return ipaddress.IPv4Address(_require_width(data, IPV4_LENGTH, "IPv4 address"))


def encode_octets(data: bytes | bytearray | memoryview) -> bytes:
    if data is None:
        raise InvalidInputError("Octets value is required")
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise InvalidInputError(f"Octets value required, got {type(data).__name__}")
    return bytes(data)


def pack_tlvs(items: Iterable[tuple[int, bytes]]) -> bytes:
    """Assemble a simple ``type(1) length(1) value`` run for compound values.

    The result is opaque to the VSA layer; it is only framed and fragmented.
    """
    out = bytearray()
    for sub_type, sub_value in items:
        sub_value = encode_octets(sub_value)
        if not 0 <= sub_type <= 0xFF:
            raise InvalidInputError(f"Sub-TLV type out of range: {sub_type}")
        if len(sub_value) + 2 > 0xFF:
            raise InvalidInputError(
                f"Sub-TLV value too long: {len(sub_value)} bytes (max 253)"
            )
        out += bytes((sub_type, len(sub_value) + 2)) + sub_value
    return bytes(out)


_ENCODERS = {
    ValueKind.INTEGER: encode_integer,
    ValueKind.TEXT: encode_string,
    ValueKind.IPV4: encode_ipv4,
    ValueKind.OCTETS: encode_octets,
}

_DECODERS = {
    ValueKind.INTEGER: decode_integer,
    ValueKind.TEXT: decode_string,
    ValueKind.IPV4: decode_ipv4,
    ValueKind.OCTETS: encode_octets,
}


def encode_value(kind: ValueKind, value: Any) -> bytes:
    """Encode ``value`` according to its value kind."""
    return _ENCODERS[ValueKind(kind)](value)


def decode_value(kind: ValueKind, data: bytes) -> Any:
    """Decode ``data`` according to its value kind."""
    return _DECODERS[ValueKind(kind)](data)


__all__ = [
    "ValueKind",
    "encode_integer",
    "decode_integer",
    "encode_string",
    "decode_string",
    "encode_ipv4",
    "decode_ipv4",
    "encode_octets",
    "pack_tlvs",
    "encode_value",
    "decode_value",
]
