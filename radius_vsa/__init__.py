"""
radius_vsa - RADIUS Vendor-Specific Attribute codec

Encodes (vendor-id, vendor-type, value) triples as RFC 2865 Vendor-Specific
attributes, fragments long values with the RFC 6929 continuation layout and
reassembles them on receive.
"""

__version__ = "0.1.0"

from .exceptions import (
    AddressFamilyMismatchError,
    ConfigError,
    ConfigValidationError,
    IncompleteFragmentChainError,
    InvalidEncodingError,
    InvalidInputError,
    MalformedAttributeError,
    RadiusVsaError,
    TruncatedValueError,
    ValueTooLargeError,
)
from .radius import (
    DEFAULT_DICTIONARY,
    DEFAULT_POLICY,
    FormatPolicy,
    ValueKind,
    VendorSpecificAttribute,
    VsaFormat,
    build_attribute,
    build_vsa,
    decode_attribute_list,
    decode_segment,
    encode_vsa,
    parse_attribute,
    split_attributes,
)

__all__ = [
    "__version__",
    "RadiusVsaError",
    "InvalidInputError",
    "AddressFamilyMismatchError",
    "InvalidEncodingError",
    "TruncatedValueError",
    "ValueTooLargeError",
    "MalformedAttributeError",
    "IncompleteFragmentChainError",
    "ConfigError",
    "ConfigValidationError",
    "ValueKind",
    "VsaFormat",
    "FormatPolicy",
    "DEFAULT_POLICY",
    "DEFAULT_DICTIONARY",
    "VendorSpecificAttribute",
    "encode_vsa",
    "decode_segment",
    "decode_attribute_list",
    "split_attributes",
    "build_vsa",
    "build_attribute",
    "parse_attribute",
]
