"""
RADIUS Vendor-Specific Attribute codec

Frames (vendor-id, vendor-type, value) triples as RFC 2865 §5.26
Vendor-Specific attributes, fragments long values under the RFC 6929 §2.4
continuation layout, and reassembles them on receive.
"""

from .attribute import RADIUSAttribute, split_attributes
from .builder import build_attribute, build_attributes, build_vsa, make_vsa, parse_attribute
from .codec import ValueKind
from .dictionary import DEFAULT_DICTIONARY, AttributeDef, VendorDictionary
from .formats import DEFAULT_POLICY, FormatPolicy, VsaFormat
from .fragment import fragment, split_chunks
from .frame import VsaSegment, decode_segment, encode_segment
from .reassembly import Reassembler, decode_attribute_list, reassemble
from .vsa import VendorSpecificAttribute, encode_vsa

__all__ = [
    "RADIUSAttribute",
    "split_attributes",
    "ValueKind",
    "VsaFormat",
    "FormatPolicy",
    "DEFAULT_POLICY",
    "VsaSegment",
    "encode_segment",
    "decode_segment",
    "encode_vsa",
    "VendorSpecificAttribute",
    "split_chunks",
    "fragment",
    "Reassembler",
    "reassemble",
    "decode_attribute_list",
    "AttributeDef",
    "VendorDictionary",
    "DEFAULT_DICTIONARY",
    "make_vsa",
    "build_vsa",
    "build_attribute",
    "build_attributes",
    "parse_attribute",
]
