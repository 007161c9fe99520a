"""Wire-level tests for single Vendor-Specific attribute framing."""

import struct

import pytest

from radius_vsa.exceptions import (
    InvalidInputError,
    MalformedAttributeError,
    ValueTooLargeError,
)
from radius_vsa.radius.codec import encode_integer
from radius_vsa.radius.constants import VENDOR_USR, VENDOR_WIMAX
from radius_vsa.radius.formats import VsaFormat
from radius_vsa.radius.frame import VsaSegment, decode_segment, encode_segment

SCENARIO_A = bytes.fromhex("1A0C00000A4D020600000064")


class TestEncodeSegment:
    def test_standard_integer_exact_bytes(self):
        assert encode_segment(2637, 2, encode_integer(100)) == SCENARIO_A

    def test_standard_max_chunk_fills_attribute(self):
        buf = encode_segment(9, 1, b"x" * 247)
        assert len(buf) == 255
        assert buf[1] == 255
        assert buf[7] == 249

    def test_standard_overflow(self):
        with pytest.raises(ValueTooLargeError, match="VSA attribute too long") as exc_info:
            encode_segment(9, 1, b"x" * 248)
        assert exc_info.value.size == 248
        assert exc_info.value.limit == 247

    def test_continuation_flag_and_vendor_length(self):
        buf = encode_segment(
            VENDOR_WIMAX, 1, b"\xaa" * 10, VsaFormat.CONTINUATION, more=True
        )
        assert buf[:6] == struct.pack("!BBL", 26, 19, VENDOR_WIMAX)
        assert buf[6] == 1
        assert buf[7] == 13
        assert buf[8] == 0x80
        assert buf[9:] == b"\xaa" * 10

    def test_more_rejected_without_continuation(self):
        with pytest.raises(InvalidInputError, match="cannot mark more fragments"):
            encode_segment(9, 1, b"x", more=True)

    def test_type4_len0_layout(self):
        buf = encode_segment(VENDOR_USR, 0x9008, b"\x00\x00\x00\x2a", "4,0")
        assert buf == bytes.fromhex("1a0e000001ad000090080000002a")

    def test_type2_len2_layout(self):
        buf = encode_segment(9, 0x0102, b"ab", VsaFormat.TYPE2_LEN2)
        assert buf == bytes.fromhex("1a0c00000009" "0102" "0006" "6162")

    @pytest.mark.parametrize(
        "vendor_id, vendor_type",
        [(0, 1), (2**32, 1), (9, 0), (9, 256), (True, 1), (9, "1")],
    )
    def test_invalid_ids(self, vendor_id, vendor_type):
        with pytest.raises(InvalidInputError):
            encode_segment(vendor_id, vendor_type, b"x")


class TestDecodeSegment:
    def test_scenario_a(self):
        seg = decode_segment(SCENARIO_A)
        assert seg == VsaSegment(2637, 2, b"\x00\x00\x00\x64", False)

    def test_continuation_flag(self):
        buf = encode_segment(
            VENDOR_WIMAX, 3, b"abc", VsaFormat.CONTINUATION, more=True
        )
        seg = decode_segment(buf, VsaFormat.CONTINUATION)
        assert seg.more is True
        assert seg.chunk == b"abc"

    def test_reserved_flag_bits_ignored(self):
        buf = bytearray(encode_segment(VENDOR_WIMAX, 3, b"abc", "1,1,c"))
        buf[8] = 0x7F
        assert decode_segment(bytes(buf), "1,1,c").more is False

    def test_empty_value(self):
        seg = decode_segment(encode_segment(9, 1, b""))
        assert seg.chunk == b""

    def test_not_vendor_specific(self):
        with pytest.raises(MalformedAttributeError, match="Not a Vendor-Specific"):
            decode_segment(b"\x01\x08" + SCENARIO_A[2:8])

    def test_too_short(self):
        with pytest.raises(MalformedAttributeError, match="too short"):
            decode_segment(b"\x1a")

    def test_declared_length_mismatch(self):
        with pytest.raises(MalformedAttributeError, match="does not match"):
            decode_segment(SCENARIO_A[:-1])

    def test_below_format_minimum(self):
        with pytest.raises(MalformedAttributeError, match="VSA data too short"):
            decode_segment(bytes.fromhex("1a0700000a4d02"))

    def test_vendor_length_mismatch(self):
        bad = bytearray(SCENARIO_A)
        bad[7] = 0x07
        with pytest.raises(MalformedAttributeError, match="Invalid vendor-length"):
            decode_segment(bytes(bad))

    def test_reserved_vendor_id(self):
        with pytest.raises(MalformedAttributeError, match="Vendor-Id 0"):
            decode_segment(bytes.fromhex("1a0a00000000010461 62".replace(" ", "")))

    def test_reserved_vendor_type(self):
        with pytest.raises(MalformedAttributeError, match="Vendor-Type 0"):
            decode_segment(bytes.fromhex("1a0a00000009000461 62".replace(" ", "")))

    def test_type4_len0_decode(self):
        seg = decode_segment(bytes.fromhex("1a0e000001ad000090080000002a"), "4,0")
        assert (seg.vendor_id, seg.vendor_type, seg.chunk) == (
            VENDOR_USR,
            0x9008,
            b"\x00\x00\x00\x2a",
        )
