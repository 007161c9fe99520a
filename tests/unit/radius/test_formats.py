"""Tests for VSA formats and the vendor format policy."""

import pytest

from radius_vsa.exceptions import InvalidInputError
from radius_vsa.radius.constants import VENDOR_CISCO, VENDOR_USR, VENDOR_WIMAX
from radius_vsa.radius.formats import DEFAULT_POLICY, FormatPolicy, VsaFormat


class TestVsaFormat:
    @pytest.mark.parametrize(
        "fmt, header, max_chunk",
        [
            (VsaFormat.STANDARD, 2, 247),
            (VsaFormat.CONTINUATION, 3, 246),
            (VsaFormat.TYPE1_LEN0, 1, 248),
            (VsaFormat.TYPE2_LEN2, 4, 245),
            (VsaFormat.TYPE4_LEN0, 4, 245),
            (VsaFormat.TYPE4_LEN2, 6, 243),
        ],
    )
    def test_sizes(self, fmt, header, max_chunk):
        assert fmt.header_size == header
        assert fmt.max_chunk_size == max_chunk
        assert fmt.min_attribute_length == 6 + header

    def test_only_continuation_has_flag(self):
        flagged = [f for f in VsaFormat if f.has_continuation]
        assert flagged == [VsaFormat.CONTINUATION]

    def test_max_vendor_type(self):
        assert VsaFormat.STANDARD.max_vendor_type == 255
        assert VsaFormat.TYPE2_LEN1.max_vendor_type == 0xFFFF
        assert VsaFormat.TYPE4_LEN0.max_vendor_type == 0xFFFFFFFF

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1,1", VsaFormat.STANDARD),
            ("1, 1, c", VsaFormat.CONTINUATION),
            ("1,1,C", VsaFormat.CONTINUATION),
            ("standard", VsaFormat.STANDARD),
            ("Continuation", VsaFormat.CONTINUATION),
            ("type4_len0", VsaFormat.TYPE4_LEN0),
            (VsaFormat.TYPE2_LEN1, VsaFormat.TYPE2_LEN1),
        ],
    )
    def test_parse(self, text, expected):
        assert VsaFormat.parse(text) is expected

    @pytest.mark.parametrize("text", ["3,3", "", "1,1,x", "fancy"])
    def test_parse_unknown(self, text):
        with pytest.raises(InvalidInputError, match="Unknown VSA format"):
            VsaFormat.parse(text)


class TestFormatPolicy:
    def test_default_policy_builtins(self):
        assert DEFAULT_POLICY.format_for(VENDOR_WIMAX) is VsaFormat.CONTINUATION
        assert DEFAULT_POLICY.format_for(VENDOR_USR) is VsaFormat.TYPE4_LEN0
        assert DEFAULT_POLICY.format_for(VENDOR_CISCO) is VsaFormat.STANDARD

    def test_type_override_wins_over_vendor(self):
        policy = FormatPolicy(
            vendors={VENDOR_WIMAX: VsaFormat.CONTINUATION},
            types={(VENDOR_WIMAX, 2): VsaFormat.STANDARD},
        )
        assert policy.format_for(VENDOR_WIMAX, 2) is VsaFormat.STANDARD
        assert policy.format_for(VENDOR_WIMAX, 3) is VsaFormat.CONTINUATION
        assert policy.format_for(VENDOR_WIMAX) is VsaFormat.CONTINUATION

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_POLICY.vendors[VENDOR_CISCO] = VsaFormat.CONTINUATION  # type: ignore[index]

    def test_with_overrides_returns_new_policy(self):
        derived = DEFAULT_POLICY.with_overrides(vendors={VENDOR_CISCO: "1,1,c"})
        assert derived is not DEFAULT_POLICY
        assert derived.format_for(VENDOR_CISCO) is VsaFormat.CONTINUATION
        assert derived.format_for(VENDOR_WIMAX) is VsaFormat.CONTINUATION
        assert DEFAULT_POLICY.format_for(VENDOR_CISCO) is VsaFormat.STANDARD

    def test_custom_default(self):
        policy = FormatPolicy(default="1,1,c")
        assert policy.format_for(12345) is VsaFormat.CONTINUATION
        assert "CONTINUATION" in repr(policy)

    def test_invalid_format_value(self):
        with pytest.raises(InvalidInputError):
            FormatPolicy(vendors={1: "9,9"})
