"""Tests for felt parsing, short strings and selectors."""

from __future__ import annotations

import pytest

from socialid.core.exceptions import (
    EncodingError,
    ShortStringDecodingError,
    ShortStringEncodingError,
)
from socialid.core.felt import (
    FIELD_PRIME,
    SHORT_STRING_MAX_LENGTH,
    decode_short_string,
    encode_short_string,
    get_selector_from_name,
    parse_felt,
    to_hex,
)

# ============================================================================
# Felt Parsing Tests
# ============================================================================


class TestParseFelt:
    """Tests for parse_felt."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, 0),
            (42, 42),
            ("42", 42),
            ("0x2a", 42),
            ("0X2A", 42),
            ("  0x2a  ", 42),
        ],
    )
    def test_valid_values(self, value, expected):
        """Ints, decimal and hex strings should parse."""
        assert parse_felt(value) == expected

    @pytest.mark.parametrize("value", ["", "0x", "abc", "12ab", "0xzz"])
    def test_malformed_strings(self, value):
        """Malformed strings should raise ValueError."""
        with pytest.raises(ValueError, match="Invalid felt"):
            parse_felt(value)

    def test_out_of_range(self):
        """Values at or above the field prime should be rejected."""
        with pytest.raises(ValueError, match="out of range"):
            parse_felt(FIELD_PRIME)
        with pytest.raises(ValueError, match="out of range"):
            parse_felt(-1)

    def test_bool_rejected(self):
        """Booleans are not felts even though they are ints."""
        with pytest.raises(ValueError):
            parse_felt(True)

    def test_to_hex(self):
        assert to_hex(255) == "0xff"
        assert to_hex(0) == "0x0"


# ============================================================================
# Short String Tests
# ============================================================================


class TestEncodeShortString:
    """Tests for encode_short_string."""

    def test_big_endian_packing(self):
        """Bytes should be packed big-endian."""
        assert encode_short_string("ab") == 0x6162
        assert encode_short_string("discord") == int.from_bytes(b"discord", "big")

    def test_empty_string(self):
        assert encode_short_string("") == 0

    def test_max_length_accepted(self):
        """31 bytes is the largest string that fits."""
        text = "a" * SHORT_STRING_MAX_LENGTH
        assert encode_short_string(text) == int.from_bytes(text.encode(), "big")

    def test_too_long_rejected(self):
        """32 bytes should fail deterministically."""
        text = "a" * (SHORT_STRING_MAX_LENGTH + 1)
        with pytest.raises(ShortStringEncodingError, match="maximum is 31") as exc_info:
            encode_short_string(text)
        assert exc_info.value.value == text

    def test_non_ascii_rejected(self):
        with pytest.raises(ShortStringEncodingError, match="non-ASCII"):
            encode_short_string("dïscord")

    def test_inner_null_rejected(self):
        """NUL would decode as a misplaced padding byte, so it is refused."""
        with pytest.raises(ShortStringEncodingError, match="null byte") as exc_info:
            encode_short_string("a\x00b")
        assert exc_info.value.value == "a\x00b"

    def test_is_encoding_error(self):
        """Encoding failures belong to the fatal EncodingError family."""
        with pytest.raises(EncodingError):
            encode_short_string("é")


class TestDecodeShortString:
    """Tests for decode_short_string."""

    @pytest.mark.parametrize(
        "text",
        ["", "a", "discord", "github", "twitter", "hello world!", "x" * 31],
    )
    def test_inverse_of_encode(self, text):
        """Decoding an encoded string should return the original."""
        assert decode_short_string(encode_short_string(text)) == text

    def test_leading_zero_bytes_are_padding(self):
        assert decode_short_string(0x00000061) == "a"

    def test_full_width_value_rejected(self):
        """A value using all 32 bytes is not a short string."""
        with pytest.raises(ShortStringDecodingError, match="too large"):
            decode_short_string(2**248)

    def test_null_byte_after_content_rejected(self):
        with pytest.raises(ShortStringDecodingError, match="null byte"):
            decode_short_string(0x610062)

    def test_high_bytes_map_to_code_points(self):
        """Bytes above 0x7F decode to the code point of the same value."""
        assert decode_short_string(0x61E9) == "a\xe9"
        assert decode_short_string(0x61FF) == "a\xff"

    def test_out_of_range_rejected(self):
        with pytest.raises(ShortStringDecodingError, match="out of range"):
            decode_short_string(FIELD_PRIME)


# ============================================================================
# Selector Tests
# ============================================================================


class TestSelectors:
    """Tests for entry point selectors."""

    def test_known_selector(self):
        """Selector of 'transfer' should match the published value."""
        assert get_selector_from_name("transfer") == (
            0x83AFD3F4CAEDC6EEBF44246FE54E38C95E3179A5EC9EA81740ECA5B482D12E
        )

    def test_selector_fits_in_250_bits(self):
        for name in ("aggregate", "get_verifier_data", "get_unbounded_user_data"):
            assert 0 < get_selector_from_name(name) < 2**250

    def test_selectors_are_distinct(self):
        names = ("aggregate", "get_verifier_data", "get_unbounded_user_data")
        assert len({get_selector_from_name(n) for n in names}) == len(names)
