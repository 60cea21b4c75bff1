"""
Unit tests for the base64/charset adapter (charset.py).

Tests cover:
- Charset conversion with known, unknown and quoted charset names
- Passthrough fallback for failed conversions
- Strict base64 decoding
- Byte-transparent text round trip
- Charset detection via charset-normalizer
"""

import pytest

from eml_decoder.parsing.charset import (
    clean_text,
    convert_charset,
    convert_or_passthrough,
    decode_base64,
    detect_charset,
    from_raw,
    message_bytes,
    normalize_charset_name,
    to_raw,
)


class TestConvertCharset:
    """Tests for convert_charset() and convert_or_passthrough()."""

    @pytest.mark.unit
    def test_convert_latin1(self):
        assert convert_charset(b"Caf\xe9", "ISO-8859-1") == "Café"

    @pytest.mark.unit
    def test_convert_utf8(self):
        assert convert_charset("Café".encode("utf-8"), "UTF-8") == "Café"

    @pytest.mark.unit
    def test_convert_quoted_name(self):
        assert convert_charset(b"abc", '"us-ascii"') == "abc"

    @pytest.mark.unit
    def test_unknown_charset_returns_none(self):
        assert convert_charset(b"abc", "x-no-such-charset") is None

    @pytest.mark.unit
    def test_empty_charset_returns_none(self):
        assert convert_charset(b"abc", "") is None

    @pytest.mark.unit
    def test_invalid_bytes_return_none(self):
        """Test bytes that are not valid in the declared charset."""
        assert convert_charset(b"\xff\xfe", "utf-8") is None

    @pytest.mark.unit
    def test_passthrough_on_unknown_charset(self):
        """Test unconverted bytes map one code point per byte."""
        assert convert_or_passthrough(b"Caf\xe9", "x-unknown") == "Caf\xe9"

    @pytest.mark.unit
    def test_passthrough_is_lossless(self):
        data = bytes(range(256))
        assert convert_or_passthrough(data, "utf-8").encode("latin-1") == data


class TestNormalizeCharsetName:
    """Tests for normalize_charset_name()."""

    @pytest.mark.unit
    def test_strips_quotes_and_whitespace(self):
        assert normalize_charset_name(' "utf-8" ') == "utf-8"

    @pytest.mark.unit
    def test_drops_language_suffix(self):
        assert normalize_charset_name("UTF-8*en") == "UTF-8"


class TestDecodeBase64:
    """Tests for decode_base64()."""

    @pytest.mark.unit
    def test_decode_valid(self):
        assert decode_base64("SGVsbG8=") == b"Hello"

    @pytest.mark.unit
    def test_decode_ignores_line_breaks(self):
        assert decode_base64("SGVs\nbG8g\r\nV29y bGQ=\n") == b"Hello World"

    @pytest.mark.unit
    def test_invalid_alphabet_returns_none(self):
        assert decode_base64("not-base64?") is None

    @pytest.mark.unit
    def test_bad_padding_returns_none(self):
        assert decode_base64("SGVsbG8") is None

    @pytest.mark.unit
    def test_empty_input(self):
        assert decode_base64("") == b""


class TestByteTransparentText:
    """Tests for from_raw(), to_raw() and clean_text()."""

    @pytest.mark.unit
    def test_round_trip_invalid_utf8(self):
        data = b"abc\xff\xfe\xe9"
        assert to_raw(from_raw(data)) == data

    @pytest.mark.unit
    def test_valid_utf8_is_decoded(self):
        assert from_raw("Café".encode("utf-8")) == "Café"

    @pytest.mark.unit
    def test_to_raw_bytes_passthrough(self):
        assert to_raw(b"\x00\x01") == b"\x00\x01"

    @pytest.mark.unit
    def test_clean_text_leaves_valid_text(self):
        assert clean_text("José") == "José"

    @pytest.mark.unit
    def test_clean_text_renders_raw_bytes(self):
        """Test 8-bit Latin-1 bytes become readable characters."""
        assert clean_text(from_raw(b"Caf\xe9")) == "Café"

    @pytest.mark.unit
    def test_clean_text_keeps_decoded_characters(self):
        """Test only raw bytes are re-rendered next to already decoded text."""
        assert clean_text(from_raw(b"Caf\xe9 ") + "été") == "Café été"

    @pytest.mark.unit
    def test_clean_text_replaces_other_lone_surrogates(self):
        assert clean_text("a\ud800b") == "a\ufffdb"

    @pytest.mark.unit
    def test_message_bytes_one_octet_per_code_point(self):
        assert message_bytes("Café") == b"Caf\xe9"

    @pytest.mark.unit
    def test_message_bytes_wide_text_as_utf8(self):
        assert message_bytes("5 €") == "5 €".encode("utf-8")


class TestDetectCharset:
    """Tests for detect_charset()."""

    @pytest.mark.unit
    def test_detect_empty(self):
        assert detect_charset(b"") is None

    @pytest.mark.unit
    def test_detect_returns_encoding_name(self):
        data = b"This is a perfectly ordinary English sentence for detection."
        assert detect_charset(data) is not None
