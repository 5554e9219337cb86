"""Tests for the primitive value codecs."""

from datetime import datetime, timedelta, timezone

import pytest

from metskit.codecs import (
    TimestampCodec,
    decode_enum,
    decode_int,
    encode_enum,
    join_idrefs,
    parse_idrefs,
)
from metskit.exceptions import (
    InvalidEnumerationError,
    InvalidValueError,
    UnparseableTimestampError,
)
from schemas.enums import Actuate, ChecksumType, ExtType, MdType


class TestEnumCodec:
    """Tests for decode_enum and encode_enum."""

    @pytest.mark.parametrize(
        "enum_cls,token,member",
        [
            (ChecksumType, "SHA-1", ChecksumType.SHA_1),
            (ChecksumType, "Adler-32", ChecksumType.ADLER_32),
            (MdType, "LC-AV", MdType.LC_AV),
            (MdType, "PREMIS:OBJECT", MdType.PREMIS_OBJECT),
            (MdType, "ISO 19115:2003 NAP", MdType.ISO_19115_2003_NAP),
            (Actuate, "onLoad", Actuate.ON_LOAD),
            (ExtType, "SMPTE-NDF29.97", ExtType.SMPTE_NDF_29_97),
        ],
    )
    def test_decode_wire_tokens(self, enum_cls, token, member):
        """Wire tokens map to their members and back exactly."""
        assert decode_enum(enum_cls, token) is member
        assert encode_enum(member) == token

    def test_decode_is_case_sensitive(self):
        """Tokens differing only in case are rejected."""
        with pytest.raises(InvalidEnumerationError):
            decode_enum(ChecksumType, "sha-1")

    def test_unknown_token_error_details(self):
        """The error carries the attribute, token and enumeration name."""
        with pytest.raises(InvalidEnumerationError) as exc_info:
            decode_enum(ChecksumType, "NOT-A-REAL-TYPE", "CHECKSUMTYPE")

        error = exc_info.value
        assert error.attribute == "CHECKSUMTYPE"
        assert error.value == "NOT-A-REAL-TYPE"
        assert error.enum_name == "ChecksumType"
        assert "NOT-A-REAL-TYPE" in error.message


class TestIdrefs:
    """Tests for IDREFS splitting and joining."""

    def test_parse_splits_on_whitespace_runs(self):
        """Any run of whitespace separates identifiers."""
        assert parse_idrefs("id1  id2\tid3\n") == ["id1", "id2", "id3"]

    def test_parse_empty(self):
        """An empty attribute yields no identifiers."""
        assert parse_idrefs("") == []

    def test_join_uses_single_spaces(self):
        """Identifiers are joined with one space."""
        assert join_idrefs(["id1", "id2", "id3"]) == "id1 id2 id3"


class TestDecodeInt:
    """Tests for integer attribute decoding."""

    @pytest.mark.parametrize(
        "text,expected", [("0", 0), ("42", 42), ("-7", -7), ("+3", 3), (" 5 ", 5)]
    )
    def test_valid(self, text, expected):
        """Signed decimal integers decode."""
        assert decode_int(text) == expected

    @pytest.mark.parametrize("text", ["", "1.5", "ten", "1e3", "١٢", "1２"])
    def test_invalid(self, text):
        """Anything else raises InvalidValueError."""
        with pytest.raises(InvalidValueError) as exc_info:
            decode_int(text, "SIZE")

        assert exc_info.value.attribute == "SIZE"
        assert "@SIZE" in exc_info.value.message


class TestTimestampCodec:
    """Tests for TimestampCodec."""

    def test_decode_utc(self):
        """A Z suffix yields a UTC-aware datetime."""
        codec = TimestampCodec()

        timestamp = codec.decode("2020-05-06T07:08:09Z")

        assert timestamp.value == datetime(2020, 5, 6, 7, 8, 9, tzinfo=timezone.utc)
        assert timestamp.value.utcoffset() == timedelta(0)
        assert timestamp.text == "2020-05-06T07:08:09Z"

    def test_decode_offset(self):
        """Numeric offsets are kept without conversion."""
        codec = TimestampCodec()

        value = codec.decode("2021-01-02T03:04:05-05:30").value

        assert value.hour == 3
        assert value.utcoffset() == -timedelta(hours=5, minutes=30)

    def test_decode_naive(self):
        """Values without an offset decode to naive datetimes."""
        codec = TimestampCodec()

        value = codec.decode("2020-05-06T07:08:09").value

        assert value.tzinfo is None

    def test_decode_fraction(self):
        """Fractional seconds decode to microseconds, truncating extra digits."""
        codec = TimestampCodec()

        assert codec.decode("2020-05-06T07:08:09.5Z").value.microsecond == 500000
        assert codec.decode("2020-05-06T07:08:09.1234567Z").value.microsecond == 123456

    @pytest.mark.parametrize(
        "text",
        [
            "2020-05-06",
            "2020-05-06 07:08:09",
            "2020-13-06T07:08:09",
            "2020-02-30T07:08:09",
            "2020-05-06T25:08:09",
            "2020-05-06T07:08:09+15:00",
            "٢٠٢٠-01-01T00:00:00",
            "2020-01-01T00:00:00.٥",
            "yesterday",
        ],
    )
    def test_decode_rejects(self, text):
        """Values outside the profile raise UnparseableTimestampError."""
        codec = TimestampCodec()

        with pytest.raises(UnparseableTimestampError) as exc_info:
            codec.decode(text, "CREATED")

        assert exc_info.value.value == text
        assert exc_info.value.attribute == "CREATED"

    @pytest.mark.parametrize(
        "text",
        [
            "2020-01-01T12:00:00.500+00:00",
            "2020-01-01T12:00:00.1234567",
            "2020-01-01T12:00:00-00:00",
            "2020-01-01T12:00:00+00:00",
            "2020-01-01T12:00:00.000Z",
        ],
    )
    def test_encode_keeps_lexical_form(self, text):
        """A decoded value is written back exactly as it was read."""
        codec = TimestampCodec()

        assert codec.encode(codec.decode(text)) == text

    def test_equal_instants_with_different_text(self):
        """Timestamps compare by text, so differently written instants differ."""
        codec = TimestampCodec()

        utc = codec.decode("2020-01-01T12:00:00Z")
        offset = codec.decode("2020-01-01T12:00:00+00:00")

        assert utc.value == offset.value
        assert utc != offset

    def test_stamp(self):
        """stamp wraps a datetime with freshly formatted text."""
        codec = TimestampCodec()
        value = datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)

        timestamp = codec.stamp(value)

        assert timestamp.value == value
        assert timestamp.text == "2024-03-01T12:30:00Z"
        assert codec.encode(timestamp) == "2024-03-01T12:30:00Z"

    def test_format_utc_designator(self):
        """A zero offset is formatted as Z."""
        codec = TimestampCodec()

        text = codec.format(datetime(2020, 5, 6, 7, 8, 9, tzinfo=timezone.utc))

        assert text == "2020-05-06T07:08:09Z"

    def test_format_without_utc_designator(self):
        """With utc_designator off a zero offset is formatted numerically."""
        codec = TimestampCodec(utc_designator=False)

        text = codec.format(datetime(2020, 5, 6, 7, 8, 9, tzinfo=timezone.utc))

        assert text == "2020-05-06T07:08:09+00:00"

    def test_format_negative_offset(self):
        """Negative offsets are formatted as -hh:mm."""
        codec = TimestampCodec()
        tz = timezone(-timedelta(hours=5, minutes=30))

        assert codec.format(datetime(2021, 1, 2, 3, 4, 5, tzinfo=tz)) == "2021-01-02T03:04:05-05:30"

    def test_format_naive_has_no_offset(self):
        """Naive values are formatted without an offset."""
        codec = TimestampCodec()

        assert codec.format(datetime(2020, 5, 6, 7, 8, 9)) == "2020-05-06T07:08:09"

    def test_format_trims_fraction(self):
        """Fractions are formatted only when non-zero, without trailing zeros."""
        codec = TimestampCodec()

        assert codec.format(datetime(2020, 5, 6, 7, 8, 9, 500000)) == "2020-05-06T07:08:09.5"
        assert codec.format(datetime(2020, 5, 6, 7, 8, 9, 120)) == "2020-05-06T07:08:09.00012"

    def test_stamped_text_decodes_to_same_value(self):
        """Re-reading a stamped value gives an equal datetime."""
        codec = TimestampCodec()
        value = datetime(2021, 1, 2, 3, 4, 5, 250000, tzinfo=timezone(timedelta(hours=2)))

        assert codec.decode(codec.stamp(value).text).value == value
