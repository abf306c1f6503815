"""Tests for the shared field codecs."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from ripple_rest.config.settings import TimestampStyle
from ripple_rest.errors import FormatViolation, MalformedNumeric, ValidationError
from ripple_rest.models.fields import (
    ACCOUNT_PATTERN,
    HASH256_PATTERN,
    RESULT_PATTERN,
    decode_json,
    format_ledger,
    format_timestamp,
    match_pattern,
    parse_enum,
    parse_ledger,
    parse_timestamp,
    require_str,
)
from ripple_rest.models.notification import State

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------


class TestPatterns:
    def test_account_length_bounds(self):
        assert ACCOUNT_PATTERN.fullmatch("r" + "a" * 25)
        assert ACCOUNT_PATTERN.fullmatch("r" + "a" * 33)
        assert not ACCOUNT_PATTERN.fullmatch("r" + "a" * 24)
        assert not ACCOUNT_PATTERN.fullmatch("r" + "a" * 34)

    def test_result_categories(self):
        for letter in "cfjlms":
            assert RESULT_PATTERN.fullmatch(f"te{letter}FOO")
        assert not RESULT_PATTERN.fullmatch("teXFOO")

    def test_hash_case_insensitive(self):
        assert HASH256_PATTERN.fullmatch("aB" * 32)
        assert HASH256_PATTERN.fullmatch("")

    def test_match_pattern_returns_value(self):
        assert match_pattern("result", "tesSUCCESS", RESULT_PATTERN) == "tesSUCCESS"

    def test_match_pattern_partial_is_rejected(self):
        with pytest.raises(FormatViolation):
            match_pattern("result", "tesSUCCESS!", RESULT_PATTERN)

    def test_require_str(self):
        assert require_str("next_hash", "") == ""
        with pytest.raises(FormatViolation) as exc_info:
            require_str("next_hash", None)
        assert exc_info.value.reason == "expected a string"


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class TestParseEnum:
    def test_token(self):
        assert parse_enum("state", "failed", State) is State.FAILED

    def test_member_passthrough(self):
        assert parse_enum("state", State.VALIDATED, State) is State.VALIDATED

    def test_unknown_lists_allowed(self):
        with pytest.raises(FormatViolation) as exc_info:
            parse_enum("state", "pending", State)
        assert exc_info.value.reason == "expected one of validated, failed"

    def test_non_string(self):
        with pytest.raises(FormatViolation):
            parse_enum("state", 1, State)


# ---------------------------------------------------------------------------
# Ledger
# ---------------------------------------------------------------------------


class TestLedgerCodec:
    def test_parse(self):
        assert parse_ledger("ledger", "42") == 42
        assert parse_ledger("ledger", 42) == 42

    def test_negative_accepted(self):
        assert parse_ledger("ledger", "-1") == -1

    def test_absent(self):
        assert parse_ledger("ledger", None) is None
        assert parse_ledger("ledger", "") is None

    @pytest.mark.parametrize("value", [" 42", "42 ", "\t", " "])
    def test_padding_rejected(self, value):
        with pytest.raises(MalformedNumeric):
            parse_ledger("ledger", value)

    def test_malformed(self):
        with pytest.raises(MalformedNumeric) as exc_info:
            parse_ledger("ledger", "abc")
        assert exc_info.value.code == "malformed-numeric"
        assert exc_info.value.value == "abc"

    def test_int64_bounds(self):
        assert parse_ledger("ledger", -(2**63)) == -(2**63)
        with pytest.raises(MalformedNumeric):
            parse_ledger("ledger", -(2**63) - 1)

    def test_format(self):
        assert format_ledger(348860) == "348860"


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------


class TestTimestampCodec:
    def test_parse_zulu(self):
        assert parse_timestamp("timestamp", "2025-01-01T00:00:00Z") == datetime(
            2025, 1, 1, tzinfo=UTC
        )

    def test_parse_fraction_and_offset(self):
        ts = parse_timestamp("timestamp", "2014-09-24T21:21:50.500+02:00")
        assert ts.microsecond == 500_000
        assert ts.utcoffset() == timedelta(hours=2)

    def test_naive_is_utc(self):
        ts = parse_timestamp("timestamp", "2025-01-01T12:00:00")
        assert ts.tzinfo is UTC

    def test_date_only_rejected(self):
        with pytest.raises(FormatViolation):
            parse_timestamp("timestamp", "2025-01-01")

    def test_garbage_rejected(self):
        with pytest.raises(FormatViolation):
            parse_timestamp("timestamp", "2025-13-01T00:00:00Z")

    def test_format_styles(self):
        ts = datetime(2025, 1, 1, tzinfo=UTC)
        assert format_timestamp(ts) == "2025-01-01T00:00:00Z"
        assert format_timestamp(ts, TimestampStyle.OFFSET) == "2025-01-01T00:00:00+00:00"

    def test_format_keeps_other_offsets(self):
        ts = datetime(2025, 1, 1, tzinfo=timezone(timedelta(hours=-5)))
        assert format_timestamp(ts) == "2025-01-01T00:00:00-05:00"


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


class TestDecodeJson:
    def test_text_and_bytes(self):
        assert decode_json('{"a": 1}') == {"a": 1}
        assert decode_json(b'{"a": 1}') == {"a": 1}

    def test_invalid_utf8(self):
        with pytest.raises(ValidationError) as exc_info:
            decode_json(b'{"foo": "\xff"}')
        assert exc_info.value.code == "validation-error"
        assert exc_info.value.message.startswith("invalid JSON: invalid start byte")

    def test_invalid_json(self):
        with pytest.raises(ValidationError, match="invalid JSON: Expecting"):
            decode_json("{")
