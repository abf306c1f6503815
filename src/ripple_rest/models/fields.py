"""Field codecs shared by ripple-rest resource models.

Each ``parse_*`` helper takes the wire name of the field it is decoding so
that a rejected value is reported against that field. Parsers accept both
the raw JSON form and an already-decoded Python value, which lets the same
helper serve the JSON path and direct construction.
"""

from __future__ import annotations

import enum
import json
import re
from datetime import UTC, datetime
from typing import Any, TypeVar

from ripple_rest.config.settings import TimestampStyle
from ripple_rest.errors.validation_errors import FormatViolation, MalformedNumeric, ValidationError

E = TypeVar("E", bound=enum.Enum)

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

# Base58 ledger address: leading 'r', no 0, O, I or l.
ACCOUNT_PATTERN = re.compile(r"^r[1-9A-HJ-NP-Za-km-z]{25,33}$")

# Engine result code: te + category letter + name (tesSUCCESS, tecNO_DST, ...)
RESULT_PATTERN = re.compile(r"te[cfjlms][A-Za-z_]+")

# Hex of a 256-bit hash, or empty.
HASH256_PATTERN = re.compile(r"^$|^[A-Fa-f0-9]{64}$")

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


# ---------------------------------------------------------------------------
# Strings, patterns and enums
# ---------------------------------------------------------------------------


def require_str(field: str, value: Any) -> str:
    """Return *value* if it is a string, else raise ``FormatViolation``."""
    if not isinstance(value, str):
        raise FormatViolation(field, value, "expected a string")
    return value


def match_pattern(field: str, value: Any, pattern: re.Pattern[str]) -> str:
    """Validate that the whole of *value* matches *pattern*.

    Raises:
        FormatViolation: If *value* is not a string or does not match.
    """
    text = require_str(field, value)
    if pattern.fullmatch(text) is None:
        raise FormatViolation(field, value, f"does not match {pattern.pattern}")
    return text


def parse_enum(field: str, value: Any, enum_cls: type[E]) -> E:
    """Parse a wire token into a member of *enum_cls*."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value)
        except ValueError:
            pass
    allowed = ", ".join(str(member.value) for member in enum_cls)
    raise FormatViolation(field, value, f"expected one of {allowed}")


# ---------------------------------------------------------------------------
# Ledger index
# ---------------------------------------------------------------------------


def parse_ledger(field: str, value: Any) -> int | None:
    """Decode a ledger index sent as a decimal string (or a JSON integer).

    Only ``None`` and ``""`` decode to ``None``; padded digits are rejected.

    Raises:
        MalformedNumeric: If the value is present but not a 64-bit integer.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise MalformedNumeric(field, value)
    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        if value == "":
            return None
        if _INTEGER_PATTERN.fullmatch(value) is None:
            raise MalformedNumeric(field, value)
        number = int(value)
    else:
        raise MalformedNumeric(field, value)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise MalformedNumeric(field, value)
    return number


def format_ledger(value: int) -> str:
    """Encode a ledger index as its decimal string."""
    return str(value)


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------


def parse_timestamp(field: str, value: Any) -> datetime:
    """Parse an ISO 8601 combined date and time.

    Values without a UTC offset are taken to be UTC.

    Raises:
        FormatViolation: If the value is not a date-time string.
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        text = require_str(field, value)
        # A bare date parses with fromisoformat but is not a combined date-time.
        if "T" not in text.upper() and " " not in text:
            raise FormatViolation(field, value, "expected an ISO 8601 date-time")
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise FormatViolation(field, value, "expected an ISO 8601 date-time") from None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def format_timestamp(value: datetime, style: TimestampStyle = TimestampStyle.ZULU) -> str:
    """Format a timestamp as ISO 8601, writing UTC as ``Z`` in ZULU style."""
    text = value.isoformat()
    if style == TimestampStyle.ZULU and value.utcoffset() is not None and text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


def decode_json(raw: str | bytes) -> Any:
    """Decode JSON text or UTF-8 bytes.

    Raises:
        ValidationError: If *raw* is not valid UTF-8 or not valid JSON.
    """
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        msg = f"invalid JSON: {exc.msg}"
        raise ValidationError(msg) from exc
    except UnicodeDecodeError as exc:
        msg = f"invalid JSON: {exc.reason} at byte {exc.start}"
        raise ValidationError(msg) from exc
