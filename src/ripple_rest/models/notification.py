"""Notification — a ledger event concerning one account.

Returned by the ripple-rest notifications endpoint. Notifications for an
account form a chronological chain linked through the ``previous_*`` and
``next_*`` URL and hash fields.
"""

from __future__ import annotations

import enum
import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar

from ripple_rest.config.settings import CodecConfig
from ripple_rest.errors.validation_errors import ValidationError
from ripple_rest.models.base import HasAdditionalProperties
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

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class NotificationType(enum.StrEnum):
    """The resource type a notification corresponds to."""

    PAYMENT = "payment"
    ORDER = "order"
    TRUSTLINE = "trustline"
    ACCOUNTSETTINGS = "accountsettings"


class Direction(enum.StrEnum):
    """Direction of the transaction, seen from the queried account."""

    INCOMING = "incoming"
    OUTGOING = "outgoing"
    PASSTHROUGH = "passthrough"


class State(enum.StrEnum):
    """State of the transaction in the ledger."""

    VALIDATED = "validated"
    FAILED = "failed"


# ---------------------------------------------------------------------------
# Field table
# ---------------------------------------------------------------------------

# Wire name -> decoder, in serialization order.
_FIELD_CODECS: dict[str, Callable[[str, Any], Any]] = {
    "account": lambda name, v: match_pattern(name, v, ACCOUNT_PATTERN),
    "type": lambda name, v: parse_enum(name, v, NotificationType),
    "direction": lambda name, v: parse_enum(name, v, Direction),
    "state": lambda name, v: parse_enum(name, v, State),
    "result": lambda name, v: match_pattern(name, v, RESULT_PATTERN),
    "ledger": parse_ledger,
    "hash": lambda name, v: match_pattern(name, v, HASH256_PATTERN),
    "timestamp": parse_timestamp,
    "transaction_url": require_str,
    "previous_notification_url": require_str,
    "next_notification_url": require_str,
    "previous_hash": require_str,
    "next_hash": require_str,
}


# ---------------------------------------------------------------------------
# Notification
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Notification(HasAdditionalProperties):
    """A notification about a payment, order, trustline or settings change.

    Every named field is optional; ``None`` means the key was absent. Named
    fields are validated on construction, so an instance never holds a value
    that violates its format.

    Attributes:
        account: Ripple account address the notification is about.
        type: Resource type (payment, order, trustline, accountsettings).
        direction: incoming, outgoing or passthrough.
        state: validated or failed.
        result: rippled engine result code, e.g. ``tesSUCCESS``.
        ledger: Index of the ledger holding the transaction.
        hash: Transaction hash (64 hex chars) or empty.
        timestamp: When the transaction was validated or failed.
        transaction_url: URL of the full resource.
        previous_notification_url: URL of the preceding notification.
        next_notification_url: URL of the following notification.
        previous_hash: Hash of the preceding notification's transaction.
        next_hash: Hash of the following notification's transaction.
        additional_properties: Unrecognised keys, kept verbatim.
    """

    reserved_keys: ClassVar[frozenset[str]] = frozenset(_FIELD_CODECS)

    account: str | None = None
    type: NotificationType | None = None
    direction: Direction | None = None
    state: State | None = None
    result: str | None = None
    ledger: int | None = None
    hash: str | None = None
    timestamp: datetime | None = None
    transaction_url: str | None = None
    previous_notification_url: str | None = None
    next_notification_url: str | None = None
    previous_hash: str | None = None
    next_hash: str | None = None
    additional_properties: dict[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        for name, decode in _FIELD_CODECS.items():
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, decode(name, value))
        self._check_additional_properties()

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Notification:
        """Create a Notification from a decoded JSON object.

        Named keys are validated; ``null`` means absent. Any other key is
        kept in ``additional_properties`` with its value unchanged.

        Raises:
            ValidationError: If the input is not an object or a named field
                is invalid (``FormatViolation`` / ``MalformedNumeric``).
        """
        if not isinstance(data, Mapping):
            msg = f"expected a JSON object, got {type(data).__name__}"
            raise ValidationError(msg)

        named = {key: value for key, value in data.items() if key in cls.reserved_keys}
        try:
            notification = cls(**named)
        except ValidationError as exc:
            logger.debug("Rejected notification: %s", exc.message)
            raise

        for key, value in data.items():
            if key not in cls.reserved_keys:
                notification.set_additional_property(key, value)
        return notification

    @classmethod
    def from_json(cls, raw: str | bytes) -> Notification:
        """Create a Notification from JSON text.

        Raises:
            ValidationError: If *raw* is not valid UTF-8 JSON or fails validation.
        """
        return cls.from_dict(decode_json(raw))

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def to_dict(self, *, codec: CodecConfig | None = None) -> dict[str, Any]:
        """Serialize to a dict matching the ripple-rest JSON format.

        Absent fields are omitted; ``ledger`` is written as a decimal string.

        Raises:
            ValidationError: If a named key was added to ``additional_properties``.
        """
        self._check_additional_properties()
        codec = codec or CodecConfig()
        out: dict[str, Any] = {}
        for name in _FIELD_CODECS:
            value = getattr(self, name)
            if value is None:
                continue
            if name == "ledger":
                value = format_ledger(value)
            elif name == "timestamp":
                value = format_timestamp(value, codec.timestamp_style)
            elif isinstance(value, enum.Enum):
                value = value.value
            out[name] = value
        out.update(self.additional_properties)
        return out

    def to_json(self, *, codec: CodecConfig | None = None) -> str:
        """Serialize to JSON text using the *codec* settings."""
        codec = codec or CodecConfig()
        return json.dumps(
            self.to_dict(codec=codec),
            indent=codec.indent,
            sort_keys=codec.sort_keys,
            ensure_ascii=codec.ensure_ascii,
        )
