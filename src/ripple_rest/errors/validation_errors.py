"""Validation errors raised while decoding ripple-rest resources."""

from __future__ import annotations

from typing import Any

from ripple_rest.errors.rest_errors import RippleRestError


class ValidationError(RippleRestError):
    """A resource failed validation and could not be built.

    Attributes:
        field: Wire name of the offending field, or ``None`` for the document.
        value: The rejected value as it appeared in the input.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        status_code: int = 422,
        code: str = "validation-error",
    ) -> None:
        super().__init__(message, status_code=status_code, code=code)
        self.field = field
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        if self.field is not None:
            payload["field"] = self.field
            payload["value"] = self.value
        return payload


class FormatViolation(ValidationError):
    """A named field violates its pattern, enum or date format."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        super().__init__(
            f"invalid {field}: {value!r} ({reason})",
            field=field,
            value=value,
            code="format-violation",
        )
        self.reason = reason


class MalformedNumeric(ValidationError):
    """A numeric field is present and non-empty but is not an integer."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(
            f"invalid {field}: {value!r} is not an integer",
            field=field,
            value=value,
            code="malformed-numeric",
        )
