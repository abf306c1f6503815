"""RippleRestError — base exception class for all ripple-rest errors."""

from __future__ import annotations

from typing import Any


class RippleRestError(Exception):
    """Base error for all ripple-rest client operations.

    Attributes:
        message: Human-readable error description.
        status_code: Suggested HTTP status code.
        code: Machine-readable error code string.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 500,
        code: str = "ripple-rest-error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a structured error payload."""
        return {"code": self.code, "message": self.message}
