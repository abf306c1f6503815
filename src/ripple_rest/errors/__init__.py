"""Error hierarchy for ripple-rest."""

from ripple_rest.errors.rest_errors import RippleRestError
from ripple_rest.errors.validation_errors import (
    FormatViolation,
    MalformedNumeric,
    ValidationError,
)

__all__ = ["FormatViolation", "MalformedNumeric", "RippleRestError", "ValidationError"]
