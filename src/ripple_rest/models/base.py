"""HasAdditionalProperties — catch-all storage for unrecognised JSON keys."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from ripple_rest.errors.validation_errors import ValidationError

logger = logging.getLogger(__name__)


class HasAdditionalProperties:
    """Mixin for resources that keep JSON keys they do not model.

    Subclasses provide an ``additional_properties`` dict and list their named
    wire keys in ``reserved_keys``; the two key sets never overlap.
    """

    reserved_keys: ClassVar[frozenset[str]] = frozenset()
    additional_properties: dict[str, Any]

    def set_additional_property(self, name: str, value: Any) -> None:
        """Store one unrecognised key and its value verbatim.

        Raises:
            ValidationError: If *name* is one of the named fields.
        """
        if name in self.reserved_keys:
            msg = f"{name!r} is a named field, not an additional property"
            raise ValidationError(msg, field=name, value=value)
        logger.debug("%s: keeping unrecognised key %r", type(self).__name__, name)
        self.additional_properties[name] = value

    def _check_additional_properties(self) -> None:
        overlap = self.reserved_keys.intersection(self.additional_properties)
        if overlap:
            name = sorted(overlap)[0]
            msg = f"{name!r} is a named field, not an additional property"
            raise ValidationError(msg, field=name, value=self.additional_properties[name])
