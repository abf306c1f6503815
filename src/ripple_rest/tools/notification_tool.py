#!/usr/bin/env python3
"""Notification Tool — check and normalize ripple-rest notification JSON.

A standalone CLI utility for working with saved notification responses:

    # Validate a notification (or a JSON array of notifications)
    python -m ripple_rest.tools.notification_tool validate notification.json

    # Re-serialize in canonical form (reads stdin when the path is "-")
    python -m ripple_rest.tools.notification_tool normalize -

Output formatting follows ``RIPPLEREST_CODEC__*`` settings and log verbosity
follows ``RIPPLEREST_LOGGING__LEVEL`` (``RIPPLEREST_DEBUG=true`` forces DEBUG).
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

from ripple_rest.config.settings import AppConfig, CodecConfig, LogLevel
from ripple_rest.errors.validation_errors import ValidationError
from ripple_rest.models.fields import decode_json
from ripple_rest.models.notification import Notification

logger = logging.getLogger(__name__)


def _read_document(path: str) -> Any:
    """Read and decode the JSON document at *path* ("-" for stdin)."""
    raw = sys.stdin.read() if path == "-" else Path(path).read_bytes()
    return decode_json(raw)


def _load_notifications(path: str) -> tuple[list[Notification], bool]:
    """Parse every notification in the document; flag whether it was an array."""
    document = _read_document(path)
    if isinstance(document, list):
        return [Notification.from_dict(item) for item in document], True
    return [Notification.from_dict(document)], False


def _cmd_validate(path: str) -> None:
    """Validate notifications and report the first failure."""
    notifications, _ = _load_notifications(path)
    for index, notification in enumerate(notifications):
        extra = len(notification.additional_properties)
        print(f"OK [{index}] {notification.account or '-'} ({extra} additional properties)")
    logger.info("Validated %d notification(s) from %s", len(notifications), path)


def _cmd_normalize(path: str, codec: CodecConfig) -> None:
    """Print notifications re-serialized with the *codec* settings."""
    notifications, is_array = _load_notifications(path)
    if not is_array:
        print(notifications[0].to_json(codec=codec))
        return
    print(
        json.dumps(
            [n.to_dict(codec=codec) for n in notifications],
            indent=codec.indent,
            sort_keys=codec.sort_keys,
            ensure_ascii=codec.ensure_ascii,
        )
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(__doc__)
        sys.exit(1)

    config = AppConfig()
    level = LogLevel.DEBUG if config.debug else config.logging.level
    logging.basicConfig(level=level.value, format=config.logging.format)

    cmd = args[0].lower()
    if cmd not in ("validate", "normalize"):
        print(f"Unknown command: {cmd}")
        print(__doc__)
        sys.exit(1)
    if len(args) < 2:
        print(f"Usage: notification_tool {cmd} <path|->")
        sys.exit(1)

    path = args[1]
    try:
        if cmd == "validate":
            _cmd_validate(path)
        else:
            _cmd_normalize(path, config.codec)
    except ValidationError as exc:
        print(json.dumps(exc.to_dict(), default=str))
        sys.exit(1)
    except OSError as exc:
        print(f"Cannot read {path}: {exc.strerror or exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
