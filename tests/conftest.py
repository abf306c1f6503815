"""Shared test fixtures for the ripple-rest test suite."""

from __future__ import annotations

import os
from typing import Any

import pytest

ACCOUNT = "rHb9CJAWyB4rj91VRWn96DkukG4bwdtyTh"
TX_HASH = "9D591B18EDDD34F0B6CF4223A2940AEA2C3CC778925BABF289E0011CD8FA056E"
PREV_HASH = "1D591B18EDDD34F0B6CF4223A2940AEA2C3CC778925BABF289E0011CD8FA0560"
BASE_URL = "http://localhost:5990/v1/accounts/" + ACCOUNT


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep RIPPLEREST_* variables from the host out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("RIPPLEREST_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def notification_payload() -> dict[str, Any]:
    """A complete notification as returned by ripple-rest."""
    return {
        "account": ACCOUNT,
        "type": "payment",
        "direction": "outgoing",
        "state": "validated",
        "result": "tesSUCCESS",
        "ledger": "8924146",
        "hash": TX_HASH,
        "timestamp": "2014-09-24T21:21:50Z",
        "transaction_url": f"{BASE_URL}/payments/{TX_HASH}",
        "previous_notification_url": f"{BASE_URL}/notifications/{PREV_HASH}",
        "next_notification_url": "",
        "previous_hash": PREV_HASH,
        "next_hash": "",
    }


@pytest.fixture
def minimal_payload() -> dict[str, Any]:
    """The smallest notification used in end-to-end examples."""
    return {
        "account": "rXXXXXXXXXXXXXXXXXXXXXXXXXXX",
        "type": "payment",
        "direction": "incoming",
        "state": "validated",
        "result": "tesSUCCESS",
        "ledger": "348860",
        "hash": "",
        "timestamp": "2025-01-01T00:00:00Z",
        "extra_field": 42,
    }
