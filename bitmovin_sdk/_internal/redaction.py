"""Masking of credentials before they reach log output."""

from collections.abc import Mapping
from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "x-api-key",
    "api_key",
    "apikey",
    "authorization",
    "token",
    "secret",
    "password",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of request headers with credential values masked.

    Header names are matched case-insensitively.
    """
    return {
        name: REDACTED_VALUE if name.lower() in REDACT_KEYS else value
        for name, value in headers.items()
    }


def redact_payload(payload: Any) -> Any:
    """Recursively redact sensitive keys from a decoded JSON body.

    Objects nested anywhere, including inside top-level arrays, are masked.
    Scalars are returned as-is. The original payload is never mutated.
    """
    if isinstance(payload, dict):
        return {
            key: REDACTED_VALUE if _is_sensitive(key) else redact_payload(value)
            for key, value in payload.items()
        }
    if isinstance(payload, list):
        return [redact_payload(item) for item in payload]
    return payload


def _is_sensitive(key: Any) -> bool:
    return isinstance(key, str) and key.lower() in REDACT_KEYS


def mask_secret(value: str, visible: int = 4) -> str:
    """Mask all but the last few characters of a credential."""
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]
