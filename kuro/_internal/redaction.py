"""Redaction of sensitive header values for debug traces."""

from collections.abc import Iterable

REDACT_KEYS: frozenset[str] = frozenset({
    "authorization",
    "proxy-authorization",
    "cookie",
    "set-cookie",
    "x-api-key",
    "x-auth-token",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Copy headers into a plain dict, redacting sensitive values.

    Keys are matched case-insensitively. Repeated keys are joined with ", ".
    The input is never mutated.

    Args:
        headers: Header items, e.g. ``httpx.Headers.multi_items()``.

    Returns:
        A new dictionary with sensitive values replaced by "[REDACTED]".
    """
    result: dict[str, str] = {}
    for key, value in headers:
        if key.lower() in REDACT_KEYS:
            value = REDACTED_VALUE
        result[key] = f"{result[key]}, {value}" if key in result else value
    return result
