"""Request options applied to an outgoing request before it is sent."""

from collections.abc import Callable

import httpx

Option = Callable[[httpx.Request], None]


def with_header(key: str, value: str) -> Option:
    """Add a header value to the request.

    Existing values for ``key`` are kept; the new value is appended.
    """

    def apply(request: httpx.Request) -> None:
        request.headers = httpx.Headers([*request.headers.multi_items(), (key, value)])

    return apply


def with_cookie(name: str, value: str) -> Option:
    """Attach a cookie to the request's ``Cookie`` header.

    The name and value are sanitized so they cannot add further cookies:
    CR/LF in the name become ``-``; bytes not allowed in a cookie value
    (controls, non-ASCII, ``"``, ``;``, ``\\``) are dropped, and a value
    containing a space or comma is quoted.
    """

    def apply(request: httpx.Request) -> None:
        cookie = f"{_sanitize_cookie_name(name)}={_sanitize_cookie_value(value)}"
        existing = request.headers.get("Cookie")
        request.headers["Cookie"] = f"{existing}; {cookie}" if existing else cookie

    return apply


def _sanitize_cookie_name(name: str) -> str:
    return name.replace("\n", "-").replace("\r", "-")


def _sanitize_cookie_value(value: str) -> str:
    value = "".join(c for c in value if " " <= c < "\x7f" and c not in '";\\')
    if " " in value or "," in value:
        return f'"{value}"'
    return value


def apply_options(request: httpx.Request, options: tuple[Option, ...]) -> None:
    for option in options:
        option(request)
