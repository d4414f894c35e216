"""Verb functions: the dispatcher bound to each HTTP method.

Example usage:
    import kuro

    class Echo(kuro.Response):
        message: str
        method: str

    echo = kuro.post(
        "https://example.com/echo",
        Echo,
        {"message": "hello"},
        kuro.with_header("X-Request-Id", "abc"),
    )
    echo.message      # "hello"
    echo.status_code  # 200
"""

from typing import Any, TypeVar

import httpx

from kuro._internal.dispatch import ado, do
from kuro._internal.dispatch.client import Timeout
from kuro.options import Option

T = TypeVar("T")

_DEFAULT = httpx.USE_CLIENT_DEFAULT


def get(
    url: str,
    result_type: type[T],
    *options: Option,
    timeout: Timeout = _DEFAULT,  # type: ignore[assignment]
    client: httpx.Client | None = None,
) -> T:
    """GET ``url`` and decode the response into ``result_type``."""
    return do("GET", url, result_type, None, *options, timeout=timeout, client=client)


def post(
    url: str,
    result_type: type[T],
    body: Any,
    *options: Option,
    timeout: Timeout = _DEFAULT,  # type: ignore[assignment]
    client: httpx.Client | None = None,
) -> T:
    """POST ``body`` as JSON to ``url``."""
    return do("POST", url, result_type, body, *options, timeout=timeout, client=client)


def put(
    url: str,
    result_type: type[T],
    body: Any,
    *options: Option,
    timeout: Timeout = _DEFAULT,  # type: ignore[assignment]
    client: httpx.Client | None = None,
) -> T:
    """PUT ``body`` as JSON to ``url``."""
    return do("PUT", url, result_type, body, *options, timeout=timeout, client=client)


def patch(
    url: str,
    result_type: type[T],
    body: Any,
    *options: Option,
    timeout: Timeout = _DEFAULT,  # type: ignore[assignment]
    client: httpx.Client | None = None,
) -> T:
    """PATCH ``url`` with ``body`` as JSON."""
    return do("PATCH", url, result_type, body, *options, timeout=timeout, client=client)


def delete(
    url: str,
    result_type: type[T],
    body: Any,
    *options: Option,
    timeout: Timeout = _DEFAULT,  # type: ignore[assignment]
    client: httpx.Client | None = None,
) -> T:
    """DELETE ``url``, sending ``body`` as JSON."""
    return do("DELETE", url, result_type, body, *options, timeout=timeout, client=client)


# =============================================================================
# Async
# =============================================================================


async def aget(
    url: str,
    result_type: type[T],
    *options: Option,
    timeout: Timeout = _DEFAULT,  # type: ignore[assignment]
    client: httpx.AsyncClient | None = None,
) -> T:
    """Async :func:`get`."""
    return await ado("GET", url, result_type, None, *options, timeout=timeout, client=client)


async def apost(
    url: str,
    result_type: type[T],
    body: Any,
    *options: Option,
    timeout: Timeout = _DEFAULT,  # type: ignore[assignment]
    client: httpx.AsyncClient | None = None,
) -> T:
    """Async :func:`post`."""
    return await ado("POST", url, result_type, body, *options, timeout=timeout, client=client)


async def aput(
    url: str,
    result_type: type[T],
    body: Any,
    *options: Option,
    timeout: Timeout = _DEFAULT,  # type: ignore[assignment]
    client: httpx.AsyncClient | None = None,
) -> T:
    """Async :func:`put`."""
    return await ado("PUT", url, result_type, body, *options, timeout=timeout, client=client)


async def apatch(
    url: str,
    result_type: type[T],
    body: Any,
    *options: Option,
    timeout: Timeout = _DEFAULT,  # type: ignore[assignment]
    client: httpx.AsyncClient | None = None,
) -> T:
    """Async :func:`patch`."""
    return await ado("PATCH", url, result_type, body, *options, timeout=timeout, client=client)


async def adelete(
    url: str,
    result_type: type[T],
    body: Any,
    *options: Option,
    timeout: Timeout = _DEFAULT,  # type: ignore[assignment]
    client: httpx.AsyncClient | None = None,
) -> T:
    """Async :func:`delete`."""
    return await ado("DELETE", url, result_type, body, *options, timeout=timeout, client=client)
