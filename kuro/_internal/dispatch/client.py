"""Dispatcher: one JSON round trip, classified into a result or a typed error."""

import re
from typing import Any, TypeVar

import httpx

from kuro._internal.dispatch.codec import check_decodable, decode_result, encode_body
from kuro._internal.http import debug_enabled, get_default_async_client, get_default_client, log_debug
from kuro._internal.redaction import redact_headers
from kuro.exceptions import (
    ClientFaultError,
    DecodeError,
    RequestConstructionError,
    ServerFaultError,
    TransportError,
)
from kuro.models import is_result_type
from kuro.options import Option, apply_options

T = TypeVar("T")

Timeout = float | httpx.Timeout | None

# RFC 9110 token characters
_METHOD_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


def do(
    method: str,
    url: str,
    result_type: type[T],
    body: Any = None,
    *options: Option,
    timeout: Timeout = httpx.USE_CLIENT_DEFAULT,  # type: ignore[assignment]
    client: httpx.Client | None = None,
) -> T:
    """Send one request and decode the response into ``result_type``.

    Args:
        method: HTTP method.
        url: Target URL, absolute or relative to the client's base URL.
        result_type: Type implementing ``set_header``/``set_status``.
        body: Request body, encoded as JSON. ``None`` is sent as ``null``.
        *options: Request options, applied in order.
        timeout: Deadline for the exchange. Defaults to the client's timeout.
        client: Client to send with. Defaults to the shared client.

    Returns:
        A fresh ``result_type`` instance stamped with the response header and status.

    Raises:
        SerializationError: The body could not be encoded.
        RequestConstructionError: The method or URL is invalid.
        TransportError: The exchange could not be completed.
        ClientFaultError: The server answered 4xx.
        ServerFaultError: The server answered 5xx.
        DecodeError: The success body did not decode into ``result_type``.
    """
    _check_result_type(result_type)
    client = client or get_default_client()
    request = _build_request(client, method, url, body, options, timeout)

    try:
        response = client.send(request, stream=True)
    except httpx.RequestError as e:
        raise _transport_error(method) from e

    try:
        _log_response(request, response)
        content: bytes | None = None
        read_error: httpx.RequestError | None = None
        try:
            content = response.read()
        except httpx.RequestError as e:
            read_error = e
        return _finish(response, result_type, content, read_error)
    finally:
        response.close()


async def ado(
    method: str,
    url: str,
    result_type: type[T],
    body: Any = None,
    *options: Option,
    timeout: Timeout = httpx.USE_CLIENT_DEFAULT,  # type: ignore[assignment]
    client: httpx.AsyncClient | None = None,
) -> T:
    """Async counterpart of :func:`do`, sent through an ``httpx.AsyncClient``.

    Task cancellation propagates as ``asyncio.CancelledError``; the response
    is closed either way.
    """
    _check_result_type(result_type)
    client = client or get_default_async_client()
    request = _build_request(client, method, url, body, options, timeout)

    try:
        response = await client.send(request, stream=True)
    except httpx.RequestError as e:
        raise _transport_error(method) from e

    try:
        _log_response(request, response)
        content: bytes | None = None
        read_error: httpx.RequestError | None = None
        try:
            content = await response.aread()
        except httpx.RequestError as e:
            read_error = e
        return _finish(response, result_type, content, read_error)
    finally:
        await response.aclose()


def _check_result_type(result_type: type) -> None:
    if not is_result_type(result_type):
        raise TypeError(
            f"{result_type!r} does not implement set_header(header) and set_status(status)"
        )
    check_decodable(result_type)


def _build_request(
    client: httpx.Client | httpx.AsyncClient,
    method: str,
    url: str,
    body: Any,
    options: tuple[Option, ...],
    timeout: Timeout,
) -> httpx.Request:
    payload = encode_body(body)

    if not isinstance(method, str) or not _METHOD_RE.fullmatch(method):
        raise RequestConstructionError(f"invalid method {method!r}")
    try:
        request = client.build_request(
            method,
            url,
            content=payload,
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except (httpx.InvalidURL, TypeError) as e:
        raise RequestConstructionError(f"invalid url {url!r}: {e}") from e
    if request.url.scheme not in ("http", "https") or not request.url.host:
        raise RequestConstructionError(f"invalid url {url!r}")

    apply_options(request, options)

    if debug_enabled():
        log_debug(
            f"{request.method} {request.url} headers={redact_headers(request.headers.multi_items())}"
        )
    return request


def _transport_error(method: str) -> TransportError:
    return TransportError(f"client malfunction: do request, method: {method}", method)


def _log_response(request: httpx.Request, response: httpx.Response) -> None:
    if debug_enabled():
        log_debug(f"{request.method} {request.url} -> {response.status_code}")


def _finish(
    response: httpx.Response,
    result_type: type[T],
    content: bytes | None,
    read_error: httpx.RequestError | None,
) -> T:
    """Classify the response by status code, first match wins."""
    status = response.status_code

    if status >= 500:
        if read_error is not None:
            raise ServerFaultError(
                "error 5xx: could not read error body - client malfunction",
                header=response.headers,
                status_code=status,
            ) from read_error
        raise ServerFaultError(
            "error 5xx", header=response.headers, status_code=status, body=content or b""
        )

    if status >= 400:
        # A failed read leaves the body empty and is not chained.
        raise ClientFaultError(
            "error 4xx", header=response.headers, status_code=status, body=content or b""
        )

    if read_error is not None:
        raise DecodeError("client malfunction: could not read body") from read_error

    result = decode_result(content or b"", result_type)
    result.set_header(response.headers)  # type: ignore[attr-defined]
    result.set_status(status)  # type: ignore[attr-defined]
    return result
