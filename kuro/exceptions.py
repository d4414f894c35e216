"""Public exceptions for kuro."""

from enum import Enum

import httpx


class ErrorKind(str, Enum):
    """Classification of a failed call."""

    CLIENT_MALFUNCTION = "client_malfunction"
    CLIENT_FAULT = "4xx"
    SERVER_FAULT = "5xx"


class KuroError(Exception):
    """Base exception for all kuro errors."""

    kind: ErrorKind = ErrorKind.CLIENT_MALFUNCTION


class SerializationError(KuroError):
    """The request body could not be encoded as JSON."""


class RequestConstructionError(KuroError):
    """The method/URL pair does not form a valid request."""


class TransportError(KuroError):
    """The transport could not complete the exchange."""

    def __init__(self, message: str, method: str) -> None:
        super().__init__(message)
        self.method = method


class DecodeError(KuroError):
    """A success response body was not valid JSON for the result type."""


class HTTPStatusError(KuroError):
    """Error response from the server.

    Carries the response header, status code and the raw body. ``body`` is
    empty when reading it failed.
    """

    def __init__(
        self,
        message: str,
        *,
        header: httpx.Headers,
        status_code: int,
        body: bytes = b"",
    ) -> None:
        super().__init__(message)
        self.header = header
        self.status_code = status_code
        self.body = body


class ClientFaultError(HTTPStatusError):
    """4xx response."""

    kind = ErrorKind.CLIENT_FAULT


class ServerFaultError(HTTPStatusError):
    """5xx response."""

    kind = ErrorKind.SERVER_FAULT
