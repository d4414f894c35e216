"""kuro: typed JSON REST calls over httpx.

Public API:
    get, post, put, patch, delete - Verb functions (sync)
    aget, apost, aput, apatch, adelete - Verb functions (async)
    with_header, with_cookie - Request options
    Response - Base model for decoded results
    KuroError and subclasses - Typed errors

Internal (not for direct use):
    _internal.dispatch - Request dispatcher
"""

from kuro._internal.http import (
    create_async_http_client,
    create_http_client,
    get_default_async_client,
    get_default_client,
    set_default_async_client,
    set_default_client,
)
from kuro._version import __version__
from kuro.client import adelete, aget, apatch, apost, aput, delete, get, patch, post, put
from kuro.exceptions import (
    ClientFaultError,
    DecodeError,
    ErrorKind,
    HTTPStatusError,
    KuroError,
    RequestConstructionError,
    SerializationError,
    ServerFaultError,
    TransportError,
)
from kuro.models import Response, ResultContract
from kuro.options import Option, with_cookie, with_header

__all__ = [
    "__version__",
    "get",
    "post",
    "put",
    "patch",
    "delete",
    "aget",
    "apost",
    "aput",
    "apatch",
    "adelete",
    "Option",
    "with_header",
    "with_cookie",
    "Response",
    "ResultContract",
    "ErrorKind",
    "KuroError",
    "SerializationError",
    "RequestConstructionError",
    "TransportError",
    "DecodeError",
    "HTTPStatusError",
    "ClientFaultError",
    "ServerFaultError",
    "create_http_client",
    "create_async_http_client",
    "get_default_client",
    "get_default_async_client",
    "set_default_client",
    "set_default_async_client",
]
