"""Result types the dispatcher decodes responses into.

Any type exposing ``set_header`` and ``set_status`` can be used as a result
type. The easiest way is to subclass :class:`Response`:

    class Product(Response):
        id: int
        title: str

    product = kuro.get("https://example.com/products/1", Product)
    product.status_code  # 200
"""

from typing import Protocol, runtime_checkable

import httpx
from pydantic import BaseModel, PrivateAttr


@runtime_checkable
class ResultContract(Protocol):
    """Capability a result type needs so response metadata can be stamped on it."""

    def set_header(self, header: httpx.Headers) -> None: ...

    def set_status(self, status: int) -> None: ...


class Response(BaseModel):
    """Base model for a decoded JSON response body.

    The response header and status code are private attributes: they are
    never read from nor written to JSON.
    """

    _header: httpx.Headers = PrivateAttr(default_factory=httpx.Headers)
    _status_code: int = PrivateAttr(default=0)

    @property
    def header(self) -> httpx.Headers:
        return self._header

    @property
    def status_code(self) -> int:
        return self._status_code

    def set_header(self, header: httpx.Headers) -> None:
        self._header = header

    def set_status(self, status: int) -> None:
        self._status_code = status

    def __str__(self) -> str:
        return f"header: {dict(self._header)}, status: {self._status_code}"


def is_result_type(result_type: type) -> bool:
    """Check that instances of ``result_type`` would satisfy :class:`ResultContract`."""
    return all(
        callable(getattr(result_type, name, None)) for name in ("set_header", "set_status")
    )
