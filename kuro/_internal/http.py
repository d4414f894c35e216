"""Shared HTTP client configuration."""

import asyncio
import os
import sys
import threading
import weakref

import httpx

from kuro._version import __version__

DEFAULT_TIMEOUT = 30.0

_lock = threading.Lock()
_client: httpx.Client | None = None
_async_client: httpx.AsyncClient | None = None
_async_clients: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, httpx.AsyncClient]" = (
    weakref.WeakKeyDictionary()
)


def _client_kwargs(timeout: float | None, base_url: str | None) -> dict:
    if timeout is None:
        timeout = float(os.environ.get("KURO_TIMEOUT", str(DEFAULT_TIMEOUT)))
    if base_url is None:
        base_url = os.environ.get("KURO_BASE_URL")
    return {
        "timeout": timeout,
        "base_url": base_url or "",
        "headers": {"User-Agent": f"kuro/{__version__}"},
    }


def create_http_client(
    *,
    timeout: float | None = None,
    base_url: str | None = None,
) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        timeout: Request timeout in seconds. Defaults to ``KURO_TIMEOUT`` or 30s.
        base_url: Optional base URL for all requests. Defaults to ``KURO_BASE_URL``.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(**_client_kwargs(timeout, base_url))


def create_async_http_client(
    *,
    timeout: float | None = None,
    base_url: str | None = None,
) -> httpx.AsyncClient:
    """Create configured async HTTP client. See :func:`create_http_client`."""
    return httpx.AsyncClient(**_client_kwargs(timeout, base_url))


def get_default_client() -> httpx.Client:
    """Return the process-wide client, creating it on first use."""
    global _client
    with _lock:
        if _client is None:
            _client = create_http_client()
        return _client


def get_default_async_client() -> httpx.AsyncClient:
    """Return the shared async client for the running event loop.

    An ``httpx.AsyncClient`` pools connections bound to the loop it first ran
    on, so one client is kept per loop and dropped when the loop is collected.
    A client installed with :func:`set_default_async_client` is returned as is.

    Raises:
        RuntimeError: If called outside a running event loop.
    """
    loop = asyncio.get_running_loop()
    with _lock:
        if _async_client is not None:
            return _async_client
        client = _async_clients.get(loop)
        if client is None:
            client = _async_clients[loop] = create_async_http_client()
        return client


def set_default_client(client: httpx.Client | None) -> None:
    """Replace the process-wide client. ``None`` resets to lazy creation."""
    global _client
    with _lock:
        _client = client


def set_default_async_client(client: httpx.AsyncClient | None) -> None:
    """Install one async client for every loop. ``None`` resets to per-loop clients."""
    global _async_client
    with _lock:
        _async_client = client
        _async_clients.clear()


def debug_enabled() -> bool:
    return os.environ.get("KURO_DEBUG", "") == "1"


def log_debug(message: str) -> None:
    """Log a debug message to stderr if ``KURO_DEBUG=1``."""
    if debug_enabled():
        print(f"[kuro] {message}", file=sys.stderr)
