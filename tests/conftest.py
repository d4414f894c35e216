"""Shared fixtures for kuro tests."""

import asyncio
import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

import kuro
from kuro._internal import http

PROXY_VARS = ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy")


def _close_async_clients() -> None:
    clients = [*http._async_clients.values()]
    if http._async_client is not None:
        clients.append(http._async_client)
    for client in clients:
        try:
            asyncio.run(client.aclose())
        except RuntimeError:
            # Pooled connections bound to an already closed loop.
            pass


@pytest.fixture(autouse=True)
def reset_default_clients():
    """Give each test fresh lazily-created shared clients."""
    kuro.set_default_client(None)
    kuro.set_default_async_client(None)
    yield
    if http._client is not None:
        http._client.close()
    _close_async_clients()
    kuro.set_default_client(None)
    kuro.set_default_async_client(None)


class _ProductHandler(BaseHTTPRequestHandler):
    """Keep-alive JSON endpoint. ``/slow`` stalls until the server is released."""

    protocol_version = "HTTP/1.1"

    def do_GET(self):
        self.rfile.read(int(self.headers.get("Content-Length", 0)))
        if self.path == "/slow":
            self.server.release.wait(5)
        body = json.dumps({"id": 1, "title": "local"}).encode()
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def local_server(monkeypatch):
    """Serve ``_ProductHandler`` on localhost and yield its base URL."""
    for var in PROXY_VARS:
        monkeypatch.delenv(var, raising=False)

    server = ThreadingHTTPServer(("127.0.0.1", 0), _ProductHandler)
    server.daemon_threads = True
    server.release = threading.Event()
    server.handle_error = lambda request, client_address: None
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    yield f"http://127.0.0.1:{server.server_address[1]}"

    server.release.set()
    server.shutdown()
    server.server_close()
