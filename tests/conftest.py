from __future__ import annotations

import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Generator

import pytest

from config import config
from tests.helpers.fake_coinapi import FakeCoinApi, make_handler


@pytest.fixture(scope="function")
def fake_coinapi() -> Generator[FakeCoinApi, None, None]:
    fake = FakeCoinApi()
    server = ThreadingHTTPServer(("127.0.0.1", 0), make_handler(fake))
    host, port = server.server_address[:2]
    fake.base_url = f"http://{host}:{port}/v1/exchangerate"
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield fake
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


@pytest.fixture(scope="function")
def closed_port_url() -> str:
    server = ThreadingHTTPServer(("127.0.0.1", 0), BaseHTTPRequestHandler)
    host, port = server.server_address[:2]
    server.server_close()
    return f"http://{host}:{port}/v1/exchangerate"


@pytest.fixture(autouse=True)
def _reset_config_cache() -> Generator[None, None, None]:
    config.cache_clear()
    yield
    config.cache_clear()
