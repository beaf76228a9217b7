"""
Pytest configuration and shared fixtures for the HTMX WASM demo server tests.
"""
import pytest
from fastapi.testclient import TestClient

from htmx_wasm_server.core.config import Settings
from htmx_wasm_server.main import create_app

INDEX_HTML = "<!DOCTYPE html><html><body><h1>HTMX + WASM</h1></body></html>"
PLAY_HTML = "<!DOCTYPE html><html><body><h1>Realtime Playground</h1></body></html>"
WASM_BYTES = b"\x00asm\x01\x00\x00\x00"


@pytest.fixture
def serving_root(tmp_path):
    """Throwaway serving root with the entry pages and a compiled WASM package."""
    (tmp_path / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (tmp_path / "play.html").write_text(PLAY_HTML, encoding="utf-8")
    pkg = tmp_path / "pkg"
    pkg.mkdir()
    (pkg / "wasm_demo_bg.wasm").write_bytes(WASM_BYTES)
    (pkg / "wasm_demo.js").write_text("export default function init() {}", encoding="utf-8")
    return tmp_path


@pytest.fixture
def make_client(serving_root):
    """Factory building a client for an app created with overridden settings."""
    clients = []

    def _make(**overrides):
        settings = Settings(SERVING_ROOT=str(serving_root), **overrides)
        client = TestClient(create_app(settings))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    return make_client()
