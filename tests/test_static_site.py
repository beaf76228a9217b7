"""
Tests for page and static file serving (api/pages.py, services/static_site.py).
"""
from conftest import INDEX_HTML, PLAY_HTML, WASM_BYTES


class TestPages:

    def test_index(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.text == INDEX_HTML
        assert response.headers["content-type"].startswith("text/html")

    def test_play(self, client):
        response = client.get("/play")

        assert response.status_code == 200
        assert response.text == PLAY_HTML

    def test_missing_index_is_not_found(self, client, serving_root):
        (serving_root / "index.html").unlink()

        assert client.get("/").status_code == 404


class TestStaticFiles:

    def test_serves_file_verbatim(self, client):
        response = client.get("/index.html")

        assert response.status_code == 200
        assert response.text == INDEX_HTML

    def test_wasm_content_type(self, client):
        response = client.get("/pkg/wasm_demo_bg.wasm")

        assert response.status_code == 200
        assert response.content == WASM_BYTES
        assert response.headers["content-type"] == "application/wasm"

    def test_javascript_content_type(self, client):
        response = client.get("/pkg/wasm_demo.js")

        assert response.headers["content-type"].startswith("application/javascript")

    def test_missing_file_is_default_not_found(self, client):
        response = client.get("/does/not/exist.txt")

        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}

    def test_path_traversal_is_rejected(self, client):
        response = client.get("/../conftest.py")

        assert response.status_code == 404

    def test_spa_fallback_serves_index(self, make_client):
        client = make_client(SPA_FALLBACK=True)

        response = client.get("/some/client/route")

        assert response.status_code == 200
        assert response.text == INDEX_HTML

    def test_spa_fallback_without_index(self, make_client, serving_root):
        (serving_root / "index.html").unlink()
        client = make_client(SPA_FALLBACK=True)

        assert client.get("/anything").status_code == 404


class TestRequestLogging:
    """The optional request/response logging middleware must not alter responses."""

    def test_echo_through_middleware(self, make_client, caplog):
        client = make_client(LOG_REQUESTS=True)
        caplog.set_level("INFO", logger="htmx_wasm_server.main")

        response = client.post("/api/echo", data={"echo-input": "logged"})

        assert 'Echo: "logged"' in response.text
        assert ">>> [REQUEST] POST" in caplog.text
        assert "echo-input=logged" in caplog.text

    def test_binary_static_through_middleware(self, make_client):
        client = make_client(LOG_REQUESTS=True)

        response = client.get("/pkg/wasm_demo_bg.wasm")

        assert response.content == WASM_BYTES
