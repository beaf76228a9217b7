"""
Tests for environment-driven settings (core/config.py).
"""
from pathlib import Path

from htmx_wasm_server.core.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("PORT", "SERVING_ROOT", "SPA_FALLBACK"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.PORT == 3000
        assert settings.API_PREFIX == "/api"
        assert settings.SPA_FALLBACK is False
        assert settings.serving_root == Path(".").resolve()

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")

        assert Settings(_env_file=None).PORT == 8080

    def test_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("spa_fallback", "true")

        assert Settings(_env_file=None).SPA_FALLBACK is True
