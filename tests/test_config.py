"""Tests for environment-driven settings."""

import os
from pathlib import Path
from unittest.mock import patch

from gotour.config import (
    DEFAULT_BASE_URL,
    DEFAULT_GO_VERSION,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_STORE_PATH,
    load_settings,
)

ENV_VARS = (
    "GOTOUR_BASE_URL",
    "GOTOUR_STORE_PATH",
    "GOTOUR_LANG",
    "GOTOUR_HTTP_TIMEOUT",
    "GOTOUR_GO_VERSION",
)


def clear_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    """Test settings from the environment and .env files."""

    def test_defaults(self, monkeypatch, tmp_path):
        clear_env(monkeypatch)
        settings = load_settings(tmp_path / "missing.env")

        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.store_path == DEFAULT_STORE_PATH
        assert settings.lang == "eng"
        assert settings.http_timeout == DEFAULT_HTTP_TIMEOUT
        assert settings.go_version == DEFAULT_GO_VERSION

    def test_environment_overrides(self, monkeypatch, tmp_path):
        clear_env(monkeypatch)
        monkeypatch.setenv("GOTOUR_BASE_URL", "https://tour.example.com/")
        monkeypatch.setenv("GOTOUR_STORE_PATH", str(tmp_path / "s.db"))
        monkeypatch.setenv("GOTOUR_HTTP_TIMEOUT", "2.5")

        settings = load_settings(tmp_path / "missing.env")

        assert settings.base_url == "https://tour.example.com"
        assert settings.store_path == tmp_path / "s.db"
        assert settings.http_timeout == 2.5

    def test_invalid_timeout_falls_back(self, monkeypatch, tmp_path):
        clear_env(monkeypatch)
        monkeypatch.setenv("GOTOUR_HTTP_TIMEOUT", "soon")
        assert load_settings(tmp_path / "missing.env").http_timeout == DEFAULT_HTTP_TIMEOUT

    def test_env_file(self, monkeypatch, tmp_path):
        clear_env(monkeypatch)
        env_file = tmp_path / ".env"
        env_file.write_text("GOTOUR_LANG=fra\nGOTOUR_GO_VERSION=1.22\n", encoding="utf-8")

        with patch.dict(os.environ):
            settings = load_settings(env_file)

        assert settings.lang == "fra"
        assert settings.go_version == "1.22"

    def test_store_path_expands_home(self, monkeypatch, tmp_path):
        clear_env(monkeypatch)
        monkeypatch.setenv("GOTOUR_STORE_PATH", "~/tour.db")
        assert load_settings(tmp_path / "missing.env").store_path == Path.home() / "tour.db"
