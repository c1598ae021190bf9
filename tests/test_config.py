"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import DEFAULT_BASE_URL, AppSettings, load_settings
from core.domain.errors import ConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for key in ("IRATING_FETCH_AUTH__EMAIL", "IRATING_FETCH_AUTH__PASSWORD", "IRATING_FETCH_BASE_URL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


class TestLoadSettings:

    def test_defaults(self):
        settings = AppSettings()
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.http_timeout_seconds > 0

    def test_explicit_toml_file(self, tmp_path: Path):
        config = tmp_path / "custom.toml"
        config.write_text('[auth]\nemail = "me@example.com"\npassword = "pw"\n', encoding="utf-8")
        settings = load_settings(config)
        assert settings.auth.email == "me@example.com"
        assert settings.auth.password == "pw"

    def test_project_config_toml(self, tmp_path: Path):
        (tmp_path / "config.toml").write_text('[auth]\nemail = "local@example.com"\n', encoding="utf-8")
        settings = load_settings()
        assert settings.auth.email == "local@example.com"
        assert settings.auth.password is None

    def test_env_overrides_project_toml(self, tmp_path: Path, monkeypatch):
        (tmp_path / "config.toml").write_text('[auth]\nemail = "file@example.com"\n', encoding="utf-8")
        monkeypatch.setenv("IRATING_FETCH_AUTH__EMAIL", "env@example.com")
        assert load_settings().auth.email == "env@example.com"

    def test_missing_explicit_file(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_settings(tmp_path / "missing.toml")

    def test_broken_toml(self, tmp_path: Path):
        config = tmp_path / "broken.toml"
        config.write_text("[auth\nemail = ", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_settings(config)

    def test_broken_project_toml(self, tmp_path: Path):
        (tmp_path / "config.toml").write_text("[auth\nemail = ", encoding="utf-8")
        with pytest.raises(ConfigError, match="config.toml"):
            load_settings()

    def test_out_of_range_value_in_explicit_file(self, tmp_path: Path):
        config = tmp_path / "custom.toml"
        config.write_text("http_timeout_seconds = -1\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="custom.toml"):
            load_settings(config)

    def test_out_of_range_env_value(self, monkeypatch):
        monkeypatch.setenv("IRATING_FETCH_HTTP_TIMEOUT_SECONDS", "-1")
        with pytest.raises(ConfigError):
            load_settings()
