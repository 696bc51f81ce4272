"""Tests for AppConfig."""

import pytest
from pydantic import ValidationError

from config import AppConfig, DEFAULT_DIRECTUS_URL, get_app_config, validate_configuration


class TestAppConfig:
    def test_defaults(self):
        cfg = AppConfig(_env_file=None)
        assert cfg.directus_url == DEFAULT_DIRECTUS_URL
        assert cfg.directus_timeout == 30.0
        assert cfg.debug_logging is False

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("DIRECTUS_URL", "https://cms.example.org/")
        monkeypatch.setenv("DIRECTUS_TIMEOUT", "7.5")
        monkeypatch.setenv("DEBUG_LOGGING", "true")
        cfg = AppConfig(_env_file=None)
        assert cfg.directus_url == "https://cms.example.org"
        assert cfg.directus_timeout == 7.5
        assert cfg.debug_logging is True

    def test_blank_url_rejected(self, monkeypatch):
        monkeypatch.setenv("DIRECTUS_URL", "  ")
        with pytest.raises(ValidationError):
            AppConfig(_env_file=None)

    def test_non_positive_timeout_rejected(self, monkeypatch):
        monkeypatch.setenv("DIRECTUS_TIMEOUT", "0")
        with pytest.raises(ValidationError):
            AppConfig(_env_file=None)

    def test_singleton(self):
        assert get_app_config() is get_app_config()

    def test_validate_configuration(self):
        assert validate_configuration() is True
