"""
Tests for environment-driven settings.
"""

import pytest
from pydantic import ValidationError

from trailtime.config import Settings


class TestSettings:

    def test_cors_origins_comma_separated(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://a.com, http://b.com")

        settings = Settings(_env_file=None)

        assert settings.cors_origins == ["http://a.com", "http://b.com"]

    def test_cors_origins_single(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "https://trail.example")

        assert Settings(_env_file=None).cors_origins == ["https://trail.example"]

    def test_cors_origins_default(self, monkeypatch):
        monkeypatch.delenv("CORS_ORIGINS", raising=False)

        assert Settings(_env_file=None).cors_origins == [
            "http://localhost:5173",
            "http://localhost:3000",
        ]

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "loud")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
