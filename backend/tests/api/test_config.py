"""Tests for API configuration."""

import pytest

from api.config import APISettings


class TestAPISettings:
    """Tests for APISettings class."""

    def test_default_values(self):
        """Should have sensible defaults."""
        settings = APISettings()
        assert settings.host == "0.0.0.0"
        assert settings.port == 8000
        assert settings.debug is False
        assert settings.reload is False
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        """Should load from DRAMADECK_-prefixed environment variables."""
        monkeypatch.setenv("DRAMADECK_PORT", "9000")
        monkeypatch.setenv("DRAMADECK_DEBUG", "true")
        monkeypatch.setenv("DRAMADECK_RELOAD", "true")
        settings = APISettings()
        assert settings.port == 9000
        assert settings.debug is True
        assert settings.reload is True

    def test_unprefixed_env_ignored(self, monkeypatch):
        """Should not pick up unprefixed variables."""
        monkeypatch.setenv("PORT", "9000")
        settings = APISettings()
        assert settings.port == 8000

    def test_cors_defaults(self):
        """Should allow the Expo dev servers by default."""
        settings = APISettings()
        assert "http://localhost:8081" in settings.cors_origins
        assert "http://localhost:19006" in settings.cors_origins
        assert settings.cors_allow_credentials is True
        assert settings.cors_allow_methods == ["*"]
        assert settings.cors_allow_headers == ["*"]

    def test_supabase_settings_empty_by_default(self, monkeypatch):
        """Supabase secrets should be empty by default."""
        monkeypatch.delenv("DRAMADECK_SUPABASE_JWT_SECRET", raising=False)
        monkeypatch.delenv("DRAMADECK_SUPABASE_DB_URL", raising=False)
        settings = APISettings()
        assert settings.supabase_jwt_secret == ""
        assert settings.supabase_db_url == ""
