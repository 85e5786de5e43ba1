"""
Centralized configuration for the DramaDeck backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings are namespaced (e.g., SUPABASE_*, TMDB_*, DISCOVER_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "DramaDeck API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_role_key: str = ""

    # Catalog provider (TMDB)
    tmdb_api_key: str = ""
    tmdb_base_url: str = "https://api.themoviedb.org/3"
    tmdb_language: str = "pt-BR"
    tmdb_timeout_seconds: float = 30.0

    # Discovery feed
    discover_daily_limit: int = 20
    discover_skip_window_days: int = 7
    discover_popular_pages: int = 5
    discover_origin_country: str = "KR"
    discover_min_rating: float = 6.0

    @property
    def supabase_configured(self) -> bool:
        """Whether a service-role Supabase connection can be made."""
        return bool(self.supabase_url and self.supabase_service_role_key)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
