"""
API configuration using Pydantic Settings.

Loads configuration from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """API configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DRAMADECK_",
        case_sensitive=False,
        extra="ignore",
    )

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    reload: bool = False
    log_level: str = "INFO"

    # CORS settings
    cors_origins: list[str] = ["http://localhost:8081", "http://localhost:19006"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase settings (for auth and migrations)
    supabase_jwt_secret: str = ""
    supabase_db_url: str = ""


def get_settings() -> APISettings:
    """Get settings instance."""
    return APISettings()
