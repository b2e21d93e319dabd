"""
Application settings loaded from environment variables.
Uses pydantic-settings for validation and type coercion.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Netatmo OAuth credentials
    netatmo_client_id: str = ""
    netatmo_client_secret: str = ""
    netatmo_username: str = ""
    netatmo_password: str = ""
    netatmo_access_token: Optional[str] = None
    netatmo_scope: str = "read_station"

    # Netatmo API
    netatmo_base_url: str = "https://api.netatmo.com"
    netatmo_token_url: str = "https://api.netatmo.com/oauth2/token"
    request_timeout: float = 30.0

    # Application
    log_level: str = "INFO"

    @property
    def has_credentials(self) -> bool:
        """True when a token or a full password-grant credential set is configured."""
        if self.netatmo_access_token:
            return True
        return all([
            self.netatmo_client_id,
            self.netatmo_client_secret,
            self.netatmo_username,
            self.netatmo_password,
        ])


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
