"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    supabase_anon_key: str | None = None
    environment: str = _ENVIRONMENT
    auto_confirm_email: bool = False
    search_radius_km: float = 50.0

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def auth_key(self) -> str:
        """Key used by the identity client, the anon key when configured."""
        return self.supabase_anon_key or self.supabase_service_key

    @property
    def expose_error_details(self) -> bool:
        """Return True when 500 responses may carry internal details."""
        return self.environment != "production"
