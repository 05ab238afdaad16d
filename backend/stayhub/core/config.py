"""Application configuration using Pydantic Settings."""

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

    # App
    app_name: str = "StayHub"
    debug: bool = False
    api_v1_prefix: str = "/v1"
    log_level: str = "INFO"

    # CORS (comma-separated)
    allowed_origins: str = "http://localhost:5173,http://localhost:8080"

    # Simulated processing
    auth_delay_seconds: float = 1.0
    booking_delay_seconds: float = 2.0
    booking_failure_rate: float = 0.0
    call_timeout_seconds: float = 10.0

    # Catalog
    seed_catalog: bool = True

    @property
    def origins(self) -> list[str]:
        """Allowed CORS origins as a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
