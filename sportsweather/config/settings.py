import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Value shipped in example .env files; treated the same as an unset key
PLACEHOLDER_API_KEY = "your_api_key_here"


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Server
    host: str = Field("0.0.0.0", description="Interface the HTTP server binds to.")
    port: int = Field(3000, ge=1, le=65535, description="Port the HTTP server listens on.")
    static_dir: str = Field(
        "public", description="Directory of static files served at the site root."
    )

    # Upstream providers
    openweather_api_key: Optional[str] = Field(
        None, description="API key for OpenWeatherMap. Weather requests fail without it."
    )
    mlb_api_base_url: str = Field(
        "https://statsapi.mlb.com/api/v1", description="Base URL of the MLB Stats API."
    )
    openweather_api_base_url: str = Field(
        "https://api.openweathermap.org/data/2.5",
        description="Base URL of the OpenWeatherMap API.",
    )

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    @field_validator("openweather_api_key")
    @classmethod
    def _blank_key_is_unset(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if not value or value == PLACEHOLDER_API_KEY:
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        log_level_upper = value.upper()
        if log_level_upper not in VALID_LOG_LEVELS:
            logging.warning(
                f"Invalid LOG_LEVEL '{value}' found in .env or default. Using INFO."
            )
            return "INFO"
        return log_level_upper

    @field_validator("mlb_api_base_url", "openweather_api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @property
    def has_weather_api_key(self) -> bool:
        return self.openweather_api_key is not None


def load_settings() -> AppSettings:
    """Loads and validates application settings."""
    try:
        return AppSettings()
    except Exception as e:
        logging.exception(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")
