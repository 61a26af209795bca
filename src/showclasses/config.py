"""Application configuration with environment validation.

Usage:
    from showclasses.config import get_settings

    settings = get_settings()
    print(settings.api_base_url)
    print(settings.person_id)

Every field can be set through an environment variable of the same name
(case-insensitive) or a .env file in the working directory, e.g.
PERSON_ID=8778 or OUTPUT_CSV=out/classes.csv.
"""

from enum import StrEnum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://sglapi.wellingtoninternational.com"
DEFAULT_ORIGIN = "https://wellingtoninternational.com"
DEFAULT_CSV_NAME = "wellington_class_data.csv"


class Environment(StrEnum):
    """Application environment."""

    LOCAL = "local"
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class LogFormat(StrEnum):
    """Log output format."""

    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Environment = Environment.LOCAL

    # Show management API
    api_base_url: str = Field(default=DEFAULT_BASE_URL, description="Show API base URL")
    origin_header: str = Field(
        default=DEFAULT_ORIGIN, description="Value sent in the Origin header"
    )
    person_id: int = Field(default=8778, ge=0, description="Person whose trips are listed")
    customer_id: int = Field(default=15, ge=0, description="Show customer id")

    # Output
    output_csv: Path = Field(default=Path(DEFAULT_CSV_NAME), description="CSV output path")

    # Logging
    log_level: str = Field(default="WARNING", description="Log level")
    log_format: LogFormat = Field(default=LogFormat.CONSOLE, description="Log output format")


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
        get_settings.cache_clear()
    """
    return Settings()
