"""
Configuration settings for the companion chat service.
Uses Pydantic Settings for type-safe configuration with validation.
"""

from typing import List, Literal

import pytz
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic validates types and provides clear error messages for misconfigurations.
    Persona tables are static reference data and are not configurable here.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra env vars
    )

    # Application
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Render log events as JSON lines instead of console text",
    )

    TIMEZONE: str = Field(
        default="America/Toronto",
        description="Timezone used when formatting message timestamps",
    )

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )

    # Server
    HOST: str = Field(
        default="0.0.0.0",
        description="Interface the API server binds to",
    )
    PORT: int = Field(
        default=8000,
        description="Port for the API server",
        ge=1,
        le=65535,
    )
    CORS_ORIGINS: List[str] = Field(
        default=["*"],
        description="Origins allowed to call the API. JSON list when set from env.",
    )

    # ==================== Composition Configuration ====================

    REPETITION_WINDOW: int = Field(
        default=3,
        description="Number of recent assistant replies a new reply must not repeat "
                    "(when the template bucket offers an alternative).",
        ge=0,
        le=20,
    )
    FLAIR_INTERVAL: int = Field(
        default=4,
        description="Append the signature phrase on every Nth assistant turn, "
                    "counted from the conversation history.",
        ge=1,
    )

    @field_validator("TIMEZONE")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Ensure the timezone name is known to pytz."""
        try:
            pytz.timezone(v)
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Unknown timezone: {v}")
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT == "development"


# Create singleton instance with validation
# This will automatically load from .env and validate all fields
settings = Settings()
