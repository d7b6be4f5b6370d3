from datetime import time

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings using Pydantic BaseSettings.
    Loads environment variables (and .env) automatically.
    """

    # API Configuration
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "VaxPlan API"
    PROJECT_DESCRIPTION: str = "Vaccination eligibility, risk assessment and schedule planning"
    VERSION: str = "0.1.0"

    # Application Settings
    DEBUG: bool = Field(False, description="Debug mode (enables API docs)")
    ENVIRONMENT: str = Field("production", description="Runtime environment")
    LOG_LEVEL: str = Field("INFO", description="Root logging level")

    # CORS
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000,http://localhost:8080",
        description="Comma-separated allowed CORS origins (ignored in debug mode)",
    )

    # Sentry Configuration
    SENTRY_DSN: str | None = Field(default=None, description="Sentry DSN for error tracking")

    # Reminder defaults applied when a request omits them
    REMINDER_DEFAULT_ADVANCE_DAYS: int = Field(7, description="Days before the due date for the base reminder")
    REMINDER_DEFAULT_SEND_TIME: time = Field(time(9, 0), description="Time of day reminders fire")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown variables instead of raising
    )

    @field_validator("REMINDER_DEFAULT_ADVANCE_DAYS")
    @classmethod
    def validate_advance_days(cls, v):
        if v < 0:
            raise ValueError("REMINDER_DEFAULT_ADVANCE_DAYS must be 0 or greater")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return level

    @computed_field
    @property
    def is_development(self) -> bool:
        """Whether the app runs in a development setup"""
        return self.DEBUG or self.ENVIRONMENT.lower() in ["development", "dev", "local"]

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Configuration singleton
_settings_instance = None


def get_settings() -> Settings:
    """
    Return a cached settings instance.
    Avoids reading the environment more than once.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
