"""
Configuration settings for the rule pipeline.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "rule-pipeline"  # Stamped on every log event as "app"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False  # Forces DEBUG log level
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"  # "production" switches logs to JSON

    # === Pipeline ===
    LOG_ERROR_PREVIEW: int = 3  # Error messages included in the run log event
    DEFAULT_RISK_MAX_SCORE: float = 0.8  # Risk scores above this are rejected

    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()
