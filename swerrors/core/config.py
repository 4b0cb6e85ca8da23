"""
Library configuration.

Loads settings from environment variables (prefixed ``SWERRORS_``) and
an optional .env file. All configuration is centralized here.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        media_type: Content type of error bodies. When unset, the
            producer's own media type is used.
        expose_unknown_errors: Report the message of unexpected exceptions
            to clients. Must be False in production.
        rate_limit_default: Default limit applied by the shared limiter.
    """

    model_config = SettingsConfigDict(
        env_prefix="SWERRORS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    media_type: Optional[str] = None
    expose_unknown_errors: bool = False
    rate_limit_default: str = "60/minute"


settings = Settings()
