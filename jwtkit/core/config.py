"""
Configuration management for jwtkit.

Uses pydantic-settings to load configuration from ``JWTKIT_``-prefixed
environment variables (or a ``.env`` file) with defaults suitable for
library use.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jwtkit.core.algorithms import is_supported


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Algorithm used by encode() when the caller does not name one
    DEFAULT_ALGORITHM: str = "HS256"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True  # python-json-logger output; False = plain text
    SERVICE_NAME: str = "jwtkit"  # 'service' field on JSON log records

    model_config = SettingsConfigDict(
        env_prefix="JWTKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("DEFAULT_ALGORITHM")
    @classmethod
    def check_default_algorithm(cls, v: str) -> str:
        """Only registered algorithms may be the default."""
        if not is_supported(v):
            raise ValueError(f"Unsupported default algorithm: {v}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


# Global settings instance
settings = Settings()
