import logging
from functools import lru_cache

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Planning defaults used when a value is not given explicitly
    DEFAULT_SIGNIFICANCE: float = 0.95
    DEFAULT_POWER: float = 0.8
    DEFAULT_VARIATIONS: int = 1

    # Logging
    LOG_LEVEL: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="ABSIZE_", env_file=".env", case_sensitive=True)

    @field_validator("DEFAULT_SIGNIFICANCE", "DEFAULT_POWER")
    @classmethod
    def check_probability(cls, v: float) -> float:
        if not (0.0 < v < 1.0):
            raise ValueError("must be between 0 and 1 (exclusive)")
        return v

    @field_validator("DEFAULT_VARIATIONS")
    @classmethod
    def check_variations(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be at least 1")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str) -> None:
    """Only emit structlog events at or above `level`."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level.upper())),
    )


def ensure_logging_configured() -> None:
    """
    Apply the LOG_LEVEL setting unless the application configured structlog.

    Without this, structlog's default logger prints every level (debug
    included) to stdout.
    """
    if not structlog.is_configured():
        configure_logging(get_settings().LOG_LEVEL)
