"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Path constants - calculated once at module load
PACKAGE_ROOT = Path(__file__).parent.resolve()
DATA_DIR = PACKAGE_ROOT / "data"
SAMPLE_TASK_PATH = DATA_DIR / "task-sample.json"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "taskflow API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Task document source
    TASK_SOURCE: Literal["file", "http"] = "file"
    TASK_FILE_PATH: Path = SAMPLE_TASK_PATH
    TASK_URL: str | None = None
    TASK_FETCH_TIMEOUT: float = 30.0

    # Sessions idle longer than this (seconds) are dropped
    SESSION_IDLE_TIMEOUT: float = 3600.0

    @model_validator(mode="after")
    def validate_task_source(self) -> "Settings":
        """Validate task source and session configuration."""
        if self.TASK_SOURCE == "http" and not self.TASK_URL:
            msg = "TASK_URL is required when TASK_SOURCE is 'http'"
            raise ValueError(msg)
        if self.TASK_FETCH_TIMEOUT <= 0:
            msg = "TASK_FETCH_TIMEOUT must be positive"
            raise ValueError(msg)
        if self.SESSION_IDLE_TIMEOUT <= 0:
            msg = "SESSION_IDLE_TIMEOUT must be positive"
            raise ValueError(msg)
        return self


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    # Configure structlog
    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        # Production: JSON output
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Development: Console output with colors
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
