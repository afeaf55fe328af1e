"""Application configuration using Pydantic settings."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory
BASE_DIR = Path(__file__).resolve().parent.parent

VALID_ALGORITHMS = {"wilson", "percolation"}
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LABYRINTH_",
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Labyrinth"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Initial maze
    default_width: int = 15
    default_height: int = 15
    algorithm: str = "wilson"
    seed: Optional[int] = None

    # Limits for adversarial input
    max_cells: int = 250_000
    max_walk_steps: int = 50_000_000

    @field_validator("algorithm")
    @classmethod
    def validate_algorithm(cls, v: str) -> str:
        """Normalize and check the algorithm name."""
        v = v.lower()
        if v not in VALID_ALGORITHMS:
            raise ValueError(
                f"Invalid algorithm '{v}'. "
                f"Must be one of: {', '.join(sorted(VALID_ALGORITHMS))}"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        v = v.upper()
        if v not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. "
                f"Must be one of: {', '.join(sorted(VALID_LOG_LEVELS))}"
            )
        return v

    @field_validator("default_width", "default_height", "max_cells", "max_walk_steps")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Dimensions and limits must be positive."""
        if v < 1:
            raise ValueError("must be a positive integer")
        return v

    @property
    def effective_log_level(self) -> int:
        """Numeric log level, forced to DEBUG in debug mode."""
        if self.debug:
            return logging.DEBUG
        return getattr(logging, self.log_level)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
