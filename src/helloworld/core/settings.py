"""Centralized application configuration using Pydantic Settings (v2).

This module exposes a cached `load_settings()` loader that reads from:
- Real environment variables (highest precedence)
- `.env` files at the repository root: .env, .env.local, .env.dev/.env.test/.env.prod
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed application configuration loaded from env and `.env` files.

    Attributes
    ----------
    environment : EnvName
        Runtime environment flag; maps from `HELLOWORLD_ENV`.
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    host : str
        Interface the development server binds to; maps from `HELLOWORLD_HOST`.
    port : int
        TCP port of the development server; maps from `HELLOWORLD_PORT`.
    """

    environment: EnvName = Field(default="dev", alias="HELLOWORLD_ENV")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")
    host: str = Field(default="127.0.0.1", alias="HELLOWORLD_HOST")
    port: int = Field(default=3000, ge=1, le=65535, alias="HELLOWORLD_PORT")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local", ".env.dev", ".env.test", ".env.prod"),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def is_dev(self) -> bool:
        """True in the dev environment, where `serve` auto-reloads by default."""
        return self.environment == "dev"

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    We keep this behind an LRU cache so tests can force a rebuild via
    `load_settings.cache_clear()` after mutating `os.environ`.
    """
    os.environ.setdefault("HELLOWORLD_ENV", "dev")
    return Settings()


def get_logger(name: str = "helloworld") -> logging.Logger:
    """Return a process-global logger configured to the current `LOG_LEVEL`."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger


__all__ = ["EnvName", "LogLevelName", "Settings", "get_logger", "load_settings"]
