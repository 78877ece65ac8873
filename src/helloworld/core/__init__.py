"""Core utilities shared across helloworld (configuration, logging)."""

from __future__ import annotations

from .settings import Settings, get_logger, load_settings

__all__ = ["Settings", "get_logger", "load_settings"]
