"""HTTP surface of helloworld (FastAPI application and ASGI entry point)."""

from __future__ import annotations

from .app import GREETING, create_app

__all__ = ["GREETING", "create_app"]
