"""Shared pytest fixtures for the helloworld test suite."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from helloworld.core.settings import load_settings


@pytest.fixture(autouse=True)  # type: ignore[misc]
def _fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings around each test so env overrides do not leak."""
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()
