"""
Smoke tests for package structure and availability.

These tests strictly verify that the package is installed correctly in the
environment and that top-level modules are importable.
"""

from __future__ import annotations

import importlib

from helloworld import __version__


def test_package_importable() -> None:
    """Ensure the top-level package can be imported."""
    mod = importlib.import_module("helloworld")
    assert mod is not None


def test_version_is_set() -> None:
    """Ensure the package exposes a valid version string."""
    assert isinstance(__version__, str)
    assert len(__version__) > 0


def test_server_module_exposes_app() -> None:
    """The ASGI entry point must expose a module-level `app` for uvicorn."""
    server = importlib.import_module("helloworld.api.server")
    assert hasattr(server, "app")


def test_cli_module_exposes_app() -> None:
    """The console script `helloworld.cli:app` must exist."""
    cli = importlib.import_module("helloworld.cli")
    assert hasattr(cli, "app"), "helloworld.cli must expose an 'app' Typer object."
