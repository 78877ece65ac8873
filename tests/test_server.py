"""Tests for the uvicorn entry point `helloworld.api.server.main`.

`uvicorn.run` is patched out, so no socket is opened; we only check which
arguments the entry point derives from its parameters and from settings.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import patch

from helloworld.api import server


def test_main_uses_settings_when_unset(monkeypatch: Any) -> None:
    """Host and port come from the environment; dev turns reload on."""
    monkeypatch.setenv("HELLOWORLD_ENV", "dev")
    monkeypatch.setenv("HELLOWORLD_HOST", "0.0.0.0")
    monkeypatch.setenv("HELLOWORLD_PORT", "4000")

    with patch("helloworld.api.server.uvicorn.run") as mock_run:
        server.main()

    kwargs = mock_run.call_args.kwargs
    assert kwargs["host"] == "0.0.0.0"
    assert kwargs["port"] == 4000
    assert kwargs["reload"] is True


def test_main_explicit_port_zero_is_kept(monkeypatch: Any) -> None:
    """An explicit port 0 (ephemeral) is not replaced by the configured port."""
    monkeypatch.setenv("HELLOWORLD_PORT", "4000")

    with patch("helloworld.api.server.uvicorn.run") as mock_run:
        server.main(port=0)

    assert mock_run.call_args.kwargs["port"] == 0


def test_main_reload_off_outside_dev(monkeypatch: Any) -> None:
    """Production defaults to no reload; an explicit flag always wins."""
    monkeypatch.setenv("HELLOWORLD_ENV", "prod")

    with patch("helloworld.api.server.uvicorn.run") as mock_run:
        server.main()
        server.main(reload=True)

    first, second = mock_run.call_args_list
    assert first.kwargs["reload"] is False
    assert second.kwargs["reload"] is True
