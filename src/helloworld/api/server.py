"""
ASGI Entry Point for the helloworld API.

This module exposes the `app` object required by ASGI servers (Uvicorn/Gunicorn).
It loads environment variables from `.env` before the application factory runs.

Usage
-----
Run via the module entry point:
    $ python -m helloworld.api.server

Or via uvicorn directly:
    $ uvicorn helloworld.api.server:app --reload
"""

from __future__ import annotations

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from helloworld.api.app import create_app
from helloworld.core.settings import load_settings

load_dotenv(dotenv_path=Path(".env"))

app = create_app()


def main(host: str | None = None, port: int | None = None, reload: bool | None = None) -> None:
    """Run the API server; unset arguments fall back to settings.

    Auto-reload defaults to on in the dev environment only.
    """
    settings = load_settings()
    uvicorn.run(
        "helloworld.api.server:app",
        host=host if host is not None else settings.host,
        port=port if port is not None else settings.port,
        reload=reload if reload is not None else settings.is_dev,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
