# src/helloworld/cli.py
"""
helloworld Command Line Interface (CLI).

This module implements the terminal interface using `typer` and `rich`.

Usage
-----
    # Serve the greeting app
    $ helloworld serve --port 3000

    # Show the lint-rule table, or the effective rules for one file
    $ helloworld rules
    $ helloworld rules src/index.js --config lint.json
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from helloworld.lint import LintConfig, LintConfigError, default_config, load_config

load_dotenv()

app = typer.Typer(
    help="helloworld: a greeting web app and its lint-rule table.",
    rich_markup_mode="markdown",
)
console = Console()

_SEVERITY_STYLE = {"off": "dim", "warn": "yellow", "error": "bold red"}


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _load(config: Path | None) -> LintConfig:
    if config is None:
        return default_config()
    return load_config(config)


def _render_table(lint: LintConfig) -> None:
    """Render every override block with its file globs and rules."""
    for index, block in enumerate(lint.blocks, start=1):
        title = escape(block.name or f"Block {index}")
        table = Table(title=title, title_justify="left")
        table.add_column("Rule")
        table.add_column("Severity")
        table.add_column("Options")
        for name, rule in block.rules.items():
            style = _SEVERITY_STYLE[rule.severity]
            options = escape(", ".join(repr(o) for o in rule.options))
            table.add_row(escape(name), f"[{style}]{rule.severity}[/{style}]", options)

        console.print(f"[bold]files:[/bold] {escape(', '.join(block.files) or '(all)')}")
        if block.ignores:
            console.print(f"[bold]ignores:[/bold] {escape(', '.join(block.ignores))}")
        if block.language_options is not None:
            opts = block.language_options.model_dump(by_alias=True, exclude_none=True)
            console.print(f"[bold]languageOptions:[/bold] {escape(str(opts))}")
        if block.rules:
            console.print(table)
        console.print("")


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def serve(
    host: Annotated[
        str | None,
        typer.Option("--host", help="Interface to bind (default: HELLOWORLD_HOST)."),
    ] = None,
    port: Annotated[
        int | None,
        typer.Option("--port", "-p", help="Port to listen on (default: HELLOWORLD_PORT)."),
    ] = None,
    reload: Annotated[
        bool | None,
        typer.Option(
            "--reload/--no-reload",
            help="Restart on code changes (default: on in the dev environment).",
        ),
    ] = None,
) -> None:
    """Run the greeting web app under uvicorn."""
    # Imported here so `rules` never builds the app or validates server settings.
    from helloworld.api import server

    server.main(host=host, port=port, reload=reload)


@app.command()  # type: ignore[misc]
def rules(
    path: Annotated[
        Path | None,
        typer.Argument(help="Source file to resolve the effective rules for."),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="JSON lint table to use instead of the shipped one.",
        ),
    ] = None,
) -> None:
    """
    Show the lint-rule table, or the effective rules for `PATH`.

    Exits with code 1 when the table is invalid or `PATH` is not linted.
    """
    try:
        lint = _load(config)
    except LintConfigError as e:
        console.print(f"[bold red]Config Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    if path is None:
        _render_table(lint)
        return

    resolved = lint.resolve(path)
    if resolved is None:
        console.print(f"[yellow]{escape(path.as_posix())} is not linted by this table.[/yellow]")
        raise typer.Exit(code=1)

    opts = resolved.language_options.model_dump(by_alias=True, exclude_none=True)
    console.print(f"[bold]{escape(resolved.path)}[/bold] languageOptions: {escape(str(opts))}")
    for name, rule in resolved.rules.items():
        style = _SEVERITY_STYLE[rule.severity]
        console.print(f" {escape(name)}: [{style}]{escape(str(rule.to_entry()))}[/{style}]")


if __name__ == "__main__":
    app()
