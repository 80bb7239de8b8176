"""CLI entry point for the Brave Search MCP server."""

from __future__ import annotations

import asyncio
import logging

import typer
from rich.console import Console

from brave_search_mcp import __version__
from brave_search_mcp.server import BraveSearchServer
from brave_search_mcp.settings import settings

# stdout carries the protocol stream; everything human-facing goes to stderr.
console = Console(stderr=True)
app = typer.Typer(name="brave-search-mcp", help="Brave Search tools over the Model Context Protocol")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@app.command()
def serve(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Python log level"),
) -> None:
    """Run the server over stdio."""
    if not settings.has_api_key:
        console.print("[bold red]Error:[/] BRAVE_API_KEY environment variable is required")
        raise typer.Exit(code=1)

    _configure_logging(log_level)

    server = BraveSearchServer(settings.api_key)
    try:
        asyncio.run(server.run())
    except KeyboardInterrupt:
        pass
    except Exception as e:
        console.print(f"[bold red]Error starting server:[/] {e}")
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def default(ctx: typer.Context) -> None:
    """Serve over stdio when no command is given, as MCP hosts launch it."""
    if ctx.invoked_subcommand is None:
        serve(log_level=settings.log_level)


@app.command()
def version() -> None:
    """Print the server version."""
    console.print(f"brave-search-mcp {__version__}")


if __name__ == "__main__":
    app()
