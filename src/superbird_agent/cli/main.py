"""CLI entry point using Typer."""

from __future__ import annotations

import logging
import sys

import structlog
import typer

from superbird_agent.cli.commands import app_cmd, brightness, device

app = typer.Typer(
    name="superbird-agent",
    help="Install and control a web app on a dashboard display over adb",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug events to stderr"),
) -> None:
    """Send log events to stderr so stdout carries only command output."""
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )


@app.command()
def version() -> None:
    """Show version information."""
    from superbird_agent import __version__

    typer.echo(f"superbird-agent v{__version__}")


app.add_typer(device.app, name="device")
app.add_typer(app_cmd.app, name="app")
app.add_typer(brightness.app, name="brightness")


if __name__ == "__main__":
    app()
