"""Backlight CLI commands."""

from __future__ import annotations

import typer

from superbird_agent.cli.utils import build_operations, handle_result, run_operation

app = typer.Typer(help="Backlight commands")


@app.command("get")
def brightness_get(
    device: str | None = typer.Option(None, "--device", "-d", help="Device serial"),
    raw: bool = typer.Option(False, "--raw", help="Print the raw register value"),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Read the current brightness."""
    ops = build_operations()
    value = run_operation(
        lambda: ops.get_brightness(device, parse=not raw), json_output=json_output
    )
    message = str(value) if raw else f"{value:.2f}"
    handle_result({"brightness": value, "raw": raw}, message, json_output=json_output)


@app.command("set")
def brightness_set(
    value: float = typer.Argument(..., help="Brightness between 0.0 and 1.0"),
    device: str | None = typer.Option(None, "--device", "-d", help="Device serial"),
    smooth: bool = typer.Option(False, "--smooth", help="Fade instead of jumping"),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Set the brightness."""
    ops = build_operations()
    if smooth:
        run_operation(lambda: ops.set_brightness_smooth(value, device), json_output=json_output)
    else:
        run_operation(lambda: ops.set_brightness(value, device), json_output=json_output)
    handle_result({"status": "done", "brightness": value}, "✓ Done", json_output=json_output)


@app.command("auto")
def brightness_auto(
    state: str = typer.Argument(..., help="on|off"),
    device: str | None = typer.Option(None, "--device", "-d", help="Device serial"),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Hand the backlight to the auto-brightness service, or take it back."""
    key = state.lower()
    if key not in {"on", "off"}:
        typer.echo("Error: state must be 'on' or 'off'")
        raise typer.Exit(code=1)
    enabled = key == "on"
    ops = build_operations()
    run_operation(lambda: ops.set_auto_brightness(enabled, device), json_output=json_output)
    handle_result({"status": "done", "enabled": enabled}, "✓ Done", json_output=json_output)
