"""Device discovery CLI commands."""

from __future__ import annotations

import typer

from superbird_agent.cli.utils import build_operations, handle_result, run_operation

app = typer.Typer(help="Device discovery commands")


@app.command("list")
def device_list(json_output: bool = typer.Option(False, "--json", help="Output JSON")) -> None:
    """List authorized devices visible to adb."""
    ops = build_operations()
    serials = run_operation(ops.locator.list_devices, json_output=json_output)
    message = "\n".join(serials) if serials else "No devices connected"
    handle_result({"devices": serials}, message, json_output=json_output)


@app.command("find")
def device_find(json_output: bool = typer.Option(False, "--json", help="Output JSON")) -> None:
    """Find the supported display."""
    ops = build_operations()
    serial = run_operation(ops.find_device, json_output=json_output)
    message = f"Found {serial}" if serial else "No valid device found"
    handle_result({"serial": serial}, message, json_output=json_output)


@app.command("status")
def device_status(json_output: bool = typer.Option(False, "--json", help="Output JSON")) -> None:
    """Report not_found, not_installed or ready."""
    ops = build_operations()
    state = run_operation(ops.setup_state, json_output=json_output)
    handle_result({"state": state.value}, state.value, json_output=json_output)
