"""Web app install/restore CLI commands."""

from __future__ import annotations

import typer

from superbird_agent.cli.utils import build_operations, handle_result, run_operation

app = typer.Typer(help="Web app management commands")


@app.command("install")
def app_install(
    web_app_dir: str = typer.Argument(..., help="Local web app bundle directory"),
    device: str | None = typer.Option(None, "--device", "-d", help="Device serial"),
    password: str | None = typer.Option(
        None, "--password", help="Socket password (default: SUPERBIRD_AGENT_SOCKET_PASSWORD)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Install the web app bundle over the stock one."""
    ops = build_operations(web_app_dir=web_app_dir, password=password)
    run_operation(lambda: ops.install_app(device), json_output=json_output)
    handle_result({"status": "done"}, "✓ Installed", json_output=json_output)


@app.command("restore")
def app_restore(
    device: str | None = typer.Option(None, "--device", "-d", help="Device serial"),
    restart: bool = typer.Option(True, "--restart/--no-restart", help="Restart the browser"),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Restore the stock web app."""
    ops = build_operations()
    run_operation(lambda: ops.restore(device, restart=restart), json_output=json_output)
    handle_result({"status": "done"}, "✓ Restored", json_output=json_output)


@app.command("check")
def app_check(
    device: str | None = typer.Option(None, "--device", "-d", help="Device serial"),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Check whether the web app is installed."""
    ops = build_operations()
    installed = run_operation(lambda: ops.check_installed_app(device), json_output=json_output)
    message = "installed" if installed else "not installed"
    handle_result({"installed": installed}, message, json_output=json_output)


@app.command("restart")
def app_restart(
    device: str | None = typer.Option(None, "--device", "-d", help="Device serial"),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Restart the on-device browser."""
    ops = build_operations()
    run_operation(lambda: ops.restart_app(device), json_output=json_output)
    handle_result({"status": "done"}, "✓ Restarted", json_output=json_output)


@app.command("forward")
def app_forward(
    port: int | None = typer.Option(
        None, "--port", "-p", help="Local server port (default: SUPERBIRD_AGENT_SERVER_PORT)"
    ),
    device: str | None = typer.Option(None, "--device", "-d", help="Device serial"),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Reverse-forward the device socket port to the local server."""
    ops = build_operations(port=port)
    local_port = run_operation(lambda: ops.forward_socket_server(device), json_output=json_output)
    handle_result(
        {"status": "done", "local_port": local_port},
        f"✓ Forwarded tcp:1337 -> tcp:{local_port}",
        json_output=json_output,
    )
