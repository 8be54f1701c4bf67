"""Shared CLI helpers."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Callable, Coroutine
from pathlib import Path
from typing import Any, NoReturn, TypeVar

import typer

from superbird_agent.collaborators import StaticSecretStore, StaticServerPort, StaticWebAppSource
from superbird_agent.config import AgentSettings
from superbird_agent.device.operations import DeviceOperations
from superbird_agent.errors import AgentError

T = TypeVar("T")


def format_json(data: Any) -> str:
    return json.dumps(data, indent=2, sort_keys=True)


def build_operations(
    *,
    web_app_dir: str | None = None,
    password: str | None = None,
    port: int | None = None,
) -> DeviceOperations:
    settings = AgentSettings.from_env()
    return DeviceOperations.from_settings(
        settings,
        secrets=StaticSecretStore(password if password is not None else settings.socket_password),
        server=StaticServerPort(port if port is not None else settings.server_port),
        webapp=StaticWebAppSource(Path(web_app_dir)) if web_app_dir else None,
    )


def _render_error(error: AgentError, json_output: bool) -> NoReturn:
    if json_output:
        typer.echo(format_json({"error": error.to_dict()}))
    else:
        typer.echo(f"{error.code}: {error.message}")
        if error.remediation:
            typer.echo(f"Hint: {error.remediation}")
    raise typer.Exit(code=1)


def run_operation(
    operation: Callable[[], Coroutine[Any, Any, T]], *, json_output: bool = False
) -> T:
    """Run an async operation, turning AgentError into a rendered exit."""
    try:
        return asyncio.run(operation())
    except AgentError as exc:
        _render_error(exc, json_output)


def handle_result(data: dict[str, Any], message: str, json_output: bool = False) -> None:
    if json_output:
        typer.echo(format_json(data))
        return
    typer.echo(message)
