"""Interfaces consumed from the host application, with static implementations."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from superbird_agent.errors import file_not_found_error


class SecretStore(Protocol):
    """Settings store holding the web socket shared secret."""

    def get_socket_password(self) -> str: ...


class ServerPortProvider(Protocol):
    """Local server that the device connects back to."""

    async def get_server_port(self) -> int: ...


class WebAppSource(Protocol):
    """Location of the web app bundle pushed to the device."""

    async def get_web_app_dir(self) -> Path: ...


class StaticSecretStore:
    def __init__(self, password: str) -> None:
        self._password = password

    def get_socket_password(self) -> str:
        return self._password


class StaticServerPort:
    def __init__(self, port: int) -> None:
        self._port = port

    async def get_server_port(self) -> int:
        return self._port


class StaticWebAppSource:
    """Serves a fixed local directory; it must exist when asked for."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path).expanduser()

    async def get_web_app_dir(self) -> Path:
        if not self._path.is_dir():
            raise file_not_found_error(str(self._path))
        return self._path
