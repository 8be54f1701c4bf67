"""Runtime settings resolved from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_DEFAULT_HOME = Path.home() / ".superbird-agent"
DEFAULT_DOWNLOAD_TIMEOUT_SECS = 60.0
_DEFAULT_SERVER_PORT = 1338


def _env_float(name: str) -> float | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


@dataclass(frozen=True)
class AgentSettings:
    """Settings shared by the bridge resolver, runner and CLI."""

    data_dir: Path = _DEFAULT_HOME
    adb_url: str | None = None
    command_timeout: float | None = None
    download_timeout: float = DEFAULT_DOWNLOAD_TIMEOUT_SECS
    socket_password: str = ""
    server_port: int = _DEFAULT_SERVER_PORT

    @classmethod
    def from_env(cls) -> AgentSettings:
        """Build settings from SUPERBIRD_AGENT_* variables."""
        home = os.environ.get("SUPERBIRD_AGENT_HOME")
        port_raw = os.environ.get("SUPERBIRD_AGENT_SERVER_PORT", "")
        port = int(port_raw) if port_raw.isdigit() else _DEFAULT_SERVER_PORT
        return cls(
            data_dir=Path(home).expanduser() if home else _DEFAULT_HOME,
            adb_url=os.environ.get("SUPERBIRD_AGENT_ADB_URL") or None,
            command_timeout=_env_float("SUPERBIRD_AGENT_COMMAND_TIMEOUT"),
            download_timeout=(
                _env_float("SUPERBIRD_AGENT_DOWNLOAD_TIMEOUT") or DEFAULT_DOWNLOAD_TIMEOUT_SECS
            ),
            socket_password=os.environ.get("SUPERBIRD_AGENT_SOCKET_PASSWORD", ""),
            server_port=port,
        )
