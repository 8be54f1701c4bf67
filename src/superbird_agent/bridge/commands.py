"""Typed builders for adb argument vectors and remote shell scripts."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from pathlib import Path

# On-device layout of the stock dashboard firmware
WEBAPP_DIR = "/usr/share/qt-superbird-app/webapp"
WEBAPP_FINGERPRINT = "index.html"
STAGING_DIR = "/tmp/webapp"
PASSWORD_FILE = f"{STAGING_DIR}/ws-password"
MARKER_NAME = ".glancething"
BACKLIGHT_PATH = "/sys/devices/platform/backlight/backlight/aml-bl/brightness"
BACKLIGHT_SERVICE = "backlight"
BROWSER_SERVICE = "chromium"
REMOTE_SOCKET_PORT = 1337

SUPERVISOR_ACTIONS = {"start", "stop", "restart"}


class RemoteScript:
    """Shell scripts run by the device's shell. Every interpolated value is quoted."""

    @staticmethod
    def list_dir(path: str) -> str:
        return f"ls {shlex.quote(path)}"

    @staticmethod
    def check_path(path: str) -> str:
        """List a path without failing when it is missing; the error text is the output."""
        return f"ls {shlex.quote(path)} 2>&1; true"

    @staticmethod
    def read_file(path: str) -> str:
        return f"cat {shlex.quote(path)}"

    @staticmethod
    def write_value(path: str, value: str | int) -> str:
        return f"printf '%s\\n' {shlex.quote(str(value))} > {shlex.quote(path)}"

    @staticmethod
    def supervisor(action: str, service: str) -> str:
        if action not in SUPERVISOR_ACTIONS:
            raise ValueError(f"Invalid supervisorctl action: {action}")
        return f"supervisorctl {action} {shlex.quote(service)}"

    @staticmethod
    def is_mountpoint(path: str) -> str:
        return f"mountpoint {shlex.quote(path)} > /dev/null"

    @staticmethod
    def unmount(path: str) -> str:
        return f"umount {shlex.quote(path)}"

    @staticmethod
    def remove_tree(path: str) -> str:
        return f"rm -rf {shlex.quote(path)}"

    @staticmethod
    def touch(path: str) -> str:
        return f"touch {shlex.quote(path)}"

    @staticmethod
    def bind_mount(source: str, target: str) -> str:
        return f"mount --bind {shlex.quote(source)} {shlex.quote(target)}"


@dataclass(frozen=True)
class BridgeCommand:
    """Builds argv lists for a resolved adb executable."""

    executable: str

    def version(self) -> list[str]:
        return [self.executable, "version"]

    def devices(self) -> list[str]:
        return [self.executable, "devices"]

    def shell(self, serial: str, script: str) -> list[str]:
        return [self.executable, "-s", serial, "shell", script]

    def push(self, serial: str, local: Path | str, remote: str) -> list[str]:
        return [self.executable, "-s", serial, "push", str(local), remote]

    def reverse(self, serial: str, remote_port: int, local_port: int) -> list[str]:
        return [
            self.executable,
            "-s",
            serial,
            "reverse",
            f"tcp:{int(remote_port)}",
            f"tcp:{int(local_port)}",
        ]
