"""Device operations - install, restore, backlight and port forwarding."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import structlog

from superbird_agent.bridge.commands import (
    BACKLIGHT_PATH,
    BACKLIGHT_SERVICE,
    BROWSER_SERVICE,
    MARKER_NAME,
    PASSWORD_FILE,
    REMOTE_SOCKET_PORT,
    STAGING_DIR,
    WEBAPP_DIR,
    BridgeCommand,
    RemoteScript,
)
from superbird_agent.bridge.resolver import BridgeResolver
from superbird_agent.bridge.runner import CommandRunner
from superbird_agent.collaborators import SecretStore, ServerPortProvider, WebAppSource
from superbird_agent.config import AgentSettings
from superbird_agent.device.brightness import (
    MIN_SMOOTH_RAW,
    format_brightness,
    parse_brightness,
    ramp,
    validate_brightness,
)
from superbird_agent.device.locator import DeviceLocator
from superbird_agent.errors import (
    command_failed_error,
    missing_collaborator_error,
    no_device_error,
)

logger = structlog.get_logger()


class SetupState(Enum):
    """Readiness of the connected display."""

    NOT_FOUND = "not_found"
    NOT_INSTALLED = "not_installed"
    READY = "ready"


@dataclass(frozen=True)
class InstallStep:
    """One named bridge command in a multi-step operation."""

    name: str
    argv: list[str]


def install_steps(
    adb: BridgeCommand, serial: str, app_dir: Path, password: str
) -> list[InstallStep]:
    """Ordered steps staging the bundle and mounting it over the stock web app."""
    return [
        InstallStep("push", adb.push(serial, app_dir, STAGING_DIR)),
        InstallStep(
            "write_password", adb.shell(serial, RemoteScript.write_value(PASSWORD_FILE, password))
        ),
        InstallStep(
            "write_marker", adb.shell(serial, RemoteScript.touch(f"{STAGING_DIR}/{MARKER_NAME}"))
        ),
        InstallStep(
            "bind_mount", adb.shell(serial, RemoteScript.bind_mount(STAGING_DIR, WEBAPP_DIR))
        ),
    ]


class DeviceOperations:
    """Drives the display through adb.

    Every method takes an optional serial. When omitted, the device is
    rediscovered on that call; no serial is remembered between calls.
    Multi-step operations are not rolled back if a step fails.
    """

    def __init__(
        self,
        resolver: BridgeResolver,
        runner: CommandRunner,
        *,
        locator: DeviceLocator | None = None,
        secrets: SecretStore | None = None,
        server: ServerPortProvider | None = None,
        webapp: WebAppSource | None = None,
    ) -> None:
        self._resolver = resolver
        self._runner = runner
        self.locator = locator or DeviceLocator(resolver, runner)
        self._secrets = secrets
        self._server = server
        self._webapp = webapp

    @classmethod
    def from_settings(
        cls,
        settings: AgentSettings,
        *,
        secrets: SecretStore | None = None,
        server: ServerPortProvider | None = None,
        webapp: WebAppSource | None = None,
    ) -> DeviceOperations:
        runner = CommandRunner(timeout=settings.command_timeout)
        resolver = BridgeResolver(
            settings.data_dir,
            runner,
            url=settings.adb_url,
            timeout=settings.download_timeout,
        )
        return cls(resolver, runner, secrets=secrets, server=server, webapp=webapp)

    async def find_device(self) -> str | None:
        """Discover the display; None when nothing suitable is connected."""
        return await self.locator.find_device()

    async def restart_app(self, serial: str | None = None) -> None:
        """Restart the on-device browser so mount changes take effect."""
        serial = await self._resolve_serial(serial)
        adb = await self._resolver.command()

        logger.debug("browser_restarting", serial=serial)
        await self._run(adb.shell(serial, RemoteScript.supervisor("restart", BROWSER_SERVICE)))
        logger.info("browser_restarted", serial=serial)

    async def set_auto_brightness(self, enabled: bool, serial: str | None = None) -> None:
        """Start or stop the backlight service.

        While running, the service owns the backlight register and overrides
        manually written values.
        """
        serial = await self._resolve_serial(serial)
        adb = await self._resolver.command()

        action = "start" if enabled else "stop"
        await self._run(adb.shell(serial, RemoteScript.supervisor(action, BACKLIGHT_SERVICE)))
        logger.info("auto_brightness_set", serial=serial, enabled=enabled)

    async def get_brightness(self, serial: str | None = None, parse: bool = True) -> float | int:
        """Read the backlight, normalized by default or as the raw register."""
        serial = await self._resolve_serial(serial)
        adb = await self._resolver.command()

        command = adb.shell(serial, RemoteScript.read_file(BACKLIGHT_PATH))
        output = await self._run(command)
        try:
            raw = int(output)
        except ValueError:
            raise command_failed_error(command) from None
        return parse_brightness(raw) if parse else raw

    async def set_brightness(self, value: float, serial: str | None = None) -> None:
        """Jump straight to ``value``."""
        validate_brightness(value)
        serial = await self._resolve_serial(serial)
        adb = await self._resolver.command()

        raw = format_brightness(value)
        await self._run(adb.shell(serial, RemoteScript.write_value(BACKLIGHT_PATH, raw)))
        logger.debug("brightness_set", serial=serial, raw=raw)

    async def set_brightness_smooth(self, value: float, serial: str | None = None) -> None:
        """Fade to ``value`` over a fixed number of writes.

        The target never goes below 1 raw; the panel misbehaves at 0. A failed
        write stops the fade where it is.
        """
        validate_brightness(value)
        serial = await self._resolve_serial(serial)
        adb = await self._resolver.command()

        current = int(await self.get_brightness(serial, parse=False))
        target = max(format_brightness(value), MIN_SMOOTH_RAW)

        for raw in ramp(current, target):
            await self._run(adb.shell(serial, RemoteScript.write_value(BACKLIGHT_PATH, raw)))
        logger.debug("brightness_faded", serial=serial, start=current, target=target)

    async def restore(self, serial: str | None = None, restart: bool = True) -> None:
        """Unmount our web app if mounted and remove the staged copy."""
        serial = await self._resolve_serial(serial)
        adb = await self._resolver.command()

        logger.debug("restore_starting", serial=serial)
        mounted = await self._runner.run(adb.shell(serial, RemoteScript.is_mountpoint(WEBAPP_DIR)))
        if mounted is not None:
            logger.debug("restore_step", serial=serial, step="unmount")
            await self._run(adb.shell(serial, RemoteScript.unmount(WEBAPP_DIR)))

        logger.debug("restore_step", serial=serial, step="remove_staging")
        await self._run(adb.shell(serial, RemoteScript.remove_tree(STAGING_DIR)))
        logger.info("restore_complete", serial=serial, was_mounted=mounted is not None)

        if restart:
            await self.restart_app(serial)

    async def install_app(self, serial: str | None = None) -> None:
        """Replace the stock web app with ours: restore, stage, mount, restart."""
        if self._webapp is None:
            raise missing_collaborator_error("install_app", "web app source")
        if self._secrets is None:
            raise missing_collaborator_error("install_app", "secret store")

        serial = await self._resolve_serial(serial)
        app_dir = await self._webapp.get_web_app_dir()
        password = self._secrets.get_socket_password()

        await self.restore(serial, restart=False)

        adb = await self._resolver.command()
        logger.debug("install_starting", serial=serial, app_dir=str(app_dir))
        for step in install_steps(adb, serial, app_dir, password):
            logger.debug("install_step", serial=serial, step=step.name)
            await self._run(step.argv)
        logger.info("install_complete", serial=serial)

        await self.restart_app(serial)

    async def check_installed_app(self, serial: str | None = None) -> bool:
        """True when our marker file is present in the live web app dir."""
        serial = await self._resolve_serial(serial)
        adb = await self._resolver.command()

        marker = f"{WEBAPP_DIR}/{MARKER_NAME}"
        output = await self._run(adb.shell(serial, RemoteScript.check_path(marker)))
        return "No such file or directory" not in output

    async def forward_socket_server(self, serial: str | None = None) -> int:
        """Reverse-forward the device's socket port to the local server."""
        if self._server is None:
            raise missing_collaborator_error("forward_socket_server", "server port provider")

        serial = await self._resolve_serial(serial)
        adb = await self._resolver.command()
        port = await self._server.get_server_port()

        await self._run(adb.reverse(serial, REMOTE_SOCKET_PORT, port))
        logger.debug("socket_server_forwarded", serial=serial, local_port=port)
        return port

    async def setup_state(self) -> SetupState:
        """Report whether a display is connected and has our app installed."""
        serial = await self.find_device()
        if serial is None:
            return SetupState.NOT_FOUND
        if not await self.check_installed_app(serial):
            return SetupState.NOT_INSTALLED
        return SetupState.READY

    async def _resolve_serial(self, serial: str | None) -> str:
        if serial:
            return serial
        found = await self.locator.find_device()
        if found is None:
            raise no_device_error()
        return found

    async def _run(self, command: list[str]) -> str:
        output = await self._runner.run(command)
        if output is None:
            raise command_failed_error(command)
        return output
