"""Device locator - list adb devices and pick the supported display."""

from __future__ import annotations

import structlog

from superbird_agent.bridge.commands import WEBAPP_DIR, WEBAPP_FINGERPRINT, RemoteScript
from superbird_agent.bridge.resolver import BridgeResolver
from superbird_agent.bridge.runner import CommandRunner
from superbird_agent.errors import command_failed_error

logger = structlog.get_logger()


def parse_device_list(output: str) -> list[str]:
    """Extract serials in state ``device`` from ``adb devices`` output."""
    serials: list[str] = []
    for line in output.splitlines():
        parts = line.strip().split("\t")
        if len(parts) >= 2 and parts[1].strip() == "device":
            serials.append(parts[0].strip())
    return serials


class DeviceLocator:
    """Finds the first connected device carrying the stock web app."""

    def __init__(self, resolver: BridgeResolver, runner: CommandRunner) -> None:
        self._resolver = resolver
        self._runner = runner

    async def list_devices(self) -> list[str]:
        """List serials of authorized, online devices in adb's order."""
        command = (await self._resolver.command()).devices()
        output = await self._runner.run(command)
        if output is None:
            raise command_failed_error(command)
        return parse_device_list(output)

    async def is_valid_device(self, serial: str) -> bool:
        """Check the web app fingerprint is present on the device."""
        adb = await self._resolver.command()
        output = await self._runner.run(adb.shell(serial, RemoteScript.list_dir(WEBAPP_DIR)))
        if output is None:
            return False
        return WEBAPP_FINGERPRINT in output.split()

    async def find_device(self) -> str | None:
        """Return the first valid device serial, or None."""
        logger.debug("device_search")
        for serial in await self.list_devices():
            if await self.is_valid_device(serial):
                logger.info("device_found", serial=serial)
                return serial
            logger.debug("device_rejected", serial=serial)

        logger.warning("device_not_found")
        return None
