"""adb executable resolver/provisioner with an on-disk platform-tools cache."""

from __future__ import annotations

import asyncio
import platform
import tempfile
from pathlib import Path

import httpx
import structlog

from superbird_agent.bridge.commands import BridgeCommand
from superbird_agent.bridge.runner import CommandRunner
from superbird_agent.config import DEFAULT_DOWNLOAD_TIMEOUT_SECS
from superbird_agent.errors import download_failed_error, extract_failed_error

logger = structlog.get_logger()

_DOWNLOAD_BASE = "https://dl.google.com/android/repository"
_ARCHIVE_NAME = "platform-tools-superbird-agent-temp.zip"
_PATH_EXECUTABLE = "adb"

# Hosts whose PATH adb is skipped in favor of the provisioned copy
_BROKEN_PATH_BRIDGE_SYSTEMS = {"Darwin"}

_PLATFORM_ARCHIVES = {
    "Windows": ("platform-tools-latest-windows.zip", "adb.exe"),
    "Darwin": ("platform-tools-latest-darwin.zip", "adb"),
    "Linux": ("platform-tools-latest-linux.zip", "adb"),
}


def platform_archive(system: str) -> tuple[str, str]:
    """Return (download URL, executable name) for a host OS name."""
    archive, executable = _PLATFORM_ARCHIVES.get(system, _PLATFORM_ARCHIVES["Linux"])
    return f"{_DOWNLOAD_BASE}/{archive}", executable


class BridgeResolver:
    """Resolves a runnable adb, downloading platform-tools into the data dir if needed."""

    def __init__(
        self,
        data_dir: Path,
        runner: CommandRunner,
        *,
        url: str | None = None,
        system: str | None = None,
        temp_dir: Path | None = None,
        timeout: float = DEFAULT_DOWNLOAD_TIMEOUT_SECS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._data_dir = data_dir
        self._runner = runner
        self._system = system or platform.system()
        default_url, self._executable_name = platform_archive(self._system)
        self._url = url or default_url
        self._temp_dir = temp_dir or Path(tempfile.gettempdir())
        self._timeout = timeout
        self._transport = transport
        self._resolved: str | None = None

    @property
    def install_path(self) -> Path:
        return self._data_dir / "platform-tools" / self._executable_name

    @property
    def archive_path(self) -> Path:
        return self._temp_dir / _ARCHIVE_NAME

    async def resolve(self) -> str:
        """Return the adb reference, provisioning it on first use."""
        if self._resolved is None:
            self._resolved = await self._resolve_uncached()
        return self._resolved

    async def command(self) -> BridgeCommand:
        """Return a command builder bound to the resolved executable."""
        return BridgeCommand(await self.resolve())

    async def _resolve_uncached(self) -> str:
        # A working PATH adb is taken as suitable without checking its version
        version = await self._runner.run(BridgeCommand(_PATH_EXECUTABLE).version())
        if version is not None and self._system not in _BROKEN_PATH_BRIDGE_SYSTEMS:
            logger.debug("bridge_on_path")
            return _PATH_EXECUTABLE

        adb_path = self.install_path
        if adb_path.exists():
            logger.debug("bridge_cached", path=str(adb_path))
            return str(adb_path)

        logger.info("bridge_downloading", url=self._url)
        archive = self.archive_path
        archive.unlink(missing_ok=True)
        await asyncio.to_thread(self._download_archive, archive)
        logger.info("bridge_downloaded", archive=str(archive))

        await self._extract(archive)
        logger.info("bridge_extracted", path=str(adb_path))
        return str(adb_path)

    def _download_archive(self, archive: Path) -> None:
        archive.parent.mkdir(parents=True, exist_ok=True)
        try:
            with (
                httpx.Client(
                    transport=self._transport, timeout=self._timeout, follow_redirects=True
                ) as client,
                client.stream("GET", self._url) as response,
            ):
                if response.status_code != 200:
                    logger.error(
                        "bridge_download_failed", url=self._url, status=response.status_code
                    )
                    raise download_failed_error(self._url, response.status_code)
                with archive.open("wb") as fh:
                    for chunk in response.iter_bytes():
                        fh.write(chunk)
        except httpx.HTTPError as exc:
            logger.error("bridge_download_failed", url=self._url, error=str(exc))
            raise download_failed_error(self._url, None, str(exc)) from None

    async def _extract(self, archive: Path) -> None:
        self._data_dir.mkdir(parents=True, exist_ok=True)
        result = await self._runner.run(["tar", "-xf", str(archive), "-C", str(self._data_dir)])
        if result is None:
            logger.error("bridge_extract_failed", archive=str(archive))
            raise extract_failed_error(str(archive), str(self._data_dir))
