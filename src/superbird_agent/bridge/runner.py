"""Command runner - one child process per call, output or None."""

from __future__ import annotations

import asyncio
import subprocess

import structlog

logger = structlog.get_logger()


class CommandRunner:
    """Runs an argument vector to completion and captures its output.

    Expected failures (missing binary, non-zero exit, timeout) are reported
    as ``None`` rather than raised; callers decide what a failure means.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = timeout

    async def run(self, argv: list[str]) -> str | None:
        """Return trimmed stdout+stderr on success, ``None`` on failure."""

        def _run() -> subprocess.CompletedProcess[str]:
            return subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                timeout=self._timeout,
            )

        try:
            result = await asyncio.to_thread(_run)
        except subprocess.TimeoutExpired:
            logger.debug("command_timeout", argv=argv, timeout=self._timeout)
            return None
        except OSError as exc:
            logger.debug("command_spawn_failed", argv=argv, error=str(exc))
            return None

        output = (result.stdout or "").strip()
        if result.returncode != 0:
            logger.debug(
                "command_failed", argv=argv, returncode=result.returncode, output=output[:200]
            )
            return None
        return output
