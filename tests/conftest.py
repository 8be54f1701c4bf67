"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from superbird_agent.bridge.commands import BridgeCommand

Handler = Callable[[list[str]], "str | None"]


class FakeRunner:
    """Records argv lists and answers them through a handler."""

    def __init__(self, handler: Handler | None = None) -> None:
        self.calls: list[list[str]] = []
        self.handler: Handler = handler or (lambda _argv: "")

    async def run(self, argv: list[str]) -> str | None:
        self.calls.append(argv)
        return self.handler(argv)

    @property
    def scripts(self) -> list[str]:
        """Remote shell scripts issued, in order."""
        return [argv[-1] for argv in self.calls if "shell" in argv]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def stub_resolver() -> MagicMock:
    """Resolver pinned to the PATH adb."""
    resolver = MagicMock()
    resolver.resolve = AsyncMock(return_value="adb")
    resolver.command = AsyncMock(return_value=BridgeCommand("adb"))
    return resolver


@pytest.fixture
def devices_output() -> str:
    return "List of devices attached\nX\tdevice\nY\tunauthorized\nZ\tdevice\n"
