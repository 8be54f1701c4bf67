"""Tests for DeviceLocator."""

from __future__ import annotations

import pytest

from superbird_agent.device.locator import DeviceLocator, parse_device_list
from superbird_agent.errors import AgentError


def test_parse_device_list_keeps_only_device_state(devices_output: str) -> None:
    assert parse_device_list(devices_output) == ["X", "Z"]


def test_parse_device_list_ignores_offline_and_crlf() -> None:
    output = "List of devices attached\r\nA\toffline\r\nB\tdevice\r\n\r\n"

    assert parse_device_list(output) == ["B"]


def test_parse_device_list_empty() -> None:
    assert parse_device_list("List of devices attached") == []


@pytest.mark.asyncio
async def test_list_devices(stub_resolver, fake_runner, devices_output: str) -> None:
    fake_runner.handler = lambda _argv: devices_output
    locator = DeviceLocator(stub_resolver, fake_runner)

    assert await locator.list_devices() == ["X", "Z"]
    assert fake_runner.calls == [["adb", "devices"]]


@pytest.mark.asyncio
async def test_list_devices_raises_on_failure(stub_resolver, fake_runner) -> None:
    fake_runner.handler = lambda _argv: None
    locator = DeviceLocator(stub_resolver, fake_runner)

    with pytest.raises(AgentError) as exc_info:
        await locator.list_devices()

    assert exc_info.value.code == "ERR_COMMAND_FAILED"


@pytest.mark.asyncio
async def test_is_valid_device_checks_fingerprint(stub_resolver, fake_runner) -> None:
    fake_runner.handler = lambda _argv: "app.js\nindex.html\nstyle.css"
    locator = DeviceLocator(stub_resolver, fake_runner)

    assert await locator.is_valid_device("X") is True
    assert fake_runner.calls == [
        ["adb", "-s", "X", "shell", "ls /usr/share/qt-superbird-app/webapp"]
    ]


@pytest.mark.asyncio
async def test_is_valid_device_without_fingerprint(stub_resolver, fake_runner) -> None:
    fake_runner.handler = lambda _argv: "ls: /usr/share/qt-superbird-app/webapp: No such file"
    locator = DeviceLocator(stub_resolver, fake_runner)

    assert await locator.is_valid_device("X") is False


@pytest.mark.asyncio
async def test_is_valid_device_on_command_failure(stub_resolver, fake_runner) -> None:
    fake_runner.handler = lambda _argv: None
    locator = DeviceLocator(stub_resolver, fake_runner)

    assert await locator.is_valid_device("X") is False


@pytest.mark.asyncio
async def test_find_device_empty_list_skips_validation(stub_resolver, fake_runner) -> None:
    """No candidates means no validation commands at all."""
    fake_runner.handler = lambda _argv: "List of devices attached\n"
    locator = DeviceLocator(stub_resolver, fake_runner)

    assert await locator.find_device() is None
    assert fake_runner.calls == [["adb", "devices"]]


@pytest.mark.asyncio
async def test_find_device_returns_first_valid(
    stub_resolver, fake_runner, devices_output: str
) -> None:
    """Should skip X (stock firmware missing) and return Z."""

    def _handler(argv: list[str]) -> str | None:
        if argv[1] == "devices":
            return devices_output
        return "index.html" if argv[2] == "Z" else "other.html"

    fake_runner.handler = _handler
    locator = DeviceLocator(stub_resolver, fake_runner)

    assert await locator.find_device() == "Z"
    validated = [argv[2] for argv in fake_runner.calls if "shell" in argv]
    assert validated == ["X", "Z"]


@pytest.mark.asyncio
async def test_find_device_stops_at_first_valid(
    stub_resolver, fake_runner, devices_output: str
) -> None:
    def _handler(argv: list[str]) -> str | None:
        if argv[1] == "devices":
            return devices_output
        return "index.html"

    fake_runner.handler = _handler
    locator = DeviceLocator(stub_resolver, fake_runner)

    assert await locator.find_device() == "X"
    assert len(fake_runner.calls) == 2


@pytest.mark.asyncio
async def test_find_device_none_valid(stub_resolver, fake_runner, devices_output: str) -> None:
    def _handler(argv: list[str]) -> str | None:
        return devices_output if argv[1] == "devices" else None

    fake_runner.handler = _handler
    locator = DeviceLocator(stub_resolver, fake_runner)

    assert await locator.find_device() is None
