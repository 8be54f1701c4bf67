"""Tests for error model."""

from __future__ import annotations

from superbird_agent.errors import (
    AgentError,
    command_failed_error,
    download_failed_error,
    extract_failed_error,
    invalid_brightness_error,
    missing_collaborator_error,
    no_device_error,
)


class TestAgentError:
    """Tests for AgentError."""

    def test_error_str(self) -> None:
        """Should format error as string."""
        error = AgentError(code="ERR_TEST", message="Test error", remediation="Fix it")
        assert str(error) == "[ERR_TEST] Test error"

    def test_error_to_dict(self) -> None:
        """Should convert to dict."""
        error = AgentError(
            code="ERR_TEST",
            message="Test error",
            context={"key": "value"},
            remediation="Fix it",
        )
        result = error.to_dict()

        assert result == {
            "code": "ERR_TEST",
            "message": "Test error",
            "context": {"key": "value"},
            "remediation": "Fix it",
        }

    def test_is_exception(self) -> None:
        """Should be raisable."""
        try:
            raise no_device_error()
        except AgentError as exc:
            assert exc.code == "ERR_NO_DEVICE"


class TestErrorConstructors:
    """Tests for error constructor functions."""

    def test_no_device_error(self) -> None:
        error = no_device_error()

        assert error.code == "ERR_NO_DEVICE"
        assert "usb" in error.remediation.lower()

    def test_download_failed_error(self) -> None:
        error = download_failed_error("https://example.com/pt.zip", 404)

        assert error.code == "ERR_DOWNLOAD_FAILED"
        assert error.context["status"] == 404
        assert "https://example.com/pt.zip" in error.message

    def test_extract_failed_error(self) -> None:
        error = extract_failed_error("/tmp/pt.zip", "/home/u/.superbird-agent")

        assert error.code == "ERR_EXTRACT_FAILED"
        assert error.context["destination"] == "/home/u/.superbird-agent"

    def test_command_failed_error(self) -> None:
        error = command_failed_error(["adb", "-s", "X", "shell", "ls /"])

        assert error.code == "ERR_COMMAND_FAILED"
        assert "adb -s X shell ls /" in error.message
        assert error.context["command"] == ["adb", "-s", "X", "shell", "ls /"]

    def test_invalid_brightness_error(self) -> None:
        error = invalid_brightness_error(1.5)

        assert error.code == "ERR_INVALID_BRIGHTNESS"
        assert error.context["value"] == 1.5

    def test_missing_collaborator_error(self) -> None:
        error = missing_collaborator_error("install_app", "secret store")

        assert error.code == "ERR_MISSING_COLLABORATOR"
        assert error.context == {"operation": "install_app", "collaborator": "secret store"}
