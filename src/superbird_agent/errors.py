"""Error model - Actionable errors with remediation hints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class AgentError(Exception):
    """
    Base error with context and remediation guidance.

    Every failure surfaced to a caller carries a stable code, a message,
    and a hint on what to try next.
    """

    code: str
    message: str
    context: dict[str, Any] = field(default_factory=dict)
    remediation: str = ""

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
            "remediation": self.remediation,
        }


def no_device_error() -> AgentError:
    """Create error for auto-discovery finding no supported device."""
    return AgentError(
        code="ERR_NO_DEVICE",
        message="No valid device found",
        context={},
        remediation="Plug in the display over USB, then check 'device list'.",
    )


def download_failed_error(url: str, status: int | None, reason: str = "") -> AgentError:
    """Create error for a failed platform-tools download."""
    return AgentError(
        code="ERR_DOWNLOAD_FAILED",
        message=f"Failed to download adb from {url}",
        context={"url": url, "status": status, "reason": reason},
        remediation="Check network access, or install platform-tools and put adb on PATH.",
    )


def extract_failed_error(archive: str, destination: str) -> AgentError:
    """Create error for a failed platform-tools extraction."""
    return AgentError(
        code="ERR_EXTRACT_FAILED",
        message=f"Failed to extract {archive}",
        context={"archive": archive, "destination": destination},
        remediation="Ensure 'tar' is installed and the data directory is writable.",
    )


def command_failed_error(command: list[str]) -> AgentError:
    """Create error for a bridge command that returned no result."""
    joined = " ".join(command)
    return AgentError(
        code="ERR_COMMAND_FAILED",
        message=f"adb command failed: {joined}",
        context={"command": command},
        remediation="Check the device is still connected and authorized, then retry.",
    )


def file_not_found_error(path: str) -> AgentError:
    """Create error for missing local file."""
    return AgentError(
        code="ERR_FILE_NOT_FOUND",
        message=f"Local path not found: {path}",
        context={"path": path},
        remediation="Verify the web app bundle path and try again.",
    )


def invalid_brightness_error(value: float) -> AgentError:
    """Create error for a brightness outside the normalized range."""
    return AgentError(
        code="ERR_INVALID_BRIGHTNESS",
        message=f"Invalid brightness: {value}",
        context={"value": value},
        remediation="Brightness must be between 0.0 and 1.0.",
    )


def missing_collaborator_error(operation: str, collaborator: str) -> AgentError:
    """Create error for an operation run without a required collaborator."""
    return AgentError(
        code="ERR_MISSING_COLLABORATOR",
        message=f"{operation} requires a {collaborator}",
        context={"operation": operation, "collaborator": collaborator},
        remediation="Construct DeviceOperations with the collaborator, or pass it on the CLI.",
    )
