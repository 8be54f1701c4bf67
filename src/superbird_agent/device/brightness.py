"""Backlight register <-> normalized brightness transform.

The register is inverted: 0 is full brightness, 255 is dark.
"""

from __future__ import annotations

from superbird_agent.errors import invalid_brightness_error

RAW_MAX = 255
SMOOTH_STEPS = 10
MIN_SMOOTH_RAW = 1


def parse_brightness(raw: int | str) -> float:
    """Map a raw register value to a fraction in [0.0, 1.0]."""
    return 1 - int(raw) / RAW_MAX


def format_brightness(value: float) -> int:
    """Map a fraction in [0.0, 1.0] to a raw register value."""
    return RAW_MAX - round(value * RAW_MAX)


def validate_brightness(value: float) -> None:
    """Raise if ``value`` is outside the normalized range."""
    if not 0.0 <= value <= 1.0:
        raise invalid_brightness_error(value)


def ramp(current: int, target: int, steps: int = SMOOTH_STEPS) -> list[int]:
    """Linear raw values from ``current`` (exclusive) to ``target`` (inclusive)."""
    return [round(current + (target - current) * (i / steps)) for i in range(1, steps + 1)]
