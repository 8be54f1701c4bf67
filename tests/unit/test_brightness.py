"""Tests for the brightness transform."""

from __future__ import annotations

import pytest

from superbird_agent.device.brightness import (
    format_brightness,
    parse_brightness,
    ramp,
    validate_brightness,
)
from superbird_agent.errors import AgentError


def test_parse_extremes() -> None:
    """Raw 0 is full brightness, 255 is dark."""
    assert parse_brightness(0) == 1.0
    assert parse_brightness(255) == 0.0


def test_parse_accepts_register_text() -> None:
    assert parse_brightness("51") == pytest.approx(0.8)


def test_format_extremes() -> None:
    assert format_brightness(1.0) == 0
    assert format_brightness(0.0) == 255


@pytest.mark.parametrize("raw", range(256))
def test_format_parse_within_one_step(raw: int) -> None:
    """Converting a raw value and back loses at most one step."""
    assert abs(format_brightness(parse_brightness(raw)) - raw) <= 1


@pytest.mark.parametrize("value", [-0.01, 1.01, 5.0])
def test_validate_rejects_out_of_range(value: float) -> None:
    with pytest.raises(AgentError) as exc_info:
        validate_brightness(value)

    assert exc_info.value.code == "ERR_INVALID_BRIGHTNESS"


@pytest.mark.parametrize("value", [0.0, 0.5, 1.0])
def test_validate_accepts_range(value: float) -> None:
    validate_brightness(value)


def test_ramp_has_fixed_step_count() -> None:
    assert len(ramp(0, 255)) == 10
    assert len(ramp(100, 100)) == 10
    assert len(ramp(255, 1)) == 10


def test_ramp_ends_on_target() -> None:
    steps = ramp(200, 1)

    assert steps[-1] == 1
    assert steps[0] == round(200 + (1 - 200) * 0.1)
    assert steps == sorted(steps, reverse=True)
