"""Tests for math utility functions."""

from __future__ import annotations

import pytest

from glowkit.core.utils.math import clamp, lerp, round_half_up


def test_clamp_within_range():
    """Test clamping values within range."""
    assert clamp(5, 0, 10) == 5
    assert clamp(0, 0, 10) == 0
    assert clamp(10, 0, 10) == 10


def test_clamp_outside_range():
    """Test clamping values below minimum and above maximum."""
    assert clamp(-5, 0, 255) == 0
    assert clamp(300, 0, 255) == 255


def test_clamp_with_floats():
    """Test clamping with float values."""
    assert clamp(1.5, 0.0, 1.0) == 1.0
    assert isinstance(clamp(0.5, 0.0, 1.0), float)


def test_lerp_basic():
    """Test basic linear interpolation."""
    assert lerp(0, 10, 0.0) == 0.0
    assert lerp(0, 10, 1.0) == 10.0
    assert lerp(0, 10, 0.5) == 5.0
    assert isinstance(lerp(0, 10, 0.5), float)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (127.5, 128),
        (102.0, 102),
        (76.5, 77),
        (0.5, 1),
        (2.5, 3),
        (-2.5, -3),
        (0.49, 0),
    ],
)
def test_round_half_up(value, expected):
    """Test halves round away from zero."""
    assert round_half_up(value) == expected
