"""
Tests for typed scalar quantities and angle helpers.
"""

import math

import pytest

from rapidgeom.quantity import (
    angle_equal_within,
    degrees,
    in_degrees,
    in_millimeters,
    length_equal_within,
    meters,
    millimeters,
    normalize_angle,
    radians,
    turns,
)


def test_length_conversions():
    assert meters(2) == 2.0
    assert millimeters(250) == 0.25
    assert in_millimeters(millimeters(42.0)) == pytest.approx(42.0)


def test_angle_conversions():
    assert radians(1) == 1.0
    assert degrees(180) == pytest.approx(math.pi)
    assert turns(0.25) == pytest.approx(math.pi / 2)
    assert in_degrees(math.pi / 2) == pytest.approx(90.0)


@pytest.mark.parametrize(
    "angle, expected",
    [
        (0.0, 0.0),
        (math.pi, math.pi),
        (-math.pi, math.pi),
        (3 * math.pi / 2, -math.pi / 2),
        (7 * math.pi / 2, -math.pi / 2),
        (-0.5, -0.5),
    ],
)
def test_normalize_angle(angle, expected):
    assert normalize_angle(angle) == pytest.approx(expected)


def test_normalize_angle_range():
    for step in range(-50, 51):
        wrapped = normalize_angle(step * 0.37)
        assert -math.pi < wrapped <= math.pi


def test_angle_equal_within_wraps_around():
    assert angle_equal_within(1e-6, math.pi - 1e-9, -math.pi + 1e-9)
    assert angle_equal_within(1e-9, 0.0, 2 * math.pi)
    assert not angle_equal_within(1e-3, 0.0, 0.1)


def test_length_equal_within():
    assert length_equal_within(1e-9, 1.0, 1.0 + 1e-12)
    assert not length_equal_within(1e-9, 1.0, 1.001)
