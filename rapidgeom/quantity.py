"""
Typed scalar quantities.

Lengths, angles and unitless ratios are all plain floats at runtime. The
``NewType`` wrappers let a type checker tell them apart; the helpers below are
the only place where unit conversion happens.
"""

import math
from typing import NewType

Length = NewType("Length", float)
Angle = NewType("Angle", float)
Ratio = NewType("Ratio", float)


def meters(value: float) -> Length:
    return Length(float(value))


def millimeters(value: float) -> Length:
    return Length(float(value) / 1000.0)


def in_millimeters(length: float) -> float:
    return length * 1000.0


def radians(value: float) -> Angle:
    return Angle(float(value))


def degrees(value: float) -> Angle:
    """Build an angle from a value in degrees."""
    return Angle(math.radians(value))


def turns(value: float) -> Angle:
    """Build an angle from a number of full turns."""
    return Angle(value * 2.0 * math.pi)


def in_degrees(angle: float) -> float:
    return math.degrees(angle)


def normalize_angle(angle: float) -> Angle:
    """
    Wrap an angle into the half-open interval (-pi, pi].

    Args:
        angle: Angle in radians, any magnitude

    Returns:
        Equivalent angle in (-pi, pi]
    """
    wrapped = math.remainder(angle, 2.0 * math.pi)
    if wrapped <= -math.pi:
        return Angle(math.pi)
    return Angle(wrapped)


def angle_equal_within(tolerance: float, first: float, second: float) -> bool:
    """
    Check whether two angles are equal within a tolerance, modulo full turns.

    ``pi - 1e-9`` and ``-pi + 1e-9`` are considered close.
    """
    return abs(normalize_angle(first - second)) <= tolerance


def length_equal_within(tolerance: float, first: float, second: float) -> bool:
    return abs(first - second) <= tolerance
