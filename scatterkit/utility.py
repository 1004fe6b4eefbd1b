"""Numeric helpers shared by the scattering-signal tools."""

from __future__ import annotations

import math
import sys

_EPSILON = sys.float_info.epsilon
_MIN_NORMAL = sys.float_info.min


def radians(angle: float) -> float:
    """Convert an angle in degrees to radians."""
    return angle * math.pi / 180.0


def almost_equal(x: float, y: float, ulp: float = 10.0) -> bool:
    """Return True if ``x`` and ``y`` agree within ``ulp`` units in the last place."""
    diff = abs(x - y)
    return diff <= _EPSILON * abs(x + y) * ulp or diff < _MIN_NORMAL


def generate_linspace(x0: float, x1: float, interval_count: int) -> list[float]:
    """Return ``interval_count`` evenly spaced values starting at ``x0``.

    The end point ``x1`` is not included. With zero intervals the result
    holds ``x0`` alone.
    """
    if interval_count < 0:
        raise ValueError("interval count must not be negative")
    if interval_count == 0:
        return [float(x0)]
    step = (x1 - x0) / float(interval_count)
    return [float(x0 + i * step) for i in range(interval_count)]


def generate_linspace_with_step(x0: float, x1: float, step: float) -> list[float]:
    """Return values from ``x0`` towards ``x1`` spaced by roughly ``step``."""
    if step == 0:
        raise ValueError("step must not be zero")
    num_steps = int((x1 - x0) / step)
    if num_steps < 0:
        raise ValueError("step points away from the end value")
    return generate_linspace(x0, x1, num_steps)


def generate_zero_array(count: int) -> list[float]:
    """Return a list of ``count`` zeros."""
    return generate_number_array(count, 0.0)


def generate_number_array(count: int, number: float) -> list[float]:
    """Return a list holding ``number`` ``count`` times."""
    if count < 0:
        raise ValueError("count must not be negative")
    return [float(number)] * count