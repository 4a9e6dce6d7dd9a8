"""
Helpers for wrapping angles into canonical ranges
"""

__all__ = ['wrap', 'wrap_2pi', 'wrap_90', 'wrap_180', 'wrap_360', 'wrap_pi']

import math


def wrap(value: float, low: float, high: float) -> float:
    """
    Wraps a value into the right-open interval [low, high).

    Args:
        value:
            The value to wrap

        low:
            The inclusive lower bound

        high:
            The exclusive upper bound

    Returns:
        float
    """
    span = high - low
    if span <= 0:
        raise ValueError(f'upper bound {high} must be greater than lower bound {low}')

    offset = (value - low) % span
    if offset == span:
        # Tiny negative offsets round up to the full span
        offset = 0.0

    return low + offset


def wrap_360(degrees: float) -> float:
    """Wraps an angle in degrees into [0, 360)"""
    return wrap(degrees, 0.0, 360.0)


def wrap_180(degrees: float) -> float:
    """Wraps an angle in degrees into [-180, 180]; in-range angles are returned unchanged"""
    if -180.0 <= degrees <= 180.0:
        return degrees

    return wrap(degrees, -180.0, 180.0)


def wrap_90(degrees: float) -> float:
    """
    Folds an angle in degrees into [-90, 90] by reflecting about +/-90, e.g. an elevation
    of 100 degrees becomes 80 degrees.
    """
    degrees = wrap_180(degrees)
    if degrees > 90.0:
        return 180.0 - degrees

    if degrees < -90.0:
        return -180.0 - degrees

    return degrees


def wrap_2pi(radians: float) -> float:
    """Wraps an angle in radians into [0, 2pi)"""
    return wrap(radians, 0.0, 2 * math.pi)


def wrap_pi(radians: float) -> float:
    """Wraps an angle in radians into [-pi, pi)"""
    return wrap(radians, -math.pi, math.pi)
