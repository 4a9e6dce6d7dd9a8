"""
Module for unit conversions
"""
__all__ = ['convert_from_mps', 'convert_to_meters', 'convert_to_mps']

from typing import Dict

from geomaggrid._const import INCH_TO_METERS, KMH_TO_MPS


_DISTANCE_FACTORS = {
    'm': 1,
    'in': INCH_TO_METERS,
}

_SPEED_FACTORS = {
    'mps': 1,
    'kph': KMH_TO_MPS,
}


def _get_factor(factors: Dict[str, float], unit: str, kind: str) -> float:
    unit = unit.lower()
    if unit not in factors:
        raise ValueError(
            f"Unrecognized {kind} unit '{unit}'; expected one of {', '.join(factors)}"
        )

    return factors[unit]


def convert_to_meters(distance: float, unit: str) -> float:
    """
    Converts distance to meters.

    Args:
        distance (float): The distance value.
        unit (str): The unit of distance (meter = 'm', inch = 'in').

    Returns:
        float: The distance in meters.
    """
    return distance * _get_factor(_DISTANCE_FACTORS, unit, 'distance')


def convert_to_mps(speed: float, unit: str) -> float:
    """
    Converts speed to meters per second (m/s).

    Args:
        speed (float): Speed value.
        unit (str): Speed unit (meters per second = 'mps', kilometer per hour = 'kph').

    Returns:
        float: Speed in meters per second.
    """
    return speed * _get_factor(_SPEED_FACTORS, unit, 'speed')


def convert_from_mps(speed: float, unit: str) -> float:
    """
    Converts speed in meters per second (m/s) to another unit. Accepts the same units
    as convert_to_mps.
    """
    return speed / _get_factor(_SPEED_FACTORS, unit, 'speed')
