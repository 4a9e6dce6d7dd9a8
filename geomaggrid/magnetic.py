"""
Estimates of the geomagnetic field from the reference grids
"""

__all__ = [
    'DEFAULT_SAMPLER', 'MagneticField', 'magnetic_declination', 'magnetic_field',
    'magnetic_field_strength', 'magnetic_field_vector', 'magnetic_inclination'
]

import math
from typing import Literal, NamedTuple

import numpy as np

from geomaggrid._tables import DECLINATION_TABLE, INCLINATION_TABLE, STRENGTH_TABLE
from geomaggrid.frames import Q_NED_TO_ENU, rotate_vector
from geomaggrid.sampling import GeoGridSampler


DEFAULT_SAMPLER = GeoGridSampler(DECLINATION_TABLE, INCLINATION_TABLE, STRENGTH_TABLE)


class MagneticField(NamedTuple):
    """Declination and inclination in degrees, strength in centi-Tesla"""
    declination: float
    inclination: float
    strength: float


def magnetic_declination(lat: float, lon: float) -> float:
    """
    Estimates the angle between magnetic north and true north, in degrees (positive east).

    Coordinates outside of [-90, 90] / [-180, 180] return 0.0.
    """
    return DEFAULT_SAMPLER.sample('declination', lat, lon)


def magnetic_inclination(lat: float, lon: float) -> float:
    """
    Estimates the angle between the field vector and the horizontal plane, in degrees
    (positive down).

    Coordinates outside of [-90, 90] / [-180, 180] return 0.0.
    """
    return DEFAULT_SAMPLER.sample('inclination', lat, lon)


def magnetic_field_strength(lat: float, lon: float) -> float:
    """
    Estimates the magnitude of the field vector, in centi-Tesla.

    Coordinates outside of [-90, 90] / [-180, 180] return 0.0.
    """
    return DEFAULT_SAMPLER.sample('strength', lat, lon)


def magnetic_field(lat: float, lon: float) -> MagneticField:
    """Samples declination, inclination and strength at a latitude/longitude"""
    return MagneticField(
        magnetic_declination(lat, lon),
        magnetic_inclination(lat, lon),
        magnetic_field_strength(lat, lon),
    )


def magnetic_field_vector(
    lat: float,
    lon: float,
    frame: Literal['NED', 'ENU'] = 'NED',
) -> np.ndarray:
    """
    Estimates the field vector at a latitude/longitude from its sampled declination,
    inclination and strength.

    Args:
        lat:
            Latitude, in degrees

        lon:
            Longitude, in degrees

        frame: (Default 'NED')
            The local frame of the returned vector, either 'NED' (north, east, down) or
            'ENU' (east, north, up)

    Returns:
        np.ndarray of 3 components, in centi-Tesla
    """
    if frame not in ('NED', 'ENU'):
        raise ValueError(f"Unrecognized frame '{frame}'; expected 'NED' or 'ENU'")

    field = magnetic_field(lat, lon)
    declination = math.radians(field.declination)
    inclination = math.radians(field.inclination)

    horizontal = field.strength * math.cos(inclination)
    ned = np.array([
        horizontal * math.cos(declination),
        horizontal * math.sin(declination),
        field.strength * math.sin(inclination),
    ])

    if frame == 'ENU':
        return rotate_vector(Q_NED_TO_ENU, ned)

    return ned
