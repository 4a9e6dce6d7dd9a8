
from geomaggrid._version import __version__  # noqa: F401
from geomaggrid.utils.logging import LOGGER
from geomaggrid.sampling import DEFAULT_CONFIG, GeoGridSampler, SamplingConfig, index_for, sample
from geomaggrid.magnetic import (
    MagneticField, magnetic_declination, magnetic_field, magnetic_field_strength,
    magnetic_field_vector, magnetic_inclination
)

__all__ = [
    'DEFAULT_CONFIG',
    'GeoGridSampler',
    'MagneticField',
    'SamplingConfig',
    'index_for',
    'magnetic_declination',
    'magnetic_field',
    'magnetic_field_strength',
    'magnetic_field_vector',
    'magnetic_inclination',
    'sample',
    'LOGGER',
]
