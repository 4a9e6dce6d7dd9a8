import logging

import geomaggrid
from geomaggrid._version import _read_version_file


def test_public_api():
    assert geomaggrid.magnetic_declination(0, 0) == -5.
    assert geomaggrid.magnetic_inclination(0, 0) == -30.
    assert geomaggrid.magnetic_field_strength(0, 0) == 32.
    assert geomaggrid.DEFAULT_CONFIG == geomaggrid.SamplingConfig()
    assert geomaggrid.index_for(60, -60, 60, 10) == 11


def test_version():
    assert geomaggrid.__version__ == '0.1.0'


def test_logger():
    assert geomaggrid.LOGGER.name == 'geomaggrid'
    assert geomaggrid.LOGGER.level == logging.WARNING


def test_read_version_file():
    assert _read_version_file() == '0.1.0'
