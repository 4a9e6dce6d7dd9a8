import math

import numpy as np
import pytest

from geomaggrid._tables import DECLINATION_TABLE, INCLINATION_TABLE, STRENGTH_TABLE
from geomaggrid.magnetic import *
from tests.functions import table_value


def test_reference_tables():
    for table in (DECLINATION_TABLE, INCLINATION_TABLE, STRENGTH_TABLE):
        assert table.shape == (13, 37)
        assert not table.flags.writeable

    # The antimeridian column repeats on both sides
    for table in (DECLINATION_TABLE, INCLINATION_TABLE, STRENGTH_TABLE):
        assert (table[:, 0] == table[:, -1]).all()


def test_magnetic_declination():
    assert magnetic_declination(0, 0) == -5.
    assert magnetic_declination(0, 0) == float(DECLINATION_TABLE[6, 18])
    assert magnetic_declination(-30, 120) == table_value(DECLINATION_TABLE, -30, 120)
    assert magnetic_declination(5, 5) == pytest.approx(-2.25)
    assert magnetic_declination(91, 0) == 0.


def test_magnetic_inclination():
    assert magnetic_inclination(0, 0) == -30.
    assert magnetic_inclination(40, -100) == table_value(INCLINATION_TABLE, 40, -100)
    assert magnetic_inclination(0, -181) == 0.


def test_magnetic_field_strength():
    assert magnetic_field_strength(0, 0) == 32.
    assert magnetic_field_strength(-50, 150) == table_value(STRENGTH_TABLE, -50, 150)
    assert magnetic_field_strength(float('nan'), 0) == 0.


def test_magnetic_field():
    field = magnetic_field(0, 0)
    assert field == MagneticField(-5., -30., 32.)
    assert field.declination == -5.
    assert field.inclination == -30.
    assert field.strength == 32.

    assert magnetic_field(12.5, 47.2) == MagneticField(
        magnetic_declination(12.5, 47.2),
        magnetic_inclination(12.5, 47.2),
        magnetic_field_strength(12.5, 47.2),
    )


def test_magnetic_field_vector():
    ned = magnetic_field_vector(0, 0)
    assert ned.shape == (3,)
    assert np.linalg.norm(ned) == pytest.approx(32.)

    horizontal = 32. * math.cos(math.radians(-30.))
    np.testing.assert_allclose(
        ned,
        [
            horizontal * math.cos(math.radians(-5.)),
            horizontal * math.sin(math.radians(-5.)),
            32. * math.sin(math.radians(-30.)),
        ],
        atol=1e-9
    )
    # Negative inclination points the field up
    assert ned[2] == pytest.approx(-16.)

    enu = magnetic_field_vector(0, 0, frame='ENU')
    np.testing.assert_allclose(enu, [ned[1], ned[0], -ned[2]], atol=1e-9)

    np.testing.assert_allclose(magnetic_field_vector(95, 0), [0., 0., 0.])

    with pytest.raises(ValueError):
        magnetic_field_vector(0, 0, frame='XYZ')


def test_default_sampler():
    assert DEFAULT_SAMPLER.config.shape == (13, 37)
    assert DEFAULT_SAMPLER.sample('declination', 0, 0) == magnetic_declination(0, 0)

    with pytest.raises(ValueError):
        DEFAULT_SAMPLER.sample('declination', 95, 0, strict=True)
