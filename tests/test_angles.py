import math

import pytest

from geomaggrid.angles import *


def test_wrap():
    assert wrap(5., 0., 10.) == 5.
    assert wrap(12., 0., 10.) == 2.
    assert wrap(-3., 0., 10.) == 7.
    assert wrap(10., 0., 10.) == 0.
    assert wrap(0., -5., 5.) == 0.
    assert wrap(5., -5., 5.) == -5.
    assert wrap(-1e-20, 0., 360.) == 0.

    with pytest.raises(ValueError):
        wrap(1., 10., 10.)

    with pytest.raises(ValueError):
        wrap(1., 10., 0.)


def test_wrap_360():
    assert wrap_360(0.) == 0.
    assert wrap_360(-30.) == 330.
    assert wrap_360(360.) == 0.
    assert wrap_360(725.) == 5.
    assert wrap_360(-720.) == 0.


def test_wrap_180():
    assert wrap_180(0.) == 0.
    assert wrap_180(180.) == 180.
    assert wrap_180(-180.) == -180.
    assert wrap_180(190.) == -170.
    assert wrap_180(-190.) == 170.
    assert wrap_180(350.) == -10.
    assert wrap_180(-540.) == -180.


def test_wrap_90():
    assert wrap_90(45.) == 45.
    assert wrap_90(90.) == 90.
    assert wrap_90(100.) == 80.
    assert wrap_90(-100.) == -80.
    assert wrap_90(180.) == 0.
    assert wrap_90(-180.) == 0.
    assert wrap_90(260.) == -80.


def test_wrap_pi():
    assert wrap_pi(0.) == 0.
    assert wrap_pi(1.5 * math.pi) == pytest.approx(-0.5 * math.pi)
    assert wrap_pi(-1.5 * math.pi) == pytest.approx(0.5 * math.pi)
    assert wrap_pi(math.pi) == pytest.approx(-math.pi)


def test_wrap_2pi():
    assert wrap_2pi(0.) == 0.
    assert wrap_2pi(-0.5 * math.pi) == pytest.approx(1.5 * math.pi)
    assert wrap_2pi(5 * math.pi) == pytest.approx(math.pi)
    assert 0. <= wrap_2pi(2 * math.pi) < 2 * math.pi
