import pytest
from geomaggrid.conversion import *


def test_convert_to_meters():
    # Test cases: (distance, unit, expected_result)
    test_data = [
        (1.0, 'm', 1.0),
        (1.0, 'in', 0.0254),
        (10.0, 'IN', 0.254),
    ]

    for distance, unit, expected_result in test_data:
        result = convert_to_meters(distance, unit)
        assert result == pytest.approx(expected_result, rel=1e-6)

    for unit in ('km', 'ft', 'furlong'):
        with pytest.raises(ValueError):
            convert_to_meters(1.0, unit)


def test_convert_to_mps():
    # Test cases: (speed, unit, expected_result)
    test_data = [
        (1.0, 'mps', 1.0),
        (3.6, 'kph', 1.0),
        (36.0, 'KPH', 10.0),
    ]

    for speed, unit, expected_result in test_data:
        result = convert_to_mps(speed, unit)
        assert result == pytest.approx(expected_result, rel=1e-6)

    for unit in ('mph', 'kn', 'mach'):
        with pytest.raises(ValueError):
            convert_to_mps(1.0, unit)


def test_convert_from_mps():
    assert convert_from_mps(1.0, 'kph') == pytest.approx(3.6)
    assert convert_from_mps(2.5, 'mps') == 2.5

    for unit in ('mps', 'kph'):
        assert convert_from_mps(convert_to_mps(12.5, unit), unit) == pytest.approx(12.5)

    with pytest.raises(ValueError):
        convert_from_mps(1.0, 'mph')
