"""Pytest configuration and shared fixtures."""

import pytest

from utm_calc.domain.value_objects.utm_coordinate import UtmCoordinate


@pytest.fixture
def origin():
    return UtmCoordinate(easting=3.0, northing=0.0)


@pytest.fixture
def destination():
    return UtmCoordinate(easting=6.0, northing=4.0)
