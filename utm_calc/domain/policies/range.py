"""Planar range between two grid coordinates."""

from utm_calc.domain.value_objects.utm_coordinate import UtmCoordinate


def utm_range(location: UtmCoordinate, destination: UtmCoordinate) -> float:
    """Euclidean distance in km between two coordinates. Symmetric, never negative."""
    return location.range_km(destination)
