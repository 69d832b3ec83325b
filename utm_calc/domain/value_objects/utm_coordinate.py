"""UtmCoordinate value object — immutable (easting, northing) pair in km."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class UtmCoordinate:
    easting: float  # km
    northing: float  # km

    def range_km(self, other: "UtmCoordinate") -> float:
        """Straight-line (planar) distance in km to another grid coordinate."""
        x_diff = other.easting - self.easting
        y_diff = other.northing - self.northing

        return math.sqrt(x_diff**2 + y_diff**2)
