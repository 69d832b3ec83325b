"""Range use cases — raw coordinates or grid references in, RangeResult out."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from utm_calc.domain.policies.grid_reference import parse_grid_reference
from utm_calc.domain.policies.range import utm_range
from utm_calc.domain.value_objects.utm_coordinate import UtmCoordinate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RangeResult:
    """Result of a range computation."""

    origin: UtmCoordinate
    destination: UtmCoordinate
    distance_km: float

    @property
    def distance_m(self) -> float:
        return self.distance_km * 1000


def range_between(origin: UtmCoordinate, destination: UtmCoordinate) -> RangeResult:
    """Compute the range between two coordinates already expressed in km."""
    distance = utm_range(origin, destination)
    logger.debug(
        "Range (%s, %s) → (%s, %s): %.3f km",
        origin.easting, origin.northing,
        destination.easting, destination.northing,
        distance,
    )
    return RangeResult(origin=origin, destination=destination, distance_km=distance)


def range_between_grids(origin_ref: str, destination_ref: str) -> RangeResult:
    """Parse two grid references and compute the range between them.

    Raises:
        GridReferenceError: from the parser, for the first bad reference.
    """
    origin = parse_grid_reference(origin_ref)
    destination = parse_grid_reference(destination_ref)
    return range_between(origin, destination)
