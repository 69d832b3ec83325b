"""Grid reference parsing — digit string to UtmCoordinate.

A reference is an even number of digits: the first half is the easting and
the second half the northing. The length sets the precision:

    "55"          -> 10km  (5, 5)
    "5518"        -> 1km   (55, 18)
    "553184"      -> 100m  (55.3, 18.4)
    "55341840"    -> 10m   (55.34, 18.40)
    "5534018400"  -> 1m    (55.340, 18.400)
"""

from __future__ import annotations

import logging

from utm_calc.domain.errors import GridParseError, MalformedCoordinates
from utm_calc.domain.value_objects.enums import GridPrecision
from utm_calc.domain.value_objects.utm_coordinate import UtmCoordinate

logger = logging.getLogger(__name__)

ACCEPTED_LENGTHS: tuple[int, ...] = (2, 4, 6, 8, 10)


def _scale_exponent(digits: int) -> int:
    return 2 - digits // 2


def grid_scale(digits: int) -> float:
    """Kilometres per unit for a reference of ``digits`` characters."""
    return 10.0 ** _scale_exponent(digits)


def _apply_scale(value: int, digits: int) -> float:
    # Divide for negative exponents.
    exponent = _scale_exponent(digits)
    if exponent >= 0:
        return float(value * 10**exponent)
    return value / 10 ** (-exponent)


def _parse_unsigned(group: str) -> int:
    """Parse a group of ASCII digits 0-9."""
    if not (group.isascii() and group.isdigit()):
        raise ValueError(f"invalid literal for unsigned integer: {group!r}")
    return int(group)


def parse_grid_reference(reference: str) -> UtmCoordinate:
    """Parse a fixed-width grid reference into a coordinate in km.

    Args:
        reference: 2, 4, 6, 8 or 10 decimal digits.

    Returns:
        UtmCoordinate with easting/northing in kilometres.

    Raises:
        MalformedCoordinates: if the length is not an accepted one.
        GridParseError: if either half is not an unsigned integer.
    """
    digits = len(reference)
    if digits not in ACCEPTED_LENGTHS:
        raise MalformedCoordinates(
            reference,
            f"Malformed coordinates {reference!r}: expected one of "
            f"{', '.join(map(str, ACCEPTED_LENGTHS))} digits, got {digits}",
        )

    half = digits // 2
    try:
        easting = _parse_unsigned(reference[:half])
        northing = _parse_unsigned(reference[half:])
    except ValueError as e:
        raise GridParseError(
            reference, f"Could not parse grid reference {reference!r}: {e}"
        ) from e

    coordinate = UtmCoordinate(
        easting=_apply_scale(easting, digits),
        northing=_apply_scale(northing, digits),
    )
    logger.debug(
        "Parsed %s (%s) → (%s, %s)",
        reference, GridPrecision.from_digits(digits).value,
        coordinate.easting, coordinate.northing,
    )
    return coordinate
