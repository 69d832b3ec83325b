"""Range calculator CLI.

Usage:
    utm-calc range <aeast> <anorth> <beast> <bnorth>
    utm-calc grid <a> <b>
    python -m utm_calc.tools.range_cli grid 55341840 55401850

Eastings/northings for ``range`` are in kilometres; the result is printed in
metres.
"""

from __future__ import annotations

import argparse
import logging
import math

from utm_calc.application.use_cases.compute_range import (
    RangeResult,
    range_between,
    range_between_grids,
)
from utm_calc.config import settings
from utm_calc.domain.errors import GridReferenceError
from utm_calc.domain.value_objects.utm_coordinate import UtmCoordinate

logger = logging.getLogger(__name__)


def _km(raw: str) -> float:
    """argparse type for a finite kilometre value."""
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {raw!r}") from None
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"value must be finite: {raw!r}")
    return value


def format_range(result: RangeResult, width: int | None = None) -> str:
    """Render a range in whole metres, right-justified: ``Range:   5000m``."""
    if width is None:
        width = settings.range_width
    return f"Range: {result.distance_m:>{width}.0f}m"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="utm-calc",
        description="Planar range between two grid coordinates",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="mode", required=True)

    raw = subparsers.add_parser("range", help="Range between two easting/northing pairs (km)")
    raw.add_argument("aeast", type=_km, help="Easting of the first point (km)")
    raw.add_argument("anorth", type=_km, help="Northing of the first point (km)")
    raw.add_argument("beast", type=_km, help="Easting of the second point (km)")
    raw.add_argument("bnorth", type=_km, help="Northing of the second point (km)")

    grid = subparsers.add_parser("grid", help="Range between two grid references")
    grid.add_argument("a", help="First grid reference (2-10 digits)")
    grid.add_argument("b", help="Second grid reference (2-10 digits)")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(levelname)s | %(message)s",
    )

    if args.mode == "range":
        result = range_between(
            UtmCoordinate(easting=args.aeast, northing=args.anorth),
            UtmCoordinate(easting=args.beast, northing=args.bnorth),
        )
    else:
        try:
            result = range_between_grids(args.a.strip(), args.b.strip())
        except GridReferenceError as e:
            logger.warning("Rejected grid reference %r (%s)", e.reference, e.kind.value)
            parser.error(e.message)

    print(format_range(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
