"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class ErrorKind(str, Enum):
    MALFORMED = "malformed_coordinates"
    PARSE = "parse_error"


class GridPrecision(str, Enum):
    """Precision implied by the number of digits in a grid reference."""

    TEN_KILOMETRES = "10km"
    ONE_KILOMETRE = "1km"
    HUNDRED_METRES = "100m"
    TEN_METRES = "10m"
    ONE_METRE = "1m"

    @property
    def digits(self) -> int:
        return _PRECISION_DIGITS[self]

    @property
    def metres(self) -> int:
        """Ground distance covered by one unit of the last digit."""
        return 10 ** (5 - self.digits // 2)

    @classmethod
    def from_digits(cls, digits: int) -> "GridPrecision":
        for precision, count in _PRECISION_DIGITS.items():
            if count == digits:
                return precision
        raise ValueError(f"No grid precision for {digits} digits")


_PRECISION_DIGITS = {
    GridPrecision.TEN_KILOMETRES: 2,
    GridPrecision.ONE_KILOMETRE: 4,
    GridPrecision.HUNDRED_METRES: 6,
    GridPrecision.TEN_METRES: 8,
    GridPrecision.ONE_METRE: 10,
}
