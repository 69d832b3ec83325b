"""Grid reference errors.

Both kinds derive from ``ValueError`` so callers that only care about bad
input can catch that; callers that need to tell them apart use ``kind``.
"""

from __future__ import annotations

from utm_calc.domain.value_objects.enums import ErrorKind


class GridReferenceError(ValueError):
    """Base class for a grid reference that cannot be turned into a coordinate."""

    kind: ErrorKind

    def __init__(self, reference: str, message: str) -> None:
        super().__init__(message)
        self.reference = reference
        self.message = message


class MalformedCoordinates(GridReferenceError):
    """The reference has a digit count outside the accepted set."""

    kind = ErrorKind.MALFORMED


class GridParseError(GridReferenceError):
    """The reference has a valid length but a half is not an unsigned integer.

    The underlying ``ValueError`` is available as ``__cause__``.
    """

    kind = ErrorKind.PARSE
