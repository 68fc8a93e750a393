"""
Error taxonomy for the rasterization pipeline.

Every failure is terminal for the current calculation attempt and is raised
synchronously to whoever triggered it (CLI or session object).
"""

from typing import List, Optional, Sequence

from config import MISSING_INPUT_MESSAGE


class LineRasterError(Exception):
    """Base class for all errors raised by this package."""


class MissingInput(LineRasterError):
    """One or more of the four coordinate fields is empty."""

    def __init__(self, missing: Sequence[str]):
        self.missing: List[str] = list(missing)
        super().__init__(MISSING_INPUT_MESSAGE)


class NonFiniteInput(LineRasterError):
    """A coordinate could not be parsed, or parsed to NaN / infinity."""

    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(f"Coordinate {field} is not a finite number: {value!r}")


class DegenerateSegment(LineRasterError):
    """
    The rasterizer's denominator is zero:
      - basic mode: vertical segment (x1 == x2)
      - DDA mode:   zero-length segment (both endpoints identical)
    """

    def __init__(self, segment, mode: Optional[str] = None, reason: str = ""):
        self.segment = segment
        self.mode = mode
        self.reason = reason
        message = f"degenerate segment {segment}"
        if mode:
            message = f"[{mode}] {message}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class PrecisionLoss(LineRasterError):
    """
    Coordinates are so large that a fixed x step no longer changes x
    (|x| >= 2**53 for a step of 1.0), so the walk cannot advance.
    """

    def __init__(self, segment, mode: Optional[str] = None, at=None):
        self.segment = segment
        self.mode = mode
        self.at = at
        message = f"x step is below float resolution at x={at!r} for {segment}"
        if mode:
            message = f"[{mode}] {message}"
        super().__init__(message)
