"""
Data Models

Defines the core data structures:
- Point / PointSequence
- Segment
- Mode / DisplayState
- Error taxonomy (MissingInput, NonFiniteInput, DegenerateSegment, PrecisionLoss)
"""

from .errors import (
    LineRasterError,
    MissingInput,
    NonFiniteInput,
    DegenerateSegment,
    PrecisionLoss,
)
from .mode import Mode, DisplayState
from .point import Point, PointSequence
from .segment import Segment

__all__ = [
    "Point",
    "PointSequence",
    "Segment",
    "Mode",
    "DisplayState",
    "LineRasterError",
    "MissingInput",
    "NonFiniteInput",
    "DegenerateSegment",
    "PrecisionLoss",
]
