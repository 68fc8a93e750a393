"""
Digital Differential Analyzer rasterizer.

Steps along the longer axis of displacement with real-valued increments
and snaps each accumulated position to the nearest grid point.
"""

import logging
from typing import List, Tuple

from models.errors import DegenerateSegment
from models.mode import Mode
from models.point import Point, PointSequence
from models.segment import Segment
from utils.geometry import round_half_away_from_zero

logger = logging.getLogger(__name__)


class DDARasterizer:
    """
    compute(segment) → PointSequence of integer points.

        dx, dy  = x2 - x1, y2 - y1
        steps   = max(|dx|, |dy|)
        x_inc   = dx / steps,  y_inc = dy / steps

    For k = 0, 1, ... while k <= steps the current position is rounded
    (half away from zero) and emitted, then advanced by the increments.
    That is floor(steps) + 1 points, steps itself is never rounded.
    Rounding is applied to the accumulated position, never to the increments.
    """

    mode = Mode.DDA

    def positions(self, segment: Segment) -> List[Tuple[float, float]]:
        """
        The un-rounded accumulated positions, one per emitted point.
        Raises DegenerateSegment for a zero-length segment.
        """
        steps = segment.steps
        if steps == 0:
            raise DegenerateSegment(segment, self.mode.value, "zero-length segment, steps == 0")

        x_inc = segment.dx / steps
        y_inc = segment.dy / steps

        out = []
        x, y = segment.x1, segment.y1
        k = 0
        while k <= steps:
            out.append((x, y))
            x += x_inc
            y += y_inc
            k += 1

        return out

    def compute(self, segment: Segment) -> PointSequence:
        points = [
            Point(round_half_away_from_zero(x), round_half_away_from_zero(y))
            for x, y in self.positions(segment)
        ]
        logger.debug("dda: %d points for %s (steps=%g)", len(points), segment, segment.steps)
        return PointSequence(tuple(points))
