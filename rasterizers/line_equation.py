"""
Basic ("slope-intercept") rasterizer.

Walks x from x1 in fixed unit steps and evaluates y = m x + b at each
sample. y is the true line value, so it may be fractional.
"""

import logging

from config import get_active_params
from models.errors import DegenerateSegment, PrecisionLoss
from models.mode import Mode
from models.point import Point, PointSequence
from models.segment import Segment

logger = logging.getLogger(__name__)


class LineEquationRasterizer:
    """
    compute(segment) → PointSequence

    Behaviour worth knowing:
      • x1 == x2 raises DegenerateSegment (the slope is undefined)
      • x1 >  x2 returns an empty sequence: the step is always +1 and the
        loop condition x <= x2 is checked before the first emission
      • the walk is not snapped to x2; with a fractional span the last
        sample is the last x1 + k that is still <= x2
      • at |x| >= 2**53 adding the step leaves x unchanged; that raises
        PrecisionLoss instead of looping forever
    """

    mode = Mode.BASIC

    def compute(self, segment: Segment) -> PointSequence:
        if segment.is_vertical:
            raise DegenerateSegment(segment, self.mode.value, "x1 == x2, slope is undefined")

        m = segment.slope()
        b = segment.y_intercept()
        step = get_active_params()["BASIC_X_STEP"]

        points = []
        x = segment.x1
        while x <= segment.x2:
            points.append(Point(x, m * x + b))
            next_x = x + step
            if next_x == x:
                # step absorbed by float resolution, the walk would never end
                raise PrecisionLoss(segment, self.mode.value, at=x)
            x = next_x

        if not points:
            logger.debug("x1 > x2 for %s, basic walk emitted no points", segment)

        logger.debug("basic: %d points for %s (m=%g, b=%g)", len(points), segment, m, b)
        return PointSequence(tuple(points))
