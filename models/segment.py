import math
from dataclasses import dataclass

from models.errors import DegenerateSegment, NonFiniteInput
from utils.geometry import dda_steps, slope_intercept


@dataclass(frozen=True)
class Segment:
    """
    Input of both rasterizers: two endpoints (x1, y1) → (x2, y2).

    Supports:
      - finiteness check at construction (NaN / ±inf rejected)
      - axis deltas and the DDA step count
      - slope / intercept of the supporting line
      - degeneracy tests for each rasterization mode
    """

    x1: float
    y1: float
    x2: float
    y2: float

    # ------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------
    def __post_init__(self):
        for name in ("x1", "y1", "x2", "y2"):
            raw = getattr(self, name)
            try:
                value = float(raw)
            except (TypeError, ValueError):
                raise NonFiniteInput(name, raw) from None
            if not math.isfinite(value):
                raise NonFiniteInput(name, raw)
            # frozen dataclass: bypass __setattr__ to store the coerced value
            object.__setattr__(self, name, value)

        # finite endpoints can still overflow when subtracted (-1e308 → 1e308)
        for name, delta in (("dx", self.dx), ("dy", self.dy)):
            if not math.isfinite(delta):
                raise NonFiniteInput(name, delta)

    @classmethod
    def from_points(cls, start, end) -> "Segment":
        """start/end: any (x, y) pair"""
        (x1, y1), (x2, y2) = start, end
        return cls(x1, y1, x2, y2)

    # ------------------------------------------------------------
    # Basic geometric properties
    # ------------------------------------------------------------
    @property
    def start(self):
        return (self.x1, self.y1)

    @property
    def end(self):
        return (self.x2, self.y2)

    @property
    def dx(self) -> float:
        return self.x2 - self.x1

    @property
    def dy(self) -> float:
        return self.y2 - self.y1

    @property
    def steps(self) -> float:
        """max(|dx|, |dy|), the DDA loop bound."""
        return dda_steps(self.dx, self.dy)

    @property
    def length(self) -> float:
        return math.dist(self.start, self.end)

    @property
    def is_vertical(self) -> bool:
        return self.x1 == self.x2

    @property
    def is_point(self) -> bool:
        return self.x1 == self.x2 and self.y1 == self.y2

    def slope(self) -> float:
        """
        m = (y2 - y1) / (x2 - x1).
        A vertical segment has no slope and raises DegenerateSegment.
        """
        return self._slope_intercept()[0]

    def y_intercept(self) -> float:
        """b = y1 - m x1"""
        return self._slope_intercept()[1]

    def _slope_intercept(self):
        try:
            return slope_intercept(self.x1, self.y1, self.x2, self.y2)
        except ZeroDivisionError:
            raise DegenerateSegment(self, reason="vertical segment has no slope") from None

    # ------------------------------------------------------------
    # Repr
    # ------------------------------------------------------------
    def __str__(self):
        return f"({self.x1:g}, {self.y1:g})→({self.x2:g}, {self.y2:g})"
