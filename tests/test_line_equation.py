"""
Tests for the basic (slope-intercept) rasterizer.

Verifies:
- Reference scenarios (diagonal, vertical, backwards)
- Point count floor(x2 - x1) + 1 and the k-th sample value
- No snapping to x2 on fractional spans
- Immutability of the result
"""
import dataclasses
import math

import pytest

from models.errors import DegenerateSegment, NonFiniteInput, PrecisionLoss
from models.point import PointSequence
from models.segment import Segment
from rasterizers.line_equation import LineEquationRasterizer


@pytest.fixture
def basic():
    return LineEquationRasterizer()


# ══════════════════════════════════════════════════════════════════════════
# Reference scenarios
# ══════════════════════════════════════════════════════════════════════════

class TestScenarios:

    def test_diagonal(self, basic, diagonal):
        points = basic.compute(diagonal)
        assert list(points) == [(0, 0), (1, 1), (2, 2), (3, 3), (4, 4)]

    def test_vertical_is_degenerate(self, basic, vertical):
        with pytest.raises(DegenerateSegment) as exc:
            basic.compute(vertical)
        assert exc.value.mode == "basic"
        assert exc.value.segment == vertical

    def test_backwards_is_empty_not_error(self, basic, backwards):
        points = basic.compute(backwards)
        assert isinstance(points, PointSequence)
        assert len(points) == 0

    def test_negative_slope(self, basic):
        points = basic.compute(Segment(0, 4, 4, 0))
        assert list(points) == [(0, 4), (1, 3), (2, 2), (3, 1), (4, 0)]

    def test_horizontal(self, basic):
        points = basic.compute(Segment(0, 3, 3, 3))
        assert points.data() == [3, 3, 3, 3]


# ══════════════════════════════════════════════════════════════════════════
# Count and value properties
# ══════════════════════════════════════════════════════════════════════════

class TestProperties:

    @pytest.mark.parametrize("x1,y1,x2,y2", [
        (0, 0, 10, 3),
        (-3, 1, 4.7, -2),
        (1.25, 0, 1.75, 8),
        (2, 2, 2.999, 5),
        (0.5, 1, 3, 6),
        (-10, -10, -1, 7.5),
    ])
    def test_count_and_values(self, basic, x1, y1, x2, y2):
        seg = Segment(x1, y1, x2, y2)
        m = (y2 - y1) / (x2 - x1)
        b = y1 - m * x1

        points = basic.compute(seg)

        assert len(points) == math.floor(x2 - x1) + 1
        for k, (x, y) in enumerate(points):
            assert x == pytest.approx(x1 + k)
            assert y == pytest.approx(m * (x1 + k) + b)

    def test_fractional_span_not_snapped(self, basic):
        points = basic.compute(Segment(0, 0, 2.5, 5))
        assert points.labels() == [0, 1, 2]
        assert points[-1].x < 2.5

    def test_y_may_be_fractional(self, basic):
        points = basic.compute(Segment(0, 0, 2, 1))
        assert points.data() == [0, 0.5, 1]

    @pytest.mark.parametrize("x1,x2", [(5, 1), (0.1, 0), (-1, -2)])
    def test_x1_greater_than_x2_is_empty(self, basic, x1, x2):
        assert len(basic.compute(Segment(x1, 0, x2, 10))) == 0


# ══════════════════════════════════════════════════════════════════════════
# Statelessness / immutability
# ══════════════════════════════════════════════════════════════════════════

class TestPurity:

    def test_repeat_calls_give_equal_fresh_results(self, basic, diagonal):
        a = basic.compute(diagonal)
        b = basic.compute(diagonal)
        assert a == b
        assert a is not b

    def test_result_is_frozen(self, basic, diagonal):
        points = basic.compute(diagonal)
        with pytest.raises(dataclasses.FrozenInstanceError):
            points.points = ()
        with pytest.raises(AttributeError):
            points[0].x = 10


# ══════════════════════════════════════════════════════════════════════════
# Large magnitudes
# ══════════════════════════════════════════════════════════════════════════

class TestLargeMagnitudes:

    def test_step_below_resolution_raises(self, basic):
        with pytest.raises(PrecisionLoss) as exc:
            basic.compute(Segment(2.0 ** 53, 0, 2.0 ** 53 + 2, 0))
        assert exc.value.mode == "basic"
        assert exc.value.at == 2.0 ** 53

    def test_just_below_limit_still_walks(self, basic):
        start = 2.0 ** 52
        points = basic.compute(Segment(start, 0, start + 2, 2))
        assert points.labels() == [start, start + 1, start + 2]

    def test_overflowing_span_rejected(self):
        with pytest.raises(NonFiniteInput):
            Segment(-1e308, 0, 1e308, 0)
