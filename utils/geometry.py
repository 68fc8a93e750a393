"""
This module provides:
    - slope_intercept            (y = m x + b from two points)
    - dda_steps                  (DDA loop bound)
    - round_half_away_from_zero  (tie rule used for DDA grid snapping)
"""

from decimal import Decimal, ROUND_HALF_UP


# ----------------------------------------------------------------------
#  SLOPE / INTERCEPT
# ----------------------------------------------------------------------

def slope_intercept(x1, y1, x2, y2):
    """
    Compute the line through (x1, y1) and (x2, y2) as:
        y = m x + b

    Returns:
        (m, b)

    Raises ZeroDivisionError when x1 == x2 (vertical line).
    """
    m = (y2 - y1) / (x2 - x1)
    b = y1 - m * x1
    return m, b


# ----------------------------------------------------------------------
#  DDA STEP COUNT
# ----------------------------------------------------------------------

def dda_steps(dx, dy):
    """
    steps = max(|dx|, |dy|)

    Not rounded: the caller loops with integer k while k <= steps, which
    emits floor(steps) + 1 points.
    """
    return max(abs(dx), abs(dy))


# ----------------------------------------------------------------------
#  ROUNDING
# ----------------------------------------------------------------------

def round_half_away_from_zero(value) -> int:
    """
    Round to the nearest integer, ties away from zero:
        0.5 → 1, 1.5 → 2, 2.5 → 3, -0.5 → -1

    Python's round() uses ties-to-even (0.5 → 0), which would not match the
    expected DDA output. Decimal(value) is the exact binary value of the
    float, so 0.49999999999999994 still rounds down, and to_integral_value
    has no precision limit (1e30 rounds fine).
    """
    # ROUND_HALF_UP in decimal means "half away from zero"
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))
