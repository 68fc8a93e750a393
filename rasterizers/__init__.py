"""
Rasterizers Package

Two interchangeable point generators for a straight segment:
- LineEquationRasterizer  (basic, y = m x + b at unit x steps)
- DDARasterizer           (incremental DDA with grid rounding)

Both are stateless; get_rasterizer(mode) returns the one for a Mode.
"""

from models.mode import Mode

from .line_equation import LineEquationRasterizer
from .dda import DDARasterizer


RASTERIZERS = {
    Mode.BASIC: LineEquationRasterizer,
    Mode.DDA: DDARasterizer,
}


def get_rasterizer(mode: Mode):
    """Instantiate the rasterizer registered for `mode`."""
    return RASTERIZERS[mode]()


__all__ = [
    "LineEquationRasterizer",
    "DDARasterizer",
    "RASTERIZERS",
    "get_rasterizer",
]
