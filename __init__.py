"""
Line Rasterization Package

Computes discrete point sequences approximating a straight segment between
two endpoints, using:

- Basic slope-intercept evaluation (y = m x + b at unit x steps)
- Digital Differential Analyzer (DDA) stepping with grid rounding
- A coordinator and display layer (chart image + result tables)
"""
__all__ = [
    "config",
    "main",
    "coordinator",
    "models",
    "rasterizers",
    "utils",
    "visualization",
]
