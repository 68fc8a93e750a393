"""
Line-chart rendering for a point sequence.

This module provides:
    • LineChart.set_points(points)
    • LineChart.reset()
    • LineChart.render() → BGR numpy image

The chart owns its render state (labels = x values, data = y values) and is
the only object in the system that mutates it. The x axis is categorical:
samples are spaced evenly by index and labelled with their x value.
"""

import logging
import math
from typing import List, Optional

import cv2
import numpy as np

from config import get_active_params
from models.point import PointSequence

logger = logging.getLogger(__name__)

FONT = cv2.FONT_HERSHEY_SIMPLEX
FONT_SCALE = 0.35


def _fmt(value) -> str:
    return f"{value:g}"


class LineChart:
    """
    Mutable chart state plus an OpenCV renderer.

    Args:
        width / height: canvas size in pixels (defaults from config)
        title: caption drawn above the plot area
    """

    def __init__(self, width: Optional[int] = None, height: Optional[int] = None,
                 title: Optional[str] = None):
        params = get_active_params()
        self.params = params
        self.width = int(width or params["CHART_WIDTH"])
        self.height = int(height or params["CHART_HEIGHT"])
        self.margin = int(params["CHART_MARGIN"])
        self.title = title if title is not None else params["CHART_TITLE"]

        self.labels: List = []
        self.data: List = []

    # ---------------------------------------------------------------------
    #  State
    # ---------------------------------------------------------------------

    def set_points(self, points: PointSequence):
        """Replace the plotted series with `points`."""
        self.labels = points.labels()
        self.data = points.data()

    def reset(self):
        """Empty labels and data set."""
        self.labels = []
        self.data = []

    @property
    def is_empty(self) -> bool:
        return not self.data

    # ---------------------------------------------------------------------
    #  Coordinate mapping
    # ---------------------------------------------------------------------

    def _plot_box(self):
        m = self.margin
        return m, m, self.width - m, self.height - m   # left, top, right, bottom

    def _y_range(self):
        lo, hi = float(min(self.data)), float(max(self.data))
        if lo == hi:
            # flat series, center it
            lo, hi = lo - 1.0, hi + 1.0
        return lo, hi

    def to_pixels(self) -> np.ndarray:
        """
        Pixel position of every sample as an (n, 2) int32 array.

        x: evenly spaced by index (single sample → centered)
        y: linear in value, min at the bottom edge and max at the top edge
        """
        n = len(self.data)
        if n == 0:
            return np.empty((0, 2), dtype=np.int32)

        left, top, right, bottom = self._plot_box()

        if n == 1:
            px = np.array([(left + right) / 2.0])
        else:
            px = left + np.arange(n) * (right - left) / (n - 1)

        lo, hi = self._y_range()
        ys = np.asarray(self.data, dtype=float)
        py = bottom - (ys - lo) / (hi - lo) * (bottom - top)

        return np.round(np.column_stack([px, py])).astype(np.int32)

    # ---------------------------------------------------------------------
    #  Rendering
    # ---------------------------------------------------------------------

    def _draw_axes(self, canvas):
        p = self.params
        left, top, right, bottom = self._plot_box()
        axis, text = p["COLOR_AXIS"], p["COLOR_TEXT"]

        cv2.line(canvas, (left, bottom), (right, bottom), axis, 1)
        cv2.line(canvas, (left, top), (left, bottom), axis, 1)

        cv2.putText(canvas, "X", ((left + right) // 2, self.height - 4),
                    FONT, FONT_SCALE, text, 1, cv2.LINE_AA)
        cv2.putText(canvas, "Y", (4, (top + bottom) // 2),
                    FONT, FONT_SCALE, text, 1, cv2.LINE_AA)
        if self.title:
            cv2.putText(canvas, self.title, (left, max(10, top - 10)),
                        FONT, FONT_SCALE, text, 1, cv2.LINE_AA)

    def _draw_ticks(self, canvas, pixels):
        p = self.params
        left, top, right, bottom = self._plot_box()
        text = p["COLOR_TEXT"]

        # x ticks: at most CHART_MAX_TICKS labels, always the first one
        stride = max(1, math.ceil(len(self.labels) / p["CHART_MAX_TICKS"]))
        for i in range(0, len(self.labels), stride):
            px = int(pixels[i][0])
            cv2.line(canvas, (px, bottom), (px, bottom + 3), p["COLOR_AXIS"], 1)
            cv2.putText(canvas, _fmt(self.labels[i]), (px - 6, bottom + 14),
                        FONT, FONT_SCALE, text, 1, cv2.LINE_AA)

        # y ticks: range ends
        lo, hi = self._y_range()
        cv2.putText(canvas, _fmt(hi), (2, top + 4), FONT, FONT_SCALE, text, 1, cv2.LINE_AA)
        cv2.putText(canvas, _fmt(lo), (2, bottom), FONT, FONT_SCALE, text, 1, cv2.LINE_AA)

    def render(self) -> np.ndarray:
        """
        Draw the current state onto a fresh canvas.

        Returns:
            (height, width, 3) uint8 BGR image
        """
        p = self.params
        canvas = np.full((self.height, self.width, 3), p["COLOR_BACKGROUND"], dtype=np.uint8)
        self._draw_axes(canvas)

        if self.is_empty:
            return canvas

        pixels = self.to_pixels()
        series = p["COLOR_SERIES"]

        if len(pixels) > 1:
            cv2.polylines(canvas, [pixels.reshape(-1, 1, 2)], False, series,
                          p["CHART_LINE_THICKNESS"], cv2.LINE_AA)
        for px, py in pixels:
            cv2.circle(canvas, (int(px), int(py)), p["CHART_POINT_RADIUS"], series, cv2.FILLED)

        self._draw_ticks(canvas, pixels)
        logger.debug("Rendered chart with %d points", len(pixels))
        return canvas
