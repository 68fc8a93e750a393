"""
Display collaborator: one chart plus the two mode-keyed result tables.

Visibility is driven by a single DisplayState, so at most one table is
visible and it always matches the rasterizer that produced the points.
"""

import logging
from typing import Optional

from models.mode import DisplayState, Mode
from models.point import PointSequence
from visualization.chart import LineChart
from visualization.results_table import format_results_table

logger = logging.getLogger(__name__)


class ResultsDisplay:

    def __init__(self, chart: Optional[LineChart] = None):
        self.chart = chart if chart is not None else LineChart()
        self.state = DisplayState.IDLE
        self.points = PointSequence.empty()

    def show(self, mode: Mode, points: PointSequence):
        """Replace whatever is shown with `points` from `mode`."""
        self.chart.reset()
        self.chart.set_points(points)
        self.points = points
        self.state = DisplayState.for_mode(mode)
        logger.info("Displaying %d %s points", len(points), mode.value)

    def clear(self):
        """Empty the chart and hide both tables."""
        self.chart.reset()
        self.points = PointSequence.empty()
        self.state = DisplayState.IDLE
        logger.info("Display cleared")

    @property
    def visible_table(self) -> Optional[Mode]:
        return self.state.mode

    def is_table_visible(self, mode: Mode) -> bool:
        return self.state.mode is mode

    def render_table(self) -> str:
        """Text of the visible table, '' when idle."""
        mode = self.visible_table
        if mode is None:
            return ""
        return format_results_table(mode, self.points)
